#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/constants.py
"""Constants and default values for the conceptmd parser.

This module centralizes the delimiters, markers, and default configuration
values used by the dialect grammar. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Boundaries - Universal stop markers
3. Inline Wraps - Emphasis and code delimiters
4. Anchors - Link and concept anchor syntax
5. Blocks - Heading, fence, comment and list syntax
6. Parser Defaults - Default values for DialectParserOptions
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TextStyle = Literal["unstyled", "bold", "italic", "bold_italic", "inline_code"]

# =============================================================================
# Boundaries
# =============================================================================

NEWLINE = "\n"
BLANK_LINE = "\n\n"

# =============================================================================
# Inline Wraps
# =============================================================================

ASTERISK = "*"
UNDERSCORE = "_"
BACKTICK = "`"

# Bold-italic wraps as (opening, closing) pairs; symmetric triple marker first,
# then the two mixed forms whose closers are the reversed openers.
BOLD_ITALIC_WRAPS: tuple[tuple[str, str], ...] = (
    ("***", "***"),
    ("**_", "_**"),
    ("_**", "**_"),
)
BOLD_MARKER = "**"

# =============================================================================
# Anchors
# =============================================================================

LABEL_OPEN = "["
LABEL_CLOSE = "]"
TARGET_OPEN = "("
TARGET_CLOSE = ")"
CONCEPT_MARKER = "@"

# =============================================================================
# Blocks
# =============================================================================

HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 6
CODE_FENCE = "```"
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
UNORDERED_MARKERS: tuple[str, ...] = ("* ", "- ")
ORDERED_MARKER_SUFFIX = ". "

# =============================================================================
# Parser Defaults
# =============================================================================

# Root list indentation widths, tried in order. Two spaces first, then one,
# then a flush-left list.
DEFAULT_ROOT_LIST_INDENTS: tuple[int, ...] = (2, 1, 0)

# Extra indentation of a nested list relative to its parent item; three aligns
# under "1. " style markers, two under "- " style markers.
DEFAULT_SUBLIST_INDENT_OFFSETS: tuple[int, ...] = (3, 2)

DEFAULT_PARSE_COMMENTS = True
DEFAULT_PARSE_CONCEPT_ANCHORS = True

# JSON schema version written by ast_to_json
AST_SCHEMA_VERSION = 1
