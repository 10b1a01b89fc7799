"""conceptmd - a parser for the concept markdown dialect.

conceptmd reads a deliberately small markdown dialect and produces an
immutable document tree for downstream renderers. The dialect covers:

- headings (``#`` to ``######``)
- nested ordered and unordered lists
- fenced code blocks with an optional file-type tag
- ``<!-- comments -->``
- inline code, bold, italic and bold-italic text
- ordinary anchors ``[label](href)`` and concept anchors ``[label](@id)``

Concept anchors carry an opaque identifier. Resolving it (against a concept
directory, for instance) happens after parsing; use
:func:`conceptmd.ast.collect_concept_ids` to find the identifiers a document
references.

Requirements
------------
- Python 3.10+

Examples
--------
Parse a document and inspect it:

    >>> from conceptmd import parse_document
    >>> doc = parse_document("# Intro\\n\\nSee [caching](@concept-42) for **details**.")
    >>> [type(child).__name__ for child in doc.children]
    ['Heading', 'Span']

Serialize it for a renderer:

    >>> from conceptmd.ast import ast_to_json
    >>> json_str = ast_to_json(doc, indent=2)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "conceptmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from conceptmd.ast import Document, ast_to_json, collect_concept_ids, extract_text, json_to_ast  # noqa: E402
from conceptmd.exceptions import (  # noqa: E402
    ConceptMdError,
    InvalidEmptyConstructError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from conceptmd.logging_utils import configure_logging  # noqa: E402
from conceptmd.options import BaseParserOptions, DialectParserOptions  # noqa: E402
from conceptmd.parsers import BaseParser, ConceptMarkdownParser, parse_document  # noqa: E402

__all__ = [
    "__version__",
    # Parsing
    "parse_document",
    "ConceptMarkdownParser",
    "BaseParser",
    # Options
    "BaseParserOptions",
    "DialectParserOptions",
    # AST helpers
    "Document",
    "ast_to_json",
    "json_to_ast",
    "extract_text",
    "collect_concept_ids",
    # Exceptions
    "ConceptMdError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidEmptyConstructError",
    "ParsingError",
    # Logging
    "configure_logging",
]
