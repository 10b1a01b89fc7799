#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing the concept markdown dialect."""
# src/conceptmd/options/dialect.py

from __future__ import annotations

from dataclasses import dataclass, field

from conceptmd.constants import (
    DEFAULT_PARSE_COMMENTS,
    DEFAULT_PARSE_CONCEPT_ANCHORS,
    DEFAULT_ROOT_LIST_INDENTS,
    DEFAULT_SUBLIST_INDENT_OFFSETS,
)
from conceptmd.options.base import BaseParserOptions


@dataclass(frozen=True)
class DialectParserOptions(BaseParserOptions):
    """Configuration options for dialect-to-AST parsing.

    Parameters
    ----------
    root_list_indents : tuple of int, default (2, 1, 0)
        Indentation widths a root list may use, tried in order. A list commits
        to the first width whose first item parses.
    sublist_indent_offsets : tuple of int, default (3, 2)
        Extra indentation of a nested list relative to its parent list, tried
        in order.
    parse_comments : bool, default True
        Whether ``<!-- ... -->`` blocks become Comment elements. When False
        they are read as paragraph text.
    parse_concept_anchors : bool, default True
        Whether ``[label](@id)`` produces a ConceptAnchor. When False the
        ``@`` stays part of an ordinary href.

    """

    root_list_indents: tuple[int, ...] = field(
        default=DEFAULT_ROOT_LIST_INDENTS,
        metadata={"help": "Indentation widths accepted for root list items, tried in order"},
    )
    sublist_indent_offsets: tuple[int, ...] = field(
        default=DEFAULT_SUBLIST_INDENT_OFFSETS,
        metadata={"help": "Extra indentation of nested lists relative to their parent, tried in order"},
    )
    parse_comments: bool = field(
        default=DEFAULT_PARSE_COMMENTS,
        metadata={"help": "Parse <!-- --> blocks as Comment elements"},
    )
    parse_concept_anchors: bool = field(
        default=DEFAULT_PARSE_CONCEPT_ANCHORS,
        metadata={"help": "Parse [label](@id) as concept anchors"},
    )

    def __post_init__(self) -> None:
        """Validate indentation settings.

        Raises
        ------
        ValueError
            If an indentation tuple is empty, a root indent is negative, or a
            sublist offset is not positive.

        """
        super().__post_init__()

        if not self.root_list_indents:
            raise ValueError("root_list_indents must contain at least one width")
        if any(width < 0 for width in self.root_list_indents):
            raise ValueError(f"root_list_indents must be non-negative, got {self.root_list_indents}")

        if not self.sublist_indent_offsets:
            raise ValueError("sublist_indent_offsets must contain at least one offset")
        # A zero offset turns every following sibling into a sublist
        if any(offset <= 0 for offset in self.sublist_indent_offsets):
            raise ValueError(f"sublist_indent_offsets must be positive, got {self.sublist_indent_offsets}")
