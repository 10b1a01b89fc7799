#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsing/blocks.py
"""Block grammar: headings, code fences, comments, lists and paragraphs.

:class:`BlockGrammar` binds the block parsers to one set of
:class:`~conceptmd.options.DialectParserOptions`. Each ``parse_*`` method is a
parser in the combinator sense: it takes ``(text, pos)`` and returns
``(node, new_pos)`` or raises :class:`ParseFailure`.

Elements are tried in a fixed order (heading, list, code fence, comment,
paragraph) and the first that matches wins.
"""

from __future__ import annotations

import logging
import re
from functools import partial
from typing import Any

from conceptmd.ast.nodes import CodeFence, Comment, Element, Heading, List, ListItem, Span
from conceptmd.constants import (
    CODE_FENCE,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    HEADING_MARKER,
    MAX_HEADING_LEVEL,
    NEWLINE,
    ORDERED_MARKER_SUFFIX,
    UNORDERED_MARKERS,
)
from conceptmd.options.dialect import DialectParserOptions
from conceptmd.parsing.combinators import (
    ParseFailure,
    Parser,
    choice,
    literal,
    many1,
    mapped,
    optional,
    regex,
)
from conceptmd.parsing.inline import parse_span
from conceptmd.parsing.stops import NEWLINE_STOP, StopSet

logger = logging.getLogger(__name__)

_leading_blank_lines = regex(r"\n*", "blank lines")
_spaces = regex(r" *", "spaces")
_heading_level = mapped(
    choice(*(literal(HEADING_MARKER * level, f"level {level} heading") for level in range(MAX_HEADING_LEVEL, 0, -1))),
    len,
)
_fence_open = literal(CODE_FENCE, "code fence")
_comment_open = literal(COMMENT_OPEN, "comment")
_optional_newline = optional(literal(NEWLINE))

_unordered_marker = choice(*(literal(marker, "list marker") for marker in UNORDERED_MARKERS))
_ordered_marker = regex(
    r"(?:[0-9]+|[a-z]+)" + re.escape(ORDERED_MARKER_SUFFIX),
    "ordered list marker",
)

_LINE_STOPS = StopSet(NEWLINE_STOP)
_PARAGRAPH_STOPS = StopSet()


class BlockGrammar:
    """Element parsers configured by dialect options.

    Parameters
    ----------
    options : DialectParserOptions
        Indentation widths and optional constructs

    """

    def __init__(self, options: DialectParserOptions) -> None:
        """Build the element choice for *options*."""
        self.options = options

        alternatives: list[Parser[Any]] = [self.parse_heading, self.parse_list, self.parse_code_fence]
        if options.parse_comments:
            alternatives.append(self.parse_comment)
        alternatives.append(self.parse_paragraph)
        self._element = choice(*alternatives)

        self._root_lists = choice(*(partial(self._parse_list_at, width=width) for width in options.root_list_indents))

    # ------------------------------------------------------------------
    # Spans
    # ------------------------------------------------------------------

    def _span(self, text: str, pos: int, stops: StopSet) -> tuple[Span, int]:
        return parse_span(text, pos, stops, concept_anchors=self.options.parse_concept_anchors)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def parse_element(self, text: str, pos: int) -> tuple[Element, int]:
        """Parse the next element at *pos*."""
        return self._element(text, pos)

    def parse_heading(self, text: str, pos: int) -> tuple[Heading, int]:
        """Parse ``#`` to ``######`` followed by a single-line span.

        The longest marker wins, so six marks are never read as one mark plus
        leftover text. The terminating newline is consumed.
        """
        level, pos = _heading_level(text, pos)
        _, pos = _spaces(text, pos)
        span, pos = self._span(text, pos, _LINE_STOPS)
        return Heading(level=level, span=span), pos

    def parse_code_fence(self, text: str, pos: int) -> tuple[CodeFence, int]:
        """Parse a fenced code block.

        The tag is the rest of the opening line, kept verbatim and omitted
        only when empty. The body runs to the next fence, whatever it
        contains, and is trimmed.
        """
        _, pos = _leading_blank_lines(text, pos)
        _, pos = _fence_open(text, pos)

        tag_end = text.find(NEWLINE, pos)
        if tag_end == -1:
            raise ParseFailure(len(text), "newline after code fence")
        file_type = text[pos:tag_end] or None

        body_start = tag_end + len(NEWLINE)
        body_end = text.find(CODE_FENCE, body_start)
        if body_end == -1:
            raise ParseFailure(len(text), "closing code fence")

        return CodeFence(body=text[body_start:body_end].strip(), file_type=file_type), body_end + len(CODE_FENCE)

    def parse_comment(self, text: str, pos: int) -> tuple[Comment, int]:
        """Parse ``<!-- ... -->`` plus at most one trailing newline."""
        _, pos = _comment_open(text, pos)

        close = text.find(COMMENT_CLOSE, pos)
        if close == -1:
            raise ParseFailure(len(text), "end of comment")

        _, end = _optional_newline(text, close + len(COMMENT_CLOSE))
        return Comment(text=text[pos:close].strip()), end

    def parse_paragraph(self, text: str, pos: int) -> tuple[Span, int]:
        """Parse a bare span running to the end of input or a blank line."""
        return self._span(text, pos, _PARAGRAPH_STOPS)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def parse_list(self, text: str, pos: int) -> tuple[List, int]:
        """Parse a root list at the first configured indentation that fits."""
        return self._root_lists(text, pos)

    def _parse_list_at(self, text: str, pos: int, width: int) -> tuple[List, int]:
        """Parse a list whose items sit exactly *width* spaces in.

        Every item of one list uses the same marker kind; unordered is tried
        first. Items of the other kind end the list.
        """
        failures: list[ParseFailure] = []
        for ordered, marker in ((False, _unordered_marker), (True, _ordered_marker)):
            item = partial(self._parse_item, width=width, marker=marker)
            try:
                items, end = many1(item)(text, pos)
            except ParseFailure as failure:
                failures.append(failure)
                continue
            return List(ordered=ordered, items=items), end
        raise ParseFailure.furthest(failures)

    def _parse_item(self, text: str, pos: int, width: int, marker: Parser[str]) -> tuple[ListItem, int]:
        """Parse one item and any list nested under it."""
        _, pos = literal(" " * width, f"{width} spaces of indentation")(text, pos)
        _, pos = marker(text, pos)
        span, pos = self._span(text, pos, _LINE_STOPS)

        sublist: List | None = None
        for offset in self.options.sublist_indent_offsets:
            try:
                sublist, pos = self._parse_list_at(text, pos, width=width + offset)
            except ParseFailure:
                continue
            logger.debug("Attached sublist of %d items at indentation %d", len(sublist.items), width + offset)
            break
        return ListItem(span=span, sublist=sublist), pos


__all__ = ["BlockGrammar"]
