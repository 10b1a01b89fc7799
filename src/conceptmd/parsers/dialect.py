#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsers/dialect.py
"""Concept markdown to AST parser.

This module turns text written in the concept markdown dialect into a
:class:`~conceptmd.ast.Document`. The dialect supports headings, nested
lists, fenced code, comments, inline emphasis, and two kinds of anchors:
ordinary ``[label](href)`` links and ``[label](@concept_id)`` concept anchors
whose identifier is resolved later by a concept directory.

"""

from __future__ import annotations

import logging
from typing import Optional

from conceptmd.ast import Document, Element
from conceptmd.exceptions import ParsingError, ValidationError
from conceptmd.options.dialect import DialectParserOptions
from conceptmd.parsers.base import BaseParser
from conceptmd.parsing.blocks import BlockGrammar
from conceptmd.parsing.combinators import ParseFailure, regex

logger = logging.getLogger(__name__)

_blank_lines = regex(r"\n*", "blank lines")


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _line_and_column(text: str, position: int) -> tuple[int, int]:
    """Return the one-based line and column of *position* in *text*."""
    position = min(position, len(text))
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


class ConceptMarkdownParser(BaseParser):
    r"""Convert concept markdown text to an AST.

    Parameters
    ----------
    options : DialectParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = ConceptMarkdownParser()
        >>> doc = parser.parse("# Hello\n\nSee [the glossary](@glossary).")

    With options:

        >>> options = DialectParserOptions(parse_comments=False)
        >>> doc = ConceptMarkdownParser(options).parse("<!-- kept as text -->")

    """

    def __init__(self, options: DialectParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, DialectParserOptions, "concept markdown")
        options = options or DialectParserOptions()
        super().__init__(options)
        self.options: DialectParserOptions = options
        self._grammar = BlockGrammar(options)

    def parse(self, input_data: str) -> Document:
        r"""Parse concept markdown text into an AST Document.

        Parameters
        ----------
        input_data : str
            Decoded source text. ``\r\n`` and ``\r`` line endings are
            normalized to ``\n`` first.

        Returns
        -------
        Document
            AST document node; empty for empty or blank input

        Raises
        ------
        ValidationError
            If *input_data* is not a string
        ParsingError
            If some part of the input matches no element. Positions refer to
            the normalized text.

        Notes
        -----
        Nested lists are parsed recursively, so nesting depth is bounded by
        the interpreter's recursion limit: roughly 200 levels with the
        default limit of 1000. Deeper input raises :class:`ParsingError`
        with ``parsing_stage="list"`` instead of ``RecursionError``.

        """
        if not isinstance(input_data, str):
            raise ValidationError(
                f"Input must be a str, got {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=type(input_data),
            )

        text = _normalize_newlines(input_data)
        try:
            elements = self._parse_elements(text)
        except ParseFailure as failure:
            raise self._to_parsing_error(text, failure) from failure
        except RecursionError as exc:
            raise ParsingError(
                "Input nests lists too deeply to parse",
                parsing_stage="list",
                original_error=exc,
            ) from exc

        logger.debug("Parsed %d elements from %d characters", len(elements), len(text))
        return Document(children=elements)

    def _parse_elements(self, text: str) -> list[Element]:
        elements: list[Element] = []
        _, pos = _blank_lines(text, 0)
        while pos < len(text):
            element, end = self._grammar.parse_element(text, pos)
            logger.debug("Parsed %s at offsets %d-%d", type(element).__name__, pos, end)
            elements.append(element)
            _, pos = _blank_lines(text, end)
        return elements

    @staticmethod
    def _to_parsing_error(text: str, failure: ParseFailure) -> ParsingError:
        line, column = _line_and_column(text, failure.position)
        expected = ", ".join(failure.expected) or "an element"
        return ParsingError(
            f"Cannot parse input at line {line}, column {column}: expected {expected}",
            parsing_stage="element",
            position=failure.position,
            line=line,
            column=column,
            expected=failure.expected,
        )


def parse_document(text: str, options: Optional[DialectParserOptions] = None) -> Document:
    """Parse concept markdown text into an AST Document.

    Parameters
    ----------
    text : str
        Decoded source text
    options : DialectParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    """
    return ConceptMarkdownParser(options).parse(text)


__all__ = ["ConceptMarkdownParser", "parse_document"]
