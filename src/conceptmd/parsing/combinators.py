#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsing/combinators.py
"""Backtracking parser combinators.

A parser is any callable ``(text, pos) -> (value, new_pos)``. A parser that
does not match raises :class:`ParseFailure` carrying the position it reached
and what it expected there. Because a parser never mutates anything and the
cursor is a plain integer, backtracking is free: a caller that catches the
failure simply retries from the position it already holds.

Alternatives are tried in order and the first full match wins
(:func:`choice`); when every alternative fails, the failure that got furthest
into the input is the one reported.

Examples
--------
    >>> digits = regex(r"[0-9]+", "digits")
    >>> marker = sequence(digits, literal(". "))
    >>> marker("12. item", 0)
    (('12', '. '), 4)

"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], tuple[T, int]]


class ParseFailure(Exception):
    """A parser did not match.

    Parameters
    ----------
    position : int
        Furthest offset reached before the mismatch
    expected : str or iterable of str
        Description(s) of what would have matched at *position*

    """

    def __init__(self, position: int, expected: Union[str, Iterable[str]]):
        """Initialize the failure with its position and expectations."""
        if isinstance(expected, str):
            expected = (expected,)
        self.position = position
        self.expected: tuple[str, ...] = tuple(dict.fromkeys(expected))
        super().__init__(f"expected {' or '.join(self.expected) or 'input'} at offset {position}")

    @classmethod
    def furthest(cls, failures: Iterable[ParseFailure]) -> ParseFailure:
        """Merge failures, keeping those that reached the furthest position.

        Expectations of failures sharing the furthest position are combined
        in order.

        Raises
        ------
        ValueError
            If *failures* is empty

        """
        failures = list(failures)
        if not failures:
            raise ValueError("Cannot merge an empty collection of failures")
        position = max(failure.position for failure in failures)
        expected = [e for failure in failures if failure.position == position for e in failure.expected]
        return cls(position, expected)


def literal(token: str, expected: Optional[str] = None) -> Parser[str]:
    """Match *token* exactly."""
    description = expected or repr(token)

    def parse(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(token, pos):
            return token, pos + len(token)
        raise ParseFailure(pos, description)

    return parse


def regex(pattern: Union[str, re.Pattern[str]], expected: str) -> Parser[str]:
    """Match a regular expression anchored at the cursor; yields the matched text."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def parse(text: str, pos: int) -> tuple[str, int]:
        match = compiled.match(text, pos)
        if match is None:
            raise ParseFailure(pos, expected)
        return match.group(0), match.end()

    return parse


def end_of_input(text: str, pos: int) -> tuple[None, int]:
    """Match only at the end of the input."""
    if pos >= len(text):
        return None, pos
    raise ParseFailure(pos, "end of input")


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Ordered choice: the first parser that matches wins."""
    if not parsers:
        raise ValueError("choice() requires at least one parser")

    def parse(text: str, pos: int) -> tuple[Any, int]:
        failures: list[ParseFailure] = []
        for parser in parsers:
            try:
                return parser(text, pos)
            except ParseFailure as failure:
                failures.append(failure)
        raise ParseFailure.furthest(failures)

    return parse


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers one after another; yields a tuple of their values."""

    def parse(text: str, pos: int) -> tuple[tuple[Any, ...], int]:
        values = []
        for parser in parsers:
            value, pos = parser(text, pos)
            values.append(value)
        return tuple(values), pos

    return parse


def optional(parser: Parser[T], default: Optional[U] = None) -> Parser[Union[T, Optional[U]]]:
    """Match *parser* or nothing; yields *default* when it does not match."""

    def parse(text: str, pos: int) -> tuple[Union[T, Optional[U]], int]:
        try:
            return parser(text, pos)
        except ParseFailure:
            return default, pos

    return parse


def many(parser: Parser[T]) -> Parser[list[T]]:
    """Match *parser* zero or more times.

    Repetition also stops at a match that consumed nothing, so a parser that
    can succeed without advancing does not loop forever.
    """

    def parse(text: str, pos: int) -> tuple[list[T], int]:
        values: list[T] = []
        while True:
            try:
                value, new_pos = parser(text, pos)
            except ParseFailure:
                return values, pos
            if new_pos == pos:
                return values, pos
            values.append(value)
            pos = new_pos

    return parse


def many1(parser: Parser[T]) -> Parser[list[T]]:
    """Match *parser* one or more times."""
    repeat = many(parser)

    def parse(text: str, pos: int) -> tuple[list[T], int]:
        first, pos = parser(text, pos)
        rest, pos = repeat(text, pos)
        return [first, *rest], pos

    return parse


def lookahead(parser: Parser[T]) -> Parser[T]:
    """Match *parser* without consuming input."""

    def parse(text: str, pos: int) -> tuple[T, int]:
        value, _ = parser(text, pos)
        return value, pos

    return parse


def not_followed_by(parser: Parser[Any], expected: str) -> Parser[None]:
    """Succeed, consuming nothing, only where *parser* does not match."""

    def parse(text: str, pos: int) -> tuple[None, int]:
        try:
            parser(text, pos)
        except ParseFailure:
            return None, pos
        raise ParseFailure(pos, expected)

    return parse


def mapped(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of *parser* with *fn*."""

    def parse(text: str, pos: int) -> tuple[U, int]:
        value, pos = parser(text, pos)
        return fn(value), pos

    return parse


__all__ = [
    "Parser",
    "ParseFailure",
    "literal",
    "regex",
    "end_of_input",
    "choice",
    "sequence",
    "optional",
    "many",
    "many1",
    "lookahead",
    "not_followed_by",
    "mapped",
]
