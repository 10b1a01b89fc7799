#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsing/stops.py
"""Boundaries that end a free-text or token scan.

A :class:`Stop` wraps a parser recognizing a terminator. A consuming stop
removes the terminator from the input when it ends a scan; a lookahead stop
leaves it in place so the caller can consume it explicitly (anchor labels
use one for ``]``).

Every scan runs against a :class:`StopSet`, which always tries the universal
boundary (end of input or a blank line) before any construct-specific stops.
Stop sets are plain values: a construct that needs an extra terminator
derives a new set with :meth:`StopSet.extend` and passes it down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from conceptmd.constants import BLANK_LINE, NEWLINE
from conceptmd.parsing.combinators import ParseFailure, Parser, choice, end_of_input, literal, lookahead


@dataclass(frozen=True, eq=False)
class Stop:
    """A terminator recognizer.

    Parameters
    ----------
    description : str
        Human-readable name used in failure messages
    parser : Parser
        Recognizes the terminator at a position
    consuming : bool, default True
        Whether a match advances past the terminator
    token : str or None, default None
        Literal text the stop matches. When set, matching is a plain string
        comparison and *parser* is not run.
    at_end : bool, default False
        Whether the stop also matches at the end of input

    """

    description: str
    parser: Parser[Any]
    consuming: bool = True
    token: Optional[str] = None
    at_end: bool = False

    @classmethod
    def literal(cls, token: str) -> Stop:
        """Build a consuming stop for a literal terminator."""
        return cls(repr(token), literal(token), consuming=True, token=token)

    @classmethod
    def lookahead(cls, token: str) -> Stop:
        """Build a non-consuming stop for a literal terminator."""
        return cls(repr(token), lookahead(literal(token)), consuming=False, token=token)

    def match(self, text: str, pos: int) -> Optional[int]:
        """Return the position after this stop at *pos*, or None if it does not match."""
        if self.at_end and pos >= len(text):
            return pos
        if self.token is not None:
            if not text.startswith(self.token, pos):
                return None
            return pos + len(self.token) if self.consuming else pos

        try:
            _, end = self.parser(text, pos)
        except ParseFailure:
            return None
        return end if self.consuming else pos

    def occurs_within(self, text: str, start: int, end: int) -> bool:
        """Whether this stop's token appears entirely inside ``text[start:end]``.

        Stops without a token cannot be searched for and always report False.
        """
        return self.token is not None and text.find(self.token, start, end) != -1


UNIVERSAL_STOP = Stop(
    "end of input or blank line",
    choice(end_of_input, literal(BLANK_LINE)),
    token=BLANK_LINE,
    at_end=True,
)
NEWLINE_STOP = Stop.literal(NEWLINE)


class StopSet:
    """Ordered set of active stops, universal boundary first.

    Parameters
    ----------
    *stops : Stop
        Construct-specific stops, tried in order after the universal one

    """

    __slots__ = ("stops",)

    def __init__(self, *stops: Stop) -> None:
        """Initialize the set with the universal stop followed by *stops*."""
        self.stops: tuple[Stop, ...] = (UNIVERSAL_STOP, *stops)

    def extend(self, *stops: Stop) -> StopSet:
        """Return a new set with *stops* tried after the current ones."""
        extended = StopSet()
        extended.stops = self.stops + stops
        return extended

    def match(self, text: str, pos: int) -> Optional[tuple[Stop, int]]:
        """Return the first stop matching at *pos* with its end position."""
        for stop in self.stops:
            end = stop.match(text, pos)
            if end is not None:
                return stop, end
        return None

    def matches(self, text: str, pos: int) -> bool:
        """Whether any stop matches at *pos*."""
        return self.match(text, pos) is not None

    def find_closer(self, text: str, closer: str, start: int) -> int:
        """Find the first *closer* at or after *start* that no stop precedes.

        Any scan from *start* ends at a stop whose token occurs before the
        closer, so such a closer can never be reached.

        Returns
        -------
        int
            Offset of the closer, or -1 if it is missing or unreachable

        """
        close = text.find(closer, start)
        if close == -1 or any(stop.occurs_within(text, start, close) for stop in self.stops):
            return -1
        return close

    @property
    def expected(self) -> tuple[str, ...]:
        """Descriptions of all stops in this set."""
        return tuple(stop.description for stop in self.stops)

    def __repr__(self) -> str:
        return f"StopSet({', '.join(self.expected)})"


def scan_until(text: str, pos: int, stops: StopSet) -> tuple[str, int, Stop]:
    """Scan raw text up to the first stop.

    Parameters
    ----------
    text : str
        Input text
    pos : int
        Offset to start scanning at
    stops : StopSet
        Active stops

    Returns
    -------
    tuple of (str, int, Stop)
        The scanned text, the position after the matched stop (or at it, for
        a lookahead stop), and the stop that ended the scan

    Raises
    ------
    ParseFailure
        If a stop matches before any character was scanned

    """
    start = pos
    while True:
        hit = stops.match(text, pos)
        if hit is not None:
            break
        pos += 1

    if pos == start:
        raise ParseFailure(start, "text")
    stop, end = hit
    return text[start:pos], end, stop


__all__ = [
    "Stop",
    "StopSet",
    "UNIVERSAL_STOP",
    "NEWLINE_STOP",
    "scan_until",
]
