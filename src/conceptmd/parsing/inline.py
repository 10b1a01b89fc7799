#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/parsing/inline.py
"""Inline grammar: text runs, anchors and spans.

Text is tokenized one construct at a time, in strict priority order:

1. inline code (`` `code` ``)
2. bold-italic (``***x***``, ``**_x_**``, ``_**x**_``)
3. italic (``*x*``, ``_x_``)
4. bold (``**x**``)
5. a single plain character

Single and double asterisk openers must not be followed by another asterisk,
so ``**`` and ``***`` are never read as a shorter wrap plus stray markers.
Wrap content is scanned against the surrounding stops plus the wrap's closer;
a wrap that hits any other stop first is abandoned and the next alternative
is tried. Plain characters come out one at a time and are merged into runs
once a span or label is complete.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from conceptmd.ast.nodes import (
    Anchor,
    Bold,
    BoldItalic,
    ConceptAnchor,
    InlineCode,
    Italic,
    Span,
    Text,
    Token,
    Unstyled,
)
from conceptmd.constants import (
    ASTERISK,
    BACKTICK,
    BOLD_ITALIC_WRAPS,
    BOLD_MARKER,
    CONCEPT_MARKER,
    LABEL_CLOSE,
    LABEL_OPEN,
    TARGET_CLOSE,
    TARGET_OPEN,
    UNDERSCORE,
)
from conceptmd.parsing.combinators import ParseFailure, Parser, literal, not_followed_by, regex, sequence
from conceptmd.parsing.stops import Stop, StopSet, scan_until

logger = logging.getLogger(__name__)

T = TypeVar("T")

TextParser = Callable[[str, int, StopSet], tuple[Text, int]]

_WRAP_STARTS = frozenset(BACKTICK + ASTERISK + UNDERSCORE)
_no_asterisk = not_followed_by(literal(ASTERISK), "no further '*'")
_spaces = regex(r" *", "spaces")
_label_open = literal(LABEL_OPEN)
_label_close = literal(LABEL_CLOSE)
_target_open = literal(TARGET_OPEN)


def _wrap(opener: str, closer: str, node_class: type[Text], guard_asterisk: bool = False) -> TextParser:
    """Build a parser for text enclosed by *opener* and *closer*."""
    open_parser: Parser[object] = sequence(literal(opener), _no_asterisk) if guard_asterisk else literal(opener)

    def parse(text: str, pos: int, stops: StopSet) -> tuple[Text, int]:
        _, pos = open_parser(text, pos)
        if stops.find_closer(text, closer, pos) == -1:
            raise ParseFailure(pos, f"closing {closer!r}")
        closing_stop = Stop.literal(closer)
        content, end, stop = scan_until(text, pos, stops.extend(closing_stop))
        if stop is not closing_stop:
            raise ParseFailure(pos + len(content), f"closing {closer!r}")
        return node_class(content), end

    return parse


_TEXT_WRAPS: tuple[TextParser, ...] = (
    _wrap(BACKTICK, BACKTICK, InlineCode),
    *(_wrap(opener, closer, BoldItalic) for opener, closer in BOLD_ITALIC_WRAPS),
    _wrap(ASTERISK, ASTERISK, Italic, guard_asterisk=True),
    _wrap(UNDERSCORE, UNDERSCORE, Italic),
    _wrap(BOLD_MARKER, BOLD_MARKER, Bold, guard_asterisk=True),
)


def parse_text(text: str, pos: int, stops: StopSet) -> tuple[Text, int]:
    """Parse one text token: a wrap, or else a single plain character.

    Raises
    ------
    ParseFailure
        If a stop matches at *pos*

    """
    failures: list[ParseFailure] = []
    if pos < len(text) and text[pos] in _WRAP_STARTS:
        for wrap in _TEXT_WRAPS:
            try:
                return wrap(text, pos, stops)
            except ParseFailure as failure:
                failures.append(failure)

    if stops.matches(text, pos):
        failures.append(ParseFailure(pos, "text"))
        raise ParseFailure.furthest(failures)
    return Unstyled(text[pos]), pos + 1


def merge_runs(tokens: list[T], extract: Callable[[T], Optional[str]], rebuild: Callable[[str], T]) -> list[T]:
    """Merge adjacent plain runs, left to right.

    Parameters
    ----------
    tokens : list
        Tokens in order
    extract : callable
        Returns the plain text carried by a token, or None for any other token
    rebuild : callable
        Builds a plain token from merged text

    Returns
    -------
    list
        Tokens with every maximal sequence of plain tokens replaced by one

    """
    merged: list[T] = []
    pending: list[str] = []
    for token in tokens:
        plain = extract(token)
        if plain is not None:
            pending.append(plain)
            continue
        if pending:
            merged.append(rebuild("".join(pending)))
            pending = []
        merged.append(token)
    if pending:
        merged.append(rebuild("".join(pending)))
    return merged


def _plain_content(token: Token) -> Optional[str]:
    return token.content if isinstance(token, Unstyled) else None


def merge_tokens(tokens: list[T]) -> list[T]:
    """Merge adjacent Unstyled tokens of a span or label."""
    return merge_runs(tokens, _plain_content, Unstyled)  # type: ignore[arg-type]


def scan_tokens(
    text: str,
    pos: int,
    stops: StopSet,
    token_parser: Callable[[str, int, StopSet], tuple[T, int]],
) -> tuple[list[T], int, Stop]:
    """Parse tokens until a stop matches.

    Returns
    -------
    tuple of (list, int, Stop)
        The tokens (unmerged), the position after the matched stop, and the
        stop itself

    Raises
    ------
    ParseFailure
        If a stop matches before any token was parsed

    """
    tokens: list[T] = []
    while True:
        hit = stops.match(text, pos)
        if hit is not None:
            break
        token, pos = token_parser(text, pos, stops)
        tokens.append(token)

    if not tokens:
        raise ParseFailure(pos, "text")
    stop, end = hit
    return tokens, end, stop


def _has_anchor_shape(text: str, pos: int, stops: StopSet) -> bool:
    """Check for a reachable ``](...)`` after the label opener at *pos*.

    Only string searches are used, so a stray ``[`` is rejected without
    scanning its would-be label token by token.
    """
    label_end = stops.find_closer(text, LABEL_CLOSE, pos)
    if label_end == -1:
        return False
    _, target_start = _spaces(text, label_end + len(LABEL_CLOSE))
    if not text.startswith(TARGET_OPEN, target_start):
        return False
    return stops.find_closer(text, TARGET_CLOSE, target_start) != -1


def parse_anchor(
    text: str,
    pos: int,
    stops: StopSet,
    concept_anchors: bool = True,
) -> tuple[Anchor | ConceptAnchor, int]:
    """Parse ``[label](href)`` or ``[label](@concept_id)``.

    The label is text only (no nested anchors) and ends at the first ``]``;
    the target ends at the first ``)``. Neither terminator can be escaped.
    Both scans also honor the enclosing *stops*, so an anchor never extends
    past the element it appears in.

    Raises
    ------
    ParseFailure
        If any part of the anchor is missing; the caller falls back to text

    """
    _, pos = _label_open(text, pos)
    if not _has_anchor_shape(text, pos, stops):
        raise ParseFailure(pos, f"{LABEL_CLOSE!r} and {TARGET_CLOSE!r}")

    label_close = Stop.lookahead(LABEL_CLOSE)
    label, pos, stop = scan_tokens(text, pos, stops.extend(label_close), parse_text)
    if stop is not label_close:
        raise ParseFailure(pos, repr(LABEL_CLOSE))
    _, pos = _label_close(text, pos)
    _, pos = _spaces(text, pos)
    _, pos = _target_open(text, pos)

    is_concept = concept_anchors and text.startswith(CONCEPT_MARKER, pos)
    if is_concept:
        pos += len(CONCEPT_MARKER)

    target_close = Stop.literal(TARGET_CLOSE)
    target, end, stop = scan_until(text, pos, stops.extend(target_close))
    if stop is not target_close:
        raise ParseFailure(pos + len(target), repr(TARGET_CLOSE))

    merged_label = merge_tokens(label)
    if is_concept:
        return ConceptAnchor(label=merged_label, concept_id=target), end
    return Anchor(label=merged_label, href=target), end


def parse_token(text: str, pos: int, stops: StopSet, concept_anchors: bool = True) -> tuple[Token, int]:
    """Parse one span token, trying an anchor before text."""
    if text.startswith(LABEL_OPEN, pos):
        try:
            return parse_anchor(text, pos, stops, concept_anchors)
        except ParseFailure as failure:
            logger.debug("No anchor at offset %d: %s", pos, failure)
    return parse_text(text, pos, stops)


def parse_span(text: str, pos: int, stops: StopSet, concept_anchors: bool = True) -> tuple[Span, int]:
    """Parse a non-empty span ending at the first matching stop.

    The matched stop is consumed (or, for a lookahead stop, left in place).

    Raises
    ------
    ParseFailure
        If a stop matches at *pos*

    """
    tokens, end, _ = scan_tokens(
        text,
        pos,
        stops,
        lambda t, p, s: parse_token(t, p, s, concept_anchors),
    )
    return Span(merge_tokens(tokens)), end


__all__ = [
    "parse_text",
    "merge_runs",
    "merge_tokens",
    "scan_tokens",
    "parse_anchor",
    "parse_token",
    "parse_span",
]
