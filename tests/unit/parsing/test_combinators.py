#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsing/test_combinators.py
"""Unit tests for the backtracking combinator toolkit."""

import pytest

from conceptmd.parsing.combinators import (
    ParseFailure,
    choice,
    end_of_input,
    literal,
    lookahead,
    many,
    many1,
    mapped,
    not_followed_by,
    optional,
    regex,
    sequence,
)


@pytest.mark.unit
class TestPrimitives:
    """Tests for literal, regex and end_of_input."""

    def test_literal_match_advances(self):
        """A matching literal returns itself and the position after it."""
        assert literal("ab")("xxab", 2) == ("ab", 4)

    def test_literal_mismatch_reports_position(self):
        """A mismatching literal fails at the cursor with its description."""
        with pytest.raises(ParseFailure) as exc_info:
            literal("ab", "greeting")("xxac", 2)
        assert exc_info.value.position == 2
        assert exc_info.value.expected == ("greeting",)

    def test_regex_is_anchored_at_cursor(self):
        """Regex matching starts exactly at the cursor."""
        digits = regex(r"[0-9]+", "digits")
        assert digits("ab12c", 2) == ("12", 4)
        with pytest.raises(ParseFailure):
            digits("ab12c", 0)

    def test_end_of_input(self):
        """end_of_input only matches past the last character."""
        assert end_of_input("ab", 2) == (None, 2)
        with pytest.raises(ParseFailure):
            end_of_input("ab", 1)


@pytest.mark.unit
class TestChoice:
    """Tests for ordered choice."""

    def test_first_match_wins(self):
        """The first alternative that matches is used even if a later one matches more."""
        parser = choice(literal("a"), literal("ab"))
        assert parser("ab", 0) == ("a", 1)

    def test_falls_through_to_later_alternative(self):
        """A failed alternative is invisible to the next one."""
        parser = choice(sequence(literal("a"), literal("x")), literal("ab"))
        assert parser("ab", 0) == ("ab", 2)

    def test_reports_furthest_failure(self):
        """When all alternatives fail, the one that got furthest is reported."""
        parser = choice(literal("z"), sequence(literal("a"), literal("x")), sequence(literal("a"), literal("y")))
        with pytest.raises(ParseFailure) as exc_info:
            parser("ab", 0)
        assert exc_info.value.position == 1
        assert exc_info.value.expected == ("'x'", "'y'")

    def test_requires_alternatives(self):
        """An empty choice is a programming error."""
        with pytest.raises(ValueError):
            choice()


@pytest.mark.unit
class TestRepetitionAndLookahead:
    """Tests for many, many1, optional, lookahead and not_followed_by."""

    def test_many_collects_until_failure(self):
        """many stops at the first mismatch without failing."""
        assert many(literal("a"))("aab", 0) == (["a", "a"], 2)
        assert many(literal("a"))("b", 0) == ([], 0)

    def test_many_stops_on_zero_width_match(self):
        """A parser that matches without advancing does not loop."""
        assert many(regex(r"x*", "xs"))("abc", 0) == ([], 0)

    def test_many1_requires_one(self):
        """many1 fails when the first repetition fails."""
        assert many1(literal("a"))("aa", 0) == (["a", "a"], 2)
        with pytest.raises(ParseFailure):
            many1(literal("a"))("b", 0)

    def test_optional_yields_default(self):
        """optional returns its default and keeps the cursor on mismatch."""
        assert optional(literal("a"), default="none")("b", 0) == ("none", 0)
        assert optional(literal("a"))("a", 0) == ("a", 1)

    def test_lookahead_does_not_consume(self):
        """lookahead returns the value but not the advanced position."""
        assert lookahead(literal("ab"))("ab", 0) == ("ab", 0)

    def test_not_followed_by(self):
        """not_followed_by succeeds only where its parser fails."""
        guard = not_followed_by(literal("*"), "no asterisk")
        assert guard("a", 0) == (None, 0)
        with pytest.raises(ParseFailure) as exc_info:
            guard("*", 0)
        assert exc_info.value.expected == ("no asterisk",)

    def test_mapped(self):
        """mapped transforms the parsed value."""
        assert mapped(regex(r"[0-9]+", "digits"), int)("42", 0) == (42, 2)


@pytest.mark.unit
class TestParseFailure:
    """Tests for ParseFailure merging."""

    def test_furthest_merges_expectations_at_same_position(self):
        """Expectations at the furthest position are combined without duplicates."""
        merged = ParseFailure.furthest([ParseFailure(1, "a"), ParseFailure(3, "b"), ParseFailure(3, ["c", "b"])])
        assert merged.position == 3
        assert merged.expected == ("b", "c")

    def test_furthest_requires_failures(self):
        """Merging nothing is a programming error."""
        with pytest.raises(ValueError):
            ParseFailure.furthest([])

    def test_message_mentions_expectation(self):
        """The failure message names what was expected and where."""
        assert str(ParseFailure(4, "digits")) == "expected digits at offset 4"
