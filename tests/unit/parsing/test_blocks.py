#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsing/test_blocks.py
"""Unit tests for the block grammar."""

import pytest

from conceptmd.ast import CodeFence, Comment, Heading, Italic, List, ListItem, Span, Unstyled
from conceptmd.options import DialectParserOptions
from conceptmd.parsing.blocks import BlockGrammar
from conceptmd.parsing.combinators import ParseFailure


@pytest.fixture
def grammar() -> BlockGrammar:
    """Provide a grammar with default options."""
    return BlockGrammar(DialectParserOptions())


def leaf(text):
    """Build a leaf list item holding plain text."""
    return ListItem(span=Span([Unstyled(text)]))


@pytest.mark.unit
class TestHeading:
    """Tests for heading parsing."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, grammar, level):
        """Each marker count gives its level."""
        heading, _ = grammar.parse_heading("#" * level + " Title", 0)
        assert heading == Heading(level=level, span=Span([Unstyled("Title")]))

    def test_longest_marker_wins(self, grammar):
        """Six marks are a level 6 heading, never level 1 with leftover marks."""
        heading, _ = grammar.parse_heading("###### x", 0)
        assert heading.level == 6
        assert heading.span == Span([Unstyled("x")])

    def test_seven_marks(self, grammar):
        """Marks beyond six become heading text."""
        heading, _ = grammar.parse_heading("####### x", 0)
        assert heading.level == 6
        assert heading.span == Span([Unstyled("# x")])

    def test_space_is_optional(self, grammar):
        """The text may follow the marks directly."""
        heading, _ = grammar.parse_heading("#Title", 0)
        assert heading.span == Span([Unstyled("Title")])

    def test_consumes_newline(self, grammar):
        """The heading ends at and consumes its newline."""
        heading, end = grammar.parse_heading("# A *b*\nnext", 0)
        assert heading.span == Span([Unstyled("A "), Italic("b")])
        assert end == 8

    def test_empty_heading_fails(self, grammar):
        """A heading needs text."""
        with pytest.raises(ParseFailure):
            grammar.parse_heading("###\nx", 0)


@pytest.mark.unit
class TestCodeFence:
    """Tests for fenced code blocks."""

    def test_with_file_type(self, grammar):
        """The opening line's tag becomes the file type and the body is trimmed."""
        fence, end = grammar.parse_code_fence("```ts\nlet x = 1;\n```", 0)
        assert fence == CodeFence(body="let x = 1;", file_type="ts")
        assert end == 20

    def test_without_file_type(self, grammar):
        """An empty tag is omitted."""
        fence, _ = grammar.parse_code_fence("```\ncode\n```", 0)
        assert fence == CodeFence(body="code", file_type=None)

    def test_file_type_kept_verbatim(self, grammar):
        """Whitespace around the tag is part of the tag."""
        fence, _ = grammar.parse_code_fence("``` ts \ncode\n```", 0)
        assert fence.file_type == " ts "

    def test_whitespace_only_file_type(self, grammar):
        """Only an empty tag is omitted; a blank one is kept."""
        fence, _ = grammar.parse_code_fence("```  \ncode\n```", 0)
        assert fence.file_type == "  "

    def test_leading_blank_lines(self, grammar):
        """Blank lines before the fence are skipped."""
        fence, _ = grammar.parse_code_fence("\n\n```\ncode\n```", 0)
        assert fence.body == "code"

    def test_body_keeps_blank_lines_and_markup(self, grammar):
        """The body is raw text up to the next fence."""
        fence, _ = grammar.parse_code_fence("```md\n# not a heading\n\n**x**\n```", 0)
        assert fence.body == "# not a heading\n\n**x**"

    def test_first_closing_fence_wins(self, grammar):
        """Fences do not nest."""
        fence, end = grammar.parse_code_fence("```\na\n```\nb\n```", 0)
        assert fence.body == "a"
        assert end == 9

    @pytest.mark.parametrize("source", ["```ts", "```\nunclosed", "``\nx\n``"])
    def test_incomplete_fence_fails(self, grammar, source):
        """A fence needs a tag line and a closing fence."""
        with pytest.raises(ParseFailure):
            grammar.parse_code_fence(source, 0)


@pytest.mark.unit
class TestComment:
    """Tests for comments."""

    def test_trimmed_content(self, grammar):
        """Content is trimmed and one trailing newline consumed."""
        comment, end = grammar.parse_comment("<!--  note  -->\n\nnext", 0)
        assert comment == Comment(text="note")
        assert end == 16

    def test_multiline(self, grammar):
        """Comments may span lines."""
        comment, _ = grammar.parse_comment("<!--\na\n\nb\n-->", 0)
        assert comment.text == "a\n\nb"

    def test_unclosed_fails(self, grammar):
        """A comment needs its closer."""
        with pytest.raises(ParseFailure):
            grammar.parse_comment("<!-- open", 0)


@pytest.mark.unit
class TestList:
    """Tests for the recursive list parser."""

    def test_nested_unordered(self, grammar):
        """A deeper-indented list attaches to the preceding item."""
        lst, end = grammar.parse_list("- item1\n   - child1\n- item2\n", 0)
        assert lst == List(
            ordered=False,
            items=[
                ListItem(span=Span([Unstyled("item1")]), sublist=List(ordered=False, items=[leaf("child1")])),
                leaf("item2"),
            ],
        )
        assert end == 28

    def test_ordered_markers(self, grammar):
        """Digits or lowercase letters followed by ``. `` are ordered markers."""
        lst, _ = grammar.parse_list("1. one\n22. two\nb. three", 0)
        assert lst == List(ordered=True, items=[leaf("one"), leaf("two"), leaf("three")])

    def test_both_unordered_markers(self, grammar):
        """``*`` and ``-`` bullets can share a list."""
        lst, _ = grammar.parse_list("* a\n- b", 0)
        assert lst == List(ordered=False, items=[leaf("a"), leaf("b")])

    def test_two_space_offset_sublist(self, grammar):
        """A sublist may also sit two spaces in."""
        lst, _ = grammar.parse_list("- a\n  - b", 0)
        assert lst.items[0].sublist == List(ordered=False, items=[leaf("b")])

    def test_ordered_sublist_under_unordered(self, grammar):
        """A sublist chooses its own marker kind."""
        lst, _ = grammar.parse_list("- a\n   1. b\n   2. c", 0)
        assert lst.items[0].sublist == List(ordered=True, items=[leaf("b"), leaf("c")])

    def test_deep_nesting(self, grammar):
        """Nesting recurses through every level."""
        lst, _ = grammar.parse_list("- a\n   - b\n      - c\n         - d", 0)
        depth = 0
        node = lst
        while node is not None:
            depth += 1
            node = node.items[0].sublist
        assert depth == 4

    @pytest.mark.parametrize("indent", ["  ", " "])
    def test_indented_root(self, grammar, indent):
        """A root list may be indented by two or one spaces."""
        lst, _ = grammar.parse_list(f"{indent}- a\n{indent}- b", 0)
        assert lst == List(ordered=False, items=[leaf("a"), leaf("b")])

    def test_root_commits_to_one_width(self, grammar):
        """Items at another indentation end the list."""
        lst, end = grammar.parse_list("  - a\n- b", 0)
        assert lst == List(ordered=False, items=[leaf("a")])
        assert end == 6

    def test_mixed_kinds_first_kind_wins(self, grammar):
        """A list never mixes kinds; the first kind ends at the other."""
        lst, end = grammar.parse_list("- a\n1. b", 0)
        assert lst == List(ordered=False, items=[leaf("a")])
        assert end == 4

    def test_ordered_first_item_commits_to_ordered(self, grammar):
        """An ordered first item makes the whole list ordered."""
        lst, end = grammar.parse_list("1. a\n- b", 0)
        assert lst == List(ordered=True, items=[leaf("a")])
        assert end == 5

    def test_marker_needs_space(self, grammar):
        """``-x`` and ``1.x`` are not list items."""
        with pytest.raises(ParseFailure):
            grammar.parse_list("-x", 0)
        with pytest.raises(ParseFailure):
            grammar.parse_list("1.x", 0)

    def test_uppercase_is_not_ordered_marker(self, grammar):
        """Only lowercase letters count as ordered markers."""
        with pytest.raises(ParseFailure):
            grammar.parse_list("A. item", 0)

    def test_item_needs_text(self, grammar):
        """An item with no text is not an item."""
        with pytest.raises(ParseFailure):
            grammar.parse_list("- \n", 0)

    def test_custom_indentation(self):
        """Indentation widths come from the options."""
        grammar = BlockGrammar(DialectParserOptions(root_list_indents=(4,), sublist_indent_offsets=(4,)))
        lst, _ = grammar.parse_list("    - a\n        - b", 0)
        assert lst.items[0].sublist == List(ordered=False, items=[leaf("b")])
        with pytest.raises(ParseFailure):
            grammar.parse_list("- a", 0)


@pytest.mark.unit
class TestElementChoice:
    """Tests for the ordered element choice."""

    def test_heading_before_paragraph(self, grammar):
        """A leading ``#`` is a heading."""
        element, _ = grammar.parse_element("# x", 0)
        assert isinstance(element, Heading)

    def test_list_before_paragraph(self, grammar):
        """A leading bullet is a list."""
        element, _ = grammar.parse_element("- x", 0)
        assert isinstance(element, List)

    def test_unclosed_fence_is_paragraph(self, grammar):
        """A failed fence falls through to a paragraph."""
        element, _ = grammar.parse_element("```\nnever closed", 0)
        assert element == Span([Unstyled("```\nnever closed")])

    def test_comments_disabled(self):
        """With comments off, comment syntax is paragraph text."""
        grammar = BlockGrammar(DialectParserOptions(parse_comments=False))
        element, _ = grammar.parse_element("<!-- x -->", 0)
        assert element == Span([Unstyled("<!-- x -->")])
