#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_utils.py
"""Unit tests for AST utility functions."""

import pytest

from conceptmd.ast import (
    Anchor,
    Bold,
    CodeFence,
    Comment,
    ConceptAnchor,
    Document,
    Heading,
    Italic,
    List,
    ListItem,
    Span,
    Unstyled,
    collect_concept_ids,
    extract_text,
)


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_span(self):
        """Span text is concatenated without separators."""
        span = Span([Unstyled("a "), Bold("bold"), Unstyled(" and "), Italic("it")])
        assert extract_text(span) == "a bold and it"

    def test_anchor_label_only(self):
        """Anchor labels count; targets do not."""
        span = Span([Anchor(label=[Unstyled("docs")], href="https://x"), ConceptAnchor([Bold("c")], "id")])
        assert extract_text(span) == "docsc"

    def test_document_with_joiner(self):
        """The joiner separates sibling blocks."""
        doc = Document(
            children=[
                Heading(level=1, span=Span([Unstyled("Title")])),
                CodeFence(body="code"),
                Comment(text="note"),
            ]
        )
        assert extract_text(doc.children, joiner="\n") == "Title\ncode\nnote"

    def test_nested_list(self):
        """List items and their sublists are included."""
        lst = List(
            ordered=False,
            items=[
                ListItem(
                    span=Span([Unstyled("a")]),
                    sublist=List(ordered=False, items=[ListItem(span=Span([Unstyled("b")]))]),
                )
            ],
        )
        assert extract_text(lst, joiner=" ") == "a b"

    def test_empty_document(self):
        """An empty document has no text."""
        assert extract_text(Document()) == ""


@pytest.mark.unit
class TestCollectConceptIds:
    """Tests for collect_concept_ids."""

    def test_unique_first_seen_order(self):
        """Duplicates collapse, keeping first-seen order."""
        doc = Document(
            children=[
                Span(
                    [
                        ConceptAnchor([Unstyled("b")], "beta"),
                        Unstyled(" "),
                        ConceptAnchor([Unstyled("a")], "alpha"),
                    ]
                ),
                Heading(level=2, span=Span([ConceptAnchor([Unstyled("b")], "beta")])),
            ]
        )
        assert collect_concept_ids(doc) == ["beta", "alpha"]

    def test_none(self):
        """Documents without concept anchors yield nothing."""
        doc = Document(children=[Span([Anchor([Unstyled("x")], "@not-a-concept")])])
        assert collect_concept_ids(doc) == []
