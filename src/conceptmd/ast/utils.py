#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract the visible text of a node or list of nodes
collect_concept_ids : List the concept identifiers a document references

Examples
--------
Recover the visible text of a span:

    >>> from conceptmd.ast import Bold, Span, Unstyled
    >>> from conceptmd.ast.utils import extract_text
    >>> extract_text(Span([Bold("bold"), Unstyled(" text")]))
    'bold text'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

from conceptmd.ast.nodes import CodeFence, Comment, Text, get_node_children
from conceptmd.ast.visitors import ConceptAnchorCollector

if TYPE_CHECKING:
    from conceptmd.ast.nodes import Document, Node


def extract_text(node_or_nodes: Union[Node, Sequence[Node]], joiner: str = "") -> str:
    """Extract the visible text from a node or list of nodes.

    Styling delimiters are already gone from the tree, so concatenating the
    text runs of a span gives back what a reader sees. Anchor labels count
    as visible text; hrefs and concept identifiers do not. Code fence bodies
    and comment text are included.

    Parameters
    ----------
    node_or_nodes : Node or sequence of Node
        A single node, or a list or tuple of nodes (such as
        ``Document.children``) to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes. The default keeps
        span text exactly as written; use ``"\\n"`` to separate blocks.

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, (list, tuple)):
        return joiner.join(part for part in (extract_text(n, joiner) for n in node_or_nodes) if part)

    node = node_or_nodes
    if isinstance(node, Text):
        return node.content
    if isinstance(node, CodeFence):
        return node.body
    if isinstance(node, Comment):
        return node.text

    return extract_text(get_node_children(node), joiner)


def collect_concept_ids(document: Document) -> list[str]:
    """Return the distinct concept identifiers referenced by *document*.

    Identifiers are returned in first-seen order, ready to be handed to a
    concept directory for resolution.

    Parameters
    ----------
    document : Document
        Parsed document

    Returns
    -------
    list of str
        Unique identifiers following ``@`` in concept anchors

    """
    collector = ConceptAnchorCollector()
    document.accept(collector)
    return list(dict.fromkeys(collector.concept_ids))


__all__ = [
    "extract_text",
    "collect_concept_ids",
]
