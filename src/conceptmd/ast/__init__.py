#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/ast/__init__.py
"""Abstract Syntax Tree (AST) module for concept markdown documents.

The module consists of several components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- serialization: JSON serialization and deserialization of AST structures
- utils: Text extraction and concept identifier collection

Examples
--------
Build a tree by hand:

    >>> from conceptmd.ast import Document, Heading, Span, Unstyled
    >>> doc = Document(children=[Heading(level=1, span=Span([Unstyled("Title")]))])

"""

from __future__ import annotations

from conceptmd.ast.nodes import (
    Anchor,
    Bold,
    BoldItalic,
    CodeFence,
    Comment,
    ConceptAnchor,
    Document,
    Element,
    Heading,
    InlineCode,
    Italic,
    List,
    ListItem,
    Node,
    Span,
    Text,
    Token,
    Unstyled,
    get_node_children,
)
from conceptmd.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from conceptmd.ast.utils import collect_concept_ids, extract_text
from conceptmd.ast.visitors import ConceptAnchorCollector, NodeVisitor, TreeWalker, ValidationVisitor

__all__ = [
    # Nodes
    "Node",
    "Document",
    "Element",
    "Heading",
    "CodeFence",
    "Comment",
    "Span",
    "List",
    "ListItem",
    "Token",
    "Text",
    "Unstyled",
    "Bold",
    "Italic",
    "BoldItalic",
    "InlineCode",
    "Anchor",
    "ConceptAnchor",
    "get_node_children",
    # Visitors
    "NodeVisitor",
    "TreeWalker",
    "ValidationVisitor",
    "ConceptAnchorCollector",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    # Utilities
    "extract_text",
    "collect_concept_ids",
]
