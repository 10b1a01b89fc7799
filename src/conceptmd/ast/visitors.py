#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by renderers and tree
utilities, plus two concrete visitors:

- ValidationVisitor checks the structural invariants of a tree, which is
  useful for trees assembled by hand or loaded from JSON
- ConceptAnchorCollector gathers concept identifiers for resolution against
  an external concept directory

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from conceptmd.ast.nodes import (
    Anchor,
    Bold,
    BoldItalic,
    CodeFence,
    Comment,
    ConceptAnchor,
    Document,
    Heading,
    InlineCode,
    Italic,
    List,
    ListItem,
    Node,
    Span,
    Text,
    Unstyled,
    get_node_children,
)
from conceptmd.constants import MAX_HEADING_LEVEL
from conceptmd.exceptions import ValidationError

logger = logging.getLogger(__name__)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node class. Visitors that
    only care about a few node kinds can inherit from :class:`TreeWalker`
    instead, which descends into children by default.

    Examples
    --------
    Count the headings in a document:

        >>> class HeadingCounter(TreeWalker):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...
        >>> counter = HeadingCounter()
        >>> document.accept(counter)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_code_fence(self, node: CodeFence) -> Any:
        """Visit a CodeFence node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_anchor(self, node: Anchor) -> Any:
        """Visit an Anchor node."""
        pass

    @abstractmethod
    def visit_concept_anchor(self, node: ConceptAnchor) -> Any:
        """Visit a ConceptAnchor node."""
        pass

    @abstractmethod
    def visit_unstyled(self, node: Unstyled) -> Any:
        """Visit an Unstyled text node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold text node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic text node."""
        pass

    @abstractmethod
    def visit_bold_italic(self, node: BoldItalic) -> Any:
        """Visit a BoldItalic text node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode text node."""
        pass


class TreeWalker(NodeVisitor):
    """Visitor that walks the whole tree depth-first.

    Every ``visit_*`` method defaults to :meth:`generic_visit`, which visits
    the node's children in document order. Override individual methods to
    act on specific node kinds; call ``self.generic_visit(node)`` from an
    override to keep descending.
    """

    def generic_visit(self, node: Node) -> None:
        """Visit all children of *node*."""
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        self.generic_visit(node)

    def visit_code_fence(self, node: CodeFence) -> Any:
        """Visit a CodeFence node."""
        self.generic_visit(node)

    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        self.generic_visit(node)

    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""
        self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        self.generic_visit(node)

    def visit_anchor(self, node: Anchor) -> Any:
        """Visit an Anchor node."""
        self.generic_visit(node)

    def visit_concept_anchor(self, node: ConceptAnchor) -> Any:
        """Visit a ConceptAnchor node."""
        self.generic_visit(node)

    def visit_unstyled(self, node: Unstyled) -> Any:
        """Visit an Unstyled text node."""
        self.generic_visit(node)

    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold text node."""
        self.generic_visit(node)

    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic text node."""
        self.generic_visit(node)

    def visit_bold_italic(self, node: BoldItalic) -> Any:
        """Visit a BoldItalic text node."""
        self.generic_visit(node)

    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode text node."""
        self.generic_visit(node)


class ValidationVisitor(TreeWalker):
    """Visitor that checks the structural invariants of a tree.

    Constructors already reject empty spans, labels and lists, so this mainly
    catches what they cannot: unmerged adjacent Unstyled runs, tokens of the
    wrong kind, and nodes deserialized or patched in by other tools.

    Parameters
    ----------
    strict : bool, default = True
        If True, raise ValidationError on the first problem. Otherwise,
        collect messages in ``errors``.

    """

    def __init__(self, strict: bool = True) -> None:
        """Initialize the validation visitor."""
        self.strict = strict
        self.errors: list[str] = []

    def _report(self, message: str) -> None:
        if self.strict:
            raise ValidationError(message)
        logger.debug("Validation problem: %s", message)
        self.errors.append(message)

    def _check_runs(self, tokens: tuple[Any, ...], construct: str) -> None:
        if not tokens:
            self._report(f"{construct} must not be empty")
            return
        for previous, current in zip(tokens, tokens[1:]):
            if isinstance(previous, Unstyled) and isinstance(current, Unstyled):
                self._report(f"{construct} contains adjacent Unstyled runs {previous.content!r} and {current.content!r}")

    def visit_heading(self, node: Heading) -> None:
        """Validate heading level."""
        if not 1 <= node.level <= MAX_HEADING_LEVEL:
            self._report(f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {node.level}")
        self.generic_visit(node)

    def visit_span(self, node: Span) -> None:
        """Validate span tokens."""
        self._check_runs(node.tokens, "Span")
        for token in node.tokens:
            if not isinstance(token, (Text, Anchor, ConceptAnchor)):
                self._report(f"Span token must be Text or an anchor, got {type(token).__name__}")
        self.generic_visit(node)

    def visit_anchor(self, node: Anchor) -> None:
        """Validate anchor label."""
        self._check_runs(node.label, "Anchor label")
        self.generic_visit(node)

    def visit_concept_anchor(self, node: ConceptAnchor) -> None:
        """Validate concept anchor label and identifier."""
        self._check_runs(node.label, "ConceptAnchor label")
        if not node.concept_id:
            self._report("ConceptAnchor identifier must not be empty")
        self.generic_visit(node)

    def visit_list(self, node: List) -> None:
        """Validate list items."""
        if not node.items:
            self._report("List must not be empty")
        self.generic_visit(node)


class ConceptAnchorCollector(TreeWalker):
    """Collect concept identifiers in document order.

    Attributes
    ----------
    concept_ids : list of str
        Every identifier encountered, duplicates included

    """

    def __init__(self) -> None:
        """Initialize the collector."""
        self.concept_ids: list[str] = []

    def visit_concept_anchor(self, node: ConceptAnchor) -> None:
        """Record the anchor's identifier."""
        self.concept_ids.append(node.concept_id)


__all__ = [
    "NodeVisitor",
    "TreeWalker",
    "ValidationVisitor",
    "ConceptAnchorCollector",
]
