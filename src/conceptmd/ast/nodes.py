#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/ast/nodes.py
"""AST node classes for concept markdown documents.

This module defines the node hierarchy produced by the dialect parser. Every
node is a frozen dataclass: trees are built bottom-up during a parse call and
never mutated afterwards. Sequence fields accept any iterable and are stored
as tuples, so whole trees compare and hash by value.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes (document elements):
    - Document
    - Heading, CodeFence, Comment
    - Span (also used as a bare paragraph)
    - List, ListItem

Inline nodes (span tokens):
    - Text variants: Unstyled, Bold, Italic, BoldItalic, InlineCode
    - Anchor, ConceptAnchor

A span token is either a Text variant or one of the two anchor kinds; there
is no wrapper node around them.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from conceptmd.constants import MAX_HEADING_LEVEL, TextStyle
from conceptmd.exceptions import InvalidEmptyConstructError, ValidationError


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Text variants
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Base class for flat text runs.

    Text never nests: each variant carries a single content string whose
    styling is given by the variant itself.

    Parameters
    ----------
    content : str
        The visible text, delimiters stripped

    """

    content: str
    style: ClassVar[TextStyle]


@dataclass(frozen=True)
class Unstyled(Text):
    """Plain text run."""

    style: ClassVar[TextStyle] = "unstyled"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unstyled``."""
        return visitor.visit_unstyled(self)


@dataclass(frozen=True)
class Bold(Text):
    """Bold text run (``**text**``)."""

    style: ClassVar[TextStyle] = "bold"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bold``."""
        return visitor.visit_bold(self)


@dataclass(frozen=True)
class Italic(Text):
    """Italic text run (``*text*`` or ``_text_``)."""

    style: ClassVar[TextStyle] = "italic"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_italic``."""
        return visitor.visit_italic(self)


@dataclass(frozen=True)
class BoldItalic(Text):
    """Bold-italic text run (``***text***``, ``**_text_**`` or ``_**text**_``)."""

    style: ClassVar[TextStyle] = "bold_italic"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bold_italic``."""
        return visitor.visit_bold_italic(self)


@dataclass(frozen=True)
class InlineCode(Text):
    """Inline code run (`` `text` ``)."""

    style: ClassVar[TextStyle] = "inline_code"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_code``."""
        return visitor.visit_inline_code(self)


# ============================================================================
# Anchors
# ============================================================================


def _freeze(node: Node, name: str) -> tuple[Any, ...]:
    """Store the sequence field *name* of a frozen node as a tuple."""
    value = tuple(getattr(node, name))
    object.__setattr__(node, name, value)
    return value


def _validate_label(label: tuple[Text, ...], construct: str) -> None:
    if not label:
        raise InvalidEmptyConstructError(construct)
    for part in label:
        if not isinstance(part, Text):
            raise ValidationError(
                f"{construct} may only contain Text nodes, got {type(part).__name__}",
                parameter_name="label",
                parameter_value=part,
            )


@dataclass(frozen=True)
class Anchor(Node):
    """Hyperlink to an external target (``[label](href)``).

    Parameters
    ----------
    label : sequence of Text
        Non-empty label text
    href : str
        Link target, taken verbatim

    """

    label: tuple[Text, ...]
    href: str

    def __post_init__(self) -> None:
        """Validate that the label is a non-empty run of Text nodes."""
        _validate_label(_freeze(self, "label"), "Anchor label")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_anchor``."""
        return visitor.visit_anchor(self)


@dataclass(frozen=True)
class ConceptAnchor(Node):
    """Hyperlink to an internal concept (``[label](@concept_id)``).

    The identifier is opaque to the parser; resolving it against a concept
    directory is left to the consumer of the tree.

    Parameters
    ----------
    label : sequence of Text
        Non-empty label text
    concept_id : str
        Identifier following the ``@`` marker, taken verbatim

    """

    label: tuple[Text, ...]
    concept_id: str

    def __post_init__(self) -> None:
        """Validate that the label is a non-empty run of Text nodes."""
        _validate_label(_freeze(self, "label"), "ConceptAnchor label")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_concept_anchor``."""
        return visitor.visit_concept_anchor(self)


Token = Union[Text, Anchor, ConceptAnchor]
"""A single span member: a text run or an anchor."""


# ============================================================================
# Spans and block-level nodes
# ============================================================================


@dataclass(frozen=True)
class Span(Node):
    """Non-empty ordered run of tokens.

    A span is one line or paragraph worth of inline content. Spans produced
    by the parser never hold two adjacent Unstyled tokens.

    Parameters
    ----------
    tokens : sequence of Token
        Text runs and anchors in reading order

    """

    tokens: tuple[Token, ...]

    def __post_init__(self) -> None:
        """Validate that the span holds at least one token."""
        if not _freeze(self, "tokens"):
            raise InvalidEmptyConstructError("Span")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_span``."""
        return visitor.visit_span(self)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    span : Span
        Heading text

    """

    level: int
    span: Span

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValidationError(
                f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {self.level}",
                parameter_name="level",
                parameter_value=self.level,
            )

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class CodeFence(Node):
    """Fenced code block.

    Parameters
    ----------
    body : str
        Code text with surrounding whitespace trimmed
    file_type : str or None, default = None
        Tag following the opening fence (e.g. ``"ts"``); None when absent

    """

    body: str
    file_type: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_fence``."""
        return visitor.visit_code_fence(self)


@dataclass(frozen=True)
class Comment(Node):
    """Comment block (``<!-- text -->``).

    Parameters
    ----------
    text : str
        Comment content with surrounding whitespace trimmed

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_comment``."""
        return visitor.visit_comment(self)


@dataclass(frozen=True)
class ListItem(Node):
    """One list item, optionally carrying a more deeply indented list.

    An item without a sublist is a leaf item.

    Parameters
    ----------
    span : Span
        Item text
    sublist : List or None, default = None
        Nested list attached to this item

    """

    span: Span
    sublist: Optional[List] = None

    @property
    def is_leaf(self) -> bool:
        """Whether this item has no nested list."""
        return self.sublist is None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class List(Node):
    """Ordered or unordered list.

    A single list is homogeneous: every item was introduced by the same
    marker kind.

    Parameters
    ----------
    ordered : bool
        True for ``1.``/``a.`` markers, False for ``-``/``*`` markers
    items : sequence of ListItem
        Non-empty items

    """

    ordered: bool
    items: tuple[ListItem, ...]

    def __post_init__(self) -> None:
        """Validate that the list holds at least one item."""
        if not _freeze(self, "items"):
            raise InvalidEmptyConstructError("OrderedList" if self.ordered else "UnorderedList")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


Element = Union[Heading, CodeFence, Span, List, Comment]
"""A top-level document member."""


@dataclass(frozen=True)
class Document(Node):
    """Root node holding the parsed elements in order.

    Parameters
    ----------
    children : sequence of Element, default = ()
        Top-level elements; empty for blank input

    """

    children: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        """Store the children as a tuple."""
        _freeze(self, "children")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for text runs, code fences and
        comments)

    Examples
    --------
    >>> item = ListItem(span=Span([Unstyled("a")]), sublist=List(False, [ListItem(Span([Unstyled("b")]))]))
    >>> [type(child).__name__ for child in get_node_children(item)]
    ['Span', 'List']

    """
    if isinstance(node, Document):
        return list(node.children)

    if isinstance(node, Span):
        return list(node.tokens)

    if isinstance(node, (Anchor, ConceptAnchor)):
        return list(node.label)

    if isinstance(node, Heading):
        return [node.span]

    if isinstance(node, List):
        return list(node.items)

    if isinstance(node, ListItem):
        children: list[Node] = [node.span]
        if node.sublist is not None:
            children.append(node.sublist)
        return children

    # Leaf nodes (no children)
    return []
