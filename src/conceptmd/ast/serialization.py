#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/conceptmd/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

The JSON form is the hand-off format between the parser and renderers that
live outside this package. Every node becomes a dict with a ``node_type`` key
naming its class; the root of :func:`ast_to_json` output also carries a
``schema_version``.

Examples
--------
Serialize a parsed document:

    >>> from conceptmd import parse_document
    >>> from conceptmd.ast.serialization import ast_to_json, json_to_ast
    >>> doc = parse_document("# Title")
    >>> json_str = ast_to_json(doc, indent=2)
    >>> json_to_ast(json_str) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, cast

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
)
from conceptmd.constants import AST_SCHEMA_VERSION

logger = logging.getLogger(__name__)

_TEXT_CLASSES: dict[str, type[Text]] = {
    cls.__name__: cls for cls in (Unstyled, Bold, Italic, BoldItalic, InlineCode)
}


# ============================================================================
# Serialization
# ============================================================================


def _serialize_text(node: Text) -> dict[str, Any]:
    return {"node_type": type(node).__name__, "content": node.content}


def _serialize_anchor(node: Anchor) -> dict[str, Any]:
    return {
        "node_type": "Anchor",
        "label": [ast_to_dict(part) for part in node.label],
        "href": node.href,
    }


def _serialize_concept_anchor(node: ConceptAnchor) -> dict[str, Any]:
    return {
        "node_type": "ConceptAnchor",
        "label": [ast_to_dict(part) for part in node.label],
        "concept_id": node.concept_id,
    }


def _serialize_span(node: Span) -> dict[str, Any]:
    return {"node_type": "Span", "tokens": [ast_to_dict(token) for token in node.tokens]}


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {"node_type": "Heading", "level": node.level, "span": ast_to_dict(node.span)}


def _serialize_code_fence(node: CodeFence) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "CodeFence", "body": node.body}
    if node.file_type is not None:
        result["file_type"] = node.file_type
    return result


def _serialize_comment(node: Comment) -> dict[str, Any]:
    return {"node_type": "Comment", "text": node.text}


def _serialize_list(node: List) -> dict[str, Any]:
    return {
        "node_type": "List",
        "ordered": node.ordered,
        "items": [ast_to_dict(item) for item in node.items],
    }


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "ListItem", "span": ast_to_dict(node.span)}
    if node.sublist is not None:
        result["sublist"] = ast_to_dict(node.sublist)
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    return {"node_type": "Document", "children": [ast_to_dict(child) for child in node.children]}


_SERIALIZERS: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Heading: _serialize_heading,
    CodeFence: _serialize_code_fence,
    Comment: _serialize_comment,
    Span: _serialize_span,
    List: _serialize_list,
    ListItem: _serialize_list_item,
    Anchor: _serialize_anchor,
    ConceptAnchor: _serialize_concept_anchor,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is not supported

    """
    if isinstance(node, Text):
        return _serialize_text(node)

    serializer = _SERIALIZERS.get(type(node))
    if serializer is None:
        raise ValueError(f"Unknown node type: {type(node).__name__}")
    return serializer(node)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": AST_SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"{data.get('node_type', 'node')} is missing required field '{key}'")
    return data[key]


def _deserialize_label(data: dict[str, Any]) -> list[Text]:
    label = [dict_to_ast(part) for part in _require(data, "label")]
    for part in label:
        if not isinstance(part, Text):
            raise ValueError(f"Anchor label may only contain text nodes, got {type(part).__name__}")
    return cast(list[Text], label)


def _deserialize_span(data: dict[str, Any]) -> Span:
    return Span(tokens=[dict_to_ast(token) for token in _require(data, "tokens")])  # type: ignore[misc]


def _deserialize_list(data: dict[str, Any]) -> List:
    return List(
        ordered=bool(_require(data, "ordered")),
        items=[cast(ListItem, dict_to_ast(item)) for item in _require(data, "items")],
    )


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    sublist_data = data.get("sublist")
    return ListItem(
        span=_deserialize_span(_require(data, "span")),
        sublist=_deserialize_list(sublist_data) if sublist_data is not None else None,
    )


_DESERIALIZERS: dict[str, Callable[[dict[str, Any]], Node]] = {
    "Document": lambda d: Document(children=[dict_to_ast(child) for child in _require(d, "children")]),  # type: ignore[misc]
    "Heading": lambda d: Heading(level=_require(d, "level"), span=_deserialize_span(_require(d, "span"))),
    "CodeFence": lambda d: CodeFence(body=_require(d, "body"), file_type=d.get("file_type")),
    "Comment": lambda d: Comment(text=_require(d, "text")),
    "Span": _deserialize_span,
    "List": _deserialize_list,
    "ListItem": _deserialize_list_item,
    "Anchor": lambda d: Anchor(label=_deserialize_label(d), href=_require(d, "href")),
    "ConceptAnchor": lambda d: ConceptAnchor(label=_deserialize_label(d), concept_id=_require(d, "concept_id")),
}


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`ast_to_dict`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the node type is missing or unknown, or a required field is absent
    ValidationError
        If the reconstructed node violates a constructor invariant

    """
    node_type = data.get("node_type")
    if node_type is None:
        raise ValueError("Missing node_type in serialized node")

    text_class = _TEXT_CLASSES.get(node_type)
    if text_class is not None:
        return text_class(content=_require(data, "content"))

    deserializer = _DESERIALIZERS.get(node_type)
    if deserializer is None:
        raise ValueError(f"Unknown node type: {node_type}")
    return deserializer(data)


def json_to_ast(json_str: str, validate_schema: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, reject schema versions other than the current one. JSON
        without a ``schema_version`` key is read as version 1.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the schema version is unsupported or the JSON describes an
        unknown node type
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", AST_SCHEMA_VERSION)
    if schema_version != AST_SCHEMA_VERSION:
        if validate_schema:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. This version of conceptmd "
                f"supports schema version {AST_SCHEMA_VERSION}."
            )
        logger.warning("Reading AST JSON with unsupported schema version %s", schema_version)

    return dict_to_ast(data)


__all__ = [
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]
