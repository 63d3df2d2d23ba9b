"""Document serialization — JSON round-trip for chatmark nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed messages next to the raw message body
- Shipping a parsed document to a client that renders but does not parse
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from chatmark import parse_document
    from chatmark.serialization import to_json, from_json

    doc = parse_document("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from chatmark.errors import SerializationError
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Blank,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Italic,
    ListItem,
    Node,
    Paragraph,
    Plain,
    Span,
    Table,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node] | type[Span]] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "ListItem": ListItem,
    "CodeBlock": CodeBlock,
    "Table": Table,
    "HorizontalRule": HorizontalRule,
    "Blank": Blank,
    "Plain": Plain,
    "Bold": Bold,
    "Italic": Italic,
    "BoldItalic": BoldItalic,
    "Code": Code,
}


def to_dict(node: Node | Span) -> dict[str, Any]:
    """Convert a node or span to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node | Span):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "end_lineno": value.end_lineno,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node | Span:
    """Reconstruct a typed node from a dict produced by to_dict.

    Raises:
        SerializationError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise SerializationError(f"Unknown node type: {type_name!r}", type_name)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                offset=value.get("offset", 0),
                end_offset=value.get("end_offset", 0),
                end_lineno=value.get("end_lineno"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        # Table rows are lists of lists; every sequence field is a tuple
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string (sorted keys)."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string produced by to_json.

    Raises:
        SerializationError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        raise SerializationError(
            f"Expected Document, got {type(node).__name__}", type(node).__name__
        )
    return node
