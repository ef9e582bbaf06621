"""Serialization of parse trees to JSON-compatible dicts."""

from __future__ import annotations

from .nodes import File, Node, Raw, Span, Stmt


def serialize(obj: object) -> object:
    """Recursively serialize an object to a JSON-compatible structure."""
    if obj is None:
        return None
    if isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [serialize(x) for x in obj]
    if isinstance(obj, Span):
        return [obj.start, obj.end]
    if isinstance(obj, (Raw, Stmt)):
        return node_to_dict(obj)
    if isinstance(obj, File):
        return file_to_dict(obj)
    raise TypeError("cannot serialize " + type(obj).__name__)


def node_to_dict(node: Node) -> dict[str, object]:
    if isinstance(node, Raw):
        return {"_type": "Raw", "span": serialize(node.span), "text": node.text}
    d: dict[str, object] = {
        "_type": "Stmt",
        "span": serialize(node.span),
        "keyword": node.keyword,
        "head": node.head_raw,
        "has_block": node.has_block,
        "modified": node.modified,
    }
    if node.has_block:
        d["lbrace"] = node.lbrace_raw
        d["body"] = serialize(node.body)
        d["rbrace"] = node.rbrace_raw
        d["trailing"] = node.trailing_after_r
    return d


def file_to_dict(file: File) -> dict[str, object]:
    """Serialize a File: {"path": ..., "nodes": [...]}."""
    return {"path": file.path, "nodes": serialize(file.nodes)}
