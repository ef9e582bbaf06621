"""Lossless named.conf parser and serializer: public API."""

from __future__ import annotations

from .editing import new_block_stmt, new_raw, new_simple_stmt, remove_stmt, touch
from .emit import to_source
from .nodes import File as File, Node as Node, Raw as Raw, Span as Span, Stmt as Stmt
from .parse import (
    MissingTerminator as MissingTerminator,
    ParseError as ParseError,
    decompose,
    first_ident,
    parse,
    split,
)
from .query import find, iter_stmts, top_level, walk
from .storage import StorageError as StorageError, parse_file, save


__all__ = [
    "File",
    "MissingTerminator",
    "Node",
    "ParseError",
    "Raw",
    "Span",
    "Stmt",
    "StorageError",
    "decompose",
    "find",
    "first_ident",
    "iter_stmts",
    "new_block_stmt",
    "new_raw",
    "new_simple_stmt",
    "parse",
    "parse_file",
    "remove_stmt",
    "save",
    "split",
    "to_source",
    "top_level",
    "touch",
    "walk",
]
