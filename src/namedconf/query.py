"""Tree traversal helpers."""

from __future__ import annotations

from typing import Callable, Iterator

from .nodes import Node, Stmt


def walk(nodes: list[Node], fn: Callable[[Node], bool]) -> bool:
    """Depth-first pre-order walk. fn returning False stops the walk.

    Returns False if the walk was stopped early.
    """
    for node in nodes:
        if not fn(node):
            return False
        if isinstance(node, Stmt) and not walk(node.body, fn):
            return False
    return True


def iter_stmts(nodes: list[Node]) -> Iterator[Stmt]:
    for node in nodes:
        if isinstance(node, Stmt):
            yield node
            yield from iter_stmts(node.body)


def find(nodes: list[Node], pred: Callable[[Stmt], bool]) -> list[Stmt]:
    """All statements at any depth satisfying pred, in document order."""
    return [s for s in iter_stmts(nodes) if pred(s)]


def ancestors(nodes: list[Node], target: Node) -> list[Stmt] | None:
    """Enclosing statements of target, outermost first.

    Returns [] for a top-level node and None if target is not in the tree.
    """
    for node in nodes:
        if node is target:
            return []
        if isinstance(node, Stmt):
            inner = ancestors(node.body, target)
            if inner is not None:
                return [node] + inner
    return None


def _ascii_lower(s: str) -> str:
    out: list[str] = []
    for c in s:
        if c >= "A" and c <= "Z":
            c = chr(ord(c) + 32)
        out.append(c)
    return "".join(out)


def top_level(nodes: list[Node], keyword: str) -> list[Stmt]:
    """Top-level statements with the given keyword, e.g. "zone"."""
    keyword = _ascii_lower(keyword)
    return [n for n in nodes if isinstance(n, Stmt) and n.keyword == keyword]
