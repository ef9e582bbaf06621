"""Typed views over common named.conf statements.

These read and edit statements through the generic node model only; they do
not validate values. A head such as `zone "example.com" IN` is treated as a
list of words: keyword, name, class.
"""

from __future__ import annotations

from .editing import new_simple_stmt
from .nodes import File, Stmt
from .query import iter_stmts, top_level
from .scanner import CTX_NORMAL, CTX_STRING, Scanner, is_space


def head_words(head: str) -> list[str]:
    """Split a statement head into words.

    Quoted strings stay whole, quotes included. Comments separate words and
    are dropped.
    """
    words: list[str] = []
    cur: list[str] = []
    sc = Scanner(head, 0, len(head))
    while not sc.at_end():
        i, ctx = sc.advance()
        unit = head[i : sc.pos]
        if ctx == CTX_STRING or (ctx == CTX_NORMAL and not is_space(unit)):
            cur.append(unit)
            continue
        if cur:
            words.append("".join(cur))
            cur = []
    if cur:
        words.append("".join(cur))
    return words


def unquote(word: str) -> str:
    if len(word) >= 2 and word[0] == '"' and word[-1] == '"':
        return word[1:-1]
    return word


def _word(stmt: Stmt, index: int) -> str:
    words = head_words(stmt.head_raw)
    if index < len(words):
        return unquote(words[index])
    return ""


# ── File-level lookups ──────────────────────────────────────


def options(file: File) -> Stmt | None:
    found = top_level(file.nodes, "options")
    if found:
        return found[0]
    return None


def zones(file: File) -> list[Stmt]:
    """Every zone statement, including zones declared inside views."""
    return [s for s in iter_stmts(file.nodes) if s.keyword == "zone"]


def views(file: File) -> list[Stmt]:
    return top_level(file.nodes, "view")


def acls(file: File) -> list[Stmt]:
    return top_level(file.nodes, "acl")


def includes(file: File) -> list[str]:
    """Paths named by top-level include statements."""
    paths: list[str] = []
    for stmt in top_level(file.nodes, "include"):
        path = _word(stmt, 1)
        if path != "":
            paths.append(path)
    return paths


# ── Statement-level accessors ───────────────────────────────


def stmt_name(stmt: Stmt) -> str:
    """Name of a zone, view, acl or key statement, unquoted."""
    return _word(stmt, 1)


def zone_class(stmt: Stmt) -> str:
    return _word(stmt, 2)


def get_option(block: Stmt, keyword: str) -> Stmt | None:
    keyword = keyword.lower()
    for node in block.body:
        if isinstance(node, Stmt) and node.keyword == keyword:
            return node
    return None


def option_value(stmt: Stmt) -> str:
    """Head text after the keyword, e.g. 'no' for 'recursion no'."""
    words = head_words(stmt.head_raw)
    if not words:
        return ""
    return " ".join(words[1:])


def set_option(block: Stmt, head: str) -> Stmt:
    """Set `head;` inside block, replacing an option with the same keyword.

    The block is marked modified; enclosing blocks are not (see
    editing.touch).
    """
    new = new_simple_stmt(head)
    existing = get_option(block, new.keyword)
    if existing is None:
        block.append_to_body(new)
        return new
    existing.replace_head(new.head_raw)
    existing.refresh_keyword()
    block.mark_modified()
    return existing
