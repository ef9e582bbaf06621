"""named.conf emitter: converts nodes back into configuration text.

Unmodified statements replay their original text, so an untouched tree
serializes to exactly the bytes it was parsed from. Modified statements are
regenerated with minimal formatting: one space before `{`, body lines
indented by two spaces per nesting level, `};` on its own line.
"""

from __future__ import annotations

from .nodes import Node, Raw, Stmt
from .scanner import is_space

INDENT: str = "  "


def to_source(nodes: list[Node]) -> str:
    """Render a node sequence back into named.conf text."""
    out: list[str] = []
    for node in nodes:
        write_node(node, out)
    return "".join(out)


def write_node(node: Node, out: list[str]) -> None:
    if isinstance(node, Raw):
        out.append(node.text)
        return
    if isinstance(node, Stmt):
        out.append(render_stmt(node))
        return
    raise TypeError("unhandled node type: " + type(node).__name__)


def _trim_right_space(s: str) -> str:
    i = len(s)
    while i > 0 and is_space(s[i - 1]):
        i -= 1
    return s[:i]


def _indent_lines(text: str, out: list[str]) -> None:
    lines = text.split("\n")
    last = len(lines) - 1
    for i, line in enumerate(lines):
        if i < last:
            out.append(INDENT + line + "\n")
        elif line != "":
            out.append(INDENT + line)


def render_stmt(stmt: Stmt) -> str:
    if not stmt.modified and stmt.raw_text != "":
        return stmt.raw_text
    if not stmt.has_block:
        if stmt.head_raw == "":
            return stmt.raw_text
        return _trim_right_space(stmt.head_raw) + ";"
    head = _trim_right_space(stmt.head_raw)
    if head == "":
        head = stmt.keyword
    out: list[str] = [head, " {"]
    if stmt.body:
        out.append("\n")
        for child in stmt.body:
            _indent_lines(to_source([child]), out)
        if not out[-1].endswith("\n"):
            out.append("\n")
    out.append("};")
    return "".join(out)
