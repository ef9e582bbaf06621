"""Construction helpers for new statements and structural edits."""

from __future__ import annotations

from .nodes import File, Node, Raw, Stmt
from .parse import first_ident
from .query import ancestors


def new_simple_stmt(head: str) -> Stmt:
    """Build `head;`. A trailing ';' or whitespace on head is dropped."""
    head = head.rstrip("; \t\r\n")
    return Stmt(
        keyword=first_ident(head).lower(),
        head_raw=head,
        has_block=False,
        modified=True,
    )


def new_block_stmt(head: str, body: list[Node] | None = None) -> Stmt:
    """Build `head { body };`."""
    head = head.strip()
    return Stmt(
        keyword=first_ident(head).lower(),
        head_raw=head,
        has_block=True,
        lbrace_raw=" {",
        body=list(body) if body is not None else [],
        rbrace_raw="}",
        modified=True,
    )


def new_raw(text: str) -> Raw:
    return Raw(text)


def touch(file: File, stmt: Stmt) -> None:
    """Mark stmt and every enclosing statement modified.

    An unmodified block replays its original text, so an edit nested inside
    it is only written once the whole chain of enclosing blocks is
    regenerated.
    """
    chain = ancestors(file.nodes, stmt)
    if chain is None:
        raise ValueError("statement is not part of this file")
    for outer in chain:
        outer.mark_modified()
    stmt.mark_modified()


def remove_stmt(container: File | Stmt, stmt: Stmt) -> bool:
    """Remove stmt (by identity) from a file or block body.

    Removing from a block marks that block modified. Returns False if stmt
    is not a direct child of container.
    """
    nodes = container.nodes if isinstance(container, File) else container.body
    for i, node in enumerate(nodes):
        if node is stmt:
            del nodes[i]
            if isinstance(container, Stmt):
                container.mark_modified()
            return True
    return False
