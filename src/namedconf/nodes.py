"""named.conf concrete syntax tree: node definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


# ============================================================
# POSITION
# ============================================================


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) offsets into the original source."""

    start: int
    end: int


NO_SPAN = Span(0, 0)


# ============================================================
# NODES
# ============================================================


@dataclass
class Raw:
    """Uninterpreted trivia: whitespace and comments between statements."""

    text: str
    span: Span = NO_SPAN

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def write_to(self, out: list[str]) -> None:
        out.append(self.text)


@dataclass
class Stmt:
    """A statement ending with ';', possibly after a { block }.

    raw_text is replayed verbatim while modified is False. The structured
    fields are the tolerant decomposition of raw_text; editing any of them
    must be paired with mark_modified() for the edit to be written.
    """

    raw_text: str = ""
    span: Span = NO_SPAN
    keyword: str = ""
    head_raw: str = ""
    has_block: bool = False
    lbrace_raw: str = ""
    body: list[Node] = field(default_factory=list)
    rbrace_raw: str = ""
    trailing_after_r: str = ""
    modified: bool = False

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def write_to(self, out: list[str]) -> None:
        from .emit import render_stmt

        out.append(render_stmt(self))

    # ── Mutators ────────────────────────────────────────────

    def mark_modified(self) -> None:
        self.modified = True

    def replace_head(self, new_head: str) -> None:
        """Replace the head text. keyword is left as it was."""
        self.head_raw = new_head
        self.modified = True

    def refresh_keyword(self) -> None:
        from .parse import first_ident

        self.keyword = first_ident(self.head_raw).lower()

    def append_to_body(self, node: Node) -> None:
        """Append a child node, turning a simple statement into a block."""
        if not self.has_block:
            self.has_block = True
            self.lbrace_raw = " {"
            self.rbrace_raw = "}"
            self.trailing_after_r = ""
            self.body = []
        self.body.append(node)
        self.modified = True


Node = Raw | Stmt


# ============================================================
# FILE
# ============================================================


@dataclass
class File:
    """A parsed named.conf file."""

    nodes: list[Node] = field(default_factory=list)
    path: str | None = None

    def serialize(self) -> str:
        """Serialized text; identical to the source if nothing was modified."""
        from .emit import to_source

        return to_source(self.nodes)

    def to_bytes(self) -> bytes:
        return self.serialize().encode("utf-8", "surrogateescape")

    def write_to(self, out: list[str]) -> None:
        for node in self.nodes:
            node.write_to(out)

    def walk(self, fn: Callable[[Node], bool]) -> None:
        from .query import walk

        walk(self.nodes, fn)

    def find(self, pred: Callable[[Stmt], bool]) -> list[Stmt]:
        from .query import find

        return find(self.nodes, pred)

    def top_level(self, keyword: str) -> list[Stmt]:
        from .query import top_level

        return top_level(self.nodes, keyword)

    def save(self, path: str | None = None) -> None:
        from .storage import save

        save(self, path)
