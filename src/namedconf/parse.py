"""named.conf parser: statement splitter and recursive decomposer."""

from __future__ import annotations

import logging

from .nodes import File, Node, Raw, Span, Stmt
from .scanner import CTX_NORMAL, Scanner, is_space

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Parse error with location info."""

    def __init__(self, msg: str, offset: int):
        self.msg: str = msg
        self.offset: int = offset
        super().__init__(msg + " at offset " + str(offset))


class MissingTerminator(ParseError):
    """A statement segment has no terminating ';'."""


class Parser:
    """Splits source text into Raw/Stmt nodes.

    Offsets passed to the methods index into `src`; spans recorded on nodes
    are shifted by `offset`, so a parser over a slice of a larger file still
    reports positions in terms of the larger file.
    """

    def __init__(self, src: str, offset: int = 0):
        self.src: str = src
        self.offset: int = offset

    def _span(self, start: int, end: int) -> Span:
        return Span(self.offset + start, self.offset + end)

    def _raw(self, start: int, end: int) -> Raw:
        return Raw(self.src[start:end], self._span(start, end))

    # ── Splitter ────────────────────────────────────────────

    def split(self, start: int, end: int) -> list[Node]:
        nodes: list[Node] = []
        last = start
        sc = Scanner(self.src, start, end)
        while not sc.at_end():
            i, ctx = sc.advance()
            if ctx != CTX_NORMAL or sc.depth != 0 or self.src[i] != ";":
                continue
            stmt_start = self._skip_trivia(last, i)
            if stmt_start > last:
                nodes.append(self._raw(last, stmt_start))
            nodes.append(self._stmt_or_raw(stmt_start, i + 1))
            last = i + 1
        if last < end:
            nodes.append(self._raw(last, end))
        return nodes

    def _skip_trivia(self, start: int, limit: int) -> int:
        """Index of the first character in [start, limit) outside whitespace
        and comments. Comments before a statement stay with the trivia.

        start must be in normal context; limit is a normal-context ';', so
        every comment opened before it also closes before it.
        """
        src = self.src
        i = start
        while i < limit:
            c = src[i]
            if is_space(c):
                i += 1
            elif c == "#" or src.startswith("//", i):
                i = src.find("\n", i, limit) + 1
                if i == 0:
                    return limit
            elif src.startswith("/*", i):
                j = src.find("*/", i + 2, limit)
                if j < 0:
                    return limit
                i = j + 2
            else:
                break
        return i

    def _stmt_or_raw(self, start: int, end: int) -> Node:
        try:
            return self.decompose(start, end)
        except (ParseError, RecursionError) as e:
            logger.debug("keeping statement at %d as raw text: %s", start, e)
            return self._raw(start, end)

    # ── Decomposer ──────────────────────────────────────────

    def decompose(self, start: int, end: int) -> Stmt:
        src = self.src
        semi = src.rfind(";", start, end)
        if semi < 0:
            raise MissingTerminator("statement missing semicolon", self.offset + start)

        brace_open = -1
        brace_close = -1
        sc = Scanner(src, start, end)
        while not sc.at_end() and brace_close < 0:
            i, ctx = sc.advance()
            if ctx != CTX_NORMAL:
                continue
            c = src[i]
            if c == "{" and sc.depth == 1 and brace_open < 0:
                brace_open = i
            elif c == "}" and sc.depth == 0 and brace_open >= 0:
                brace_close = i

        stmt = Stmt(raw_text=src[start:end], span=self._span(start, end))
        if brace_open >= 0 and brace_close > brace_open:
            stmt.has_block = True
            stmt.head_raw = src[start:brace_open]
            lb_end = brace_open + 1
            while lb_end < brace_close and is_space(src[lb_end]):
                lb_end += 1
            stmt.lbrace_raw = src[brace_open:lb_end]
            if lb_end < brace_close:
                stmt.body = self.split(lb_end, brace_close)
            rb_end = brace_close + 1
            while rb_end < semi and is_space(src[rb_end]):
                rb_end += 1
            stmt.rbrace_raw = src[brace_close:rb_end]
            stmt.trailing_after_r = src[rb_end:semi]
        else:
            stmt.head_raw = src[start:semi]
        stmt.keyword = first_ident(stmt.head_raw).lower()
        return stmt


# ── Keyword extraction ──────────────────────────────────────


def _skip_to_newline(s: str, i: int) -> int:
    while i < len(s) and s[i] != "\n":
        i += 1
    return i + 1


def first_ident(s: str) -> str:
    """First identifier-like token of s, skipping whitespace and comments.

    Quotes around the token are stripped, so '"view" x' yields 'view'.
    """
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        if c.isspace():
            i += 1
            continue
        if c == "#":
            i = _skip_to_newline(s, i + 1)
            continue
        if c == "/" and i + 1 < n and s[i + 1] == "/":
            i = _skip_to_newline(s, i + 2)
            continue
        if c == "/" and i + 1 < n and s[i + 1] == "*":
            j = s.find("*/", i + 2)
            i = n if j < 0 else j + 2
            continue
        break
    start = i
    while i < n and not is_space(s[i]) and s[i] != "{" and s[i] != ";":
        i += 1
    return s[start:i].strip().strip('"')


# ── Entry points ────────────────────────────────────────────


def split(
    src: str, start: int = 0, end: int | None = None, offset: int = 0
) -> list[Node]:
    """Split src[start:end] into an ordered list of Raw and Stmt nodes."""
    if end is None:
        end = len(src)
    return Parser(src, offset).split(start, end)


def decompose(segment: str, offset: int = 0) -> Stmt:
    """Decompose one ';'-terminated statement into head, block and body."""
    return Parser(segment, offset).decompose(0, len(segment))


def parse(source: str | bytes) -> File:
    """Parse named.conf source into a File."""
    if isinstance(source, bytes):
        source = source.decode("utf-8", "surrogateescape")
    return File(split(source))
