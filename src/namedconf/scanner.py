"""named.conf scanner: tracks comment/string context and brace depth."""

from __future__ import annotations


# Context constants
CTX_NORMAL = "NORMAL"
CTX_LINE_COMMENT = "LINE_COMMENT"
CTX_BLOCK_COMMENT = "BLOCK_COMMENT"
CTX_STRING = "STRING"

SPACE_CHARS: set[str] = {" ", "\t", "\n", "\r", "\f"}


def is_space(c: str) -> bool:
    return c in SPACE_CHARS


class Scanner:
    """Walks a range of source text one logical unit at a time.

    A unit is a single character, or a two-character comment opener/closer,
    or a backslash escape inside a string. After each `advance()` the
    `context` attribute holds the context that applies to the *next* unit,
    and `depth` counts unmatched `{` seen in normal context.
    """

    def __init__(self, src: str, start: int, end: int):
        self.src: str = src
        self.pos: int = start
        self.end: int = end
        self.context: str = CTX_NORMAL
        self.depth: int = 0

    def __repr__(self) -> str:
        return (
            "Scanner("
            + str(self.pos)
            + "/"
            + str(self.end)
            + ", "
            + self.context
            + ", depth="
            + str(self.depth)
            + ")"
        )

    def at_end(self) -> bool:
        return self.pos >= self.end

    def _next_is(self, c: str) -> bool:
        return self.pos + 1 < self.end and self.src[self.pos + 1] == c

    def advance(self) -> tuple[int, str]:
        """Consume one unit. Returns (unit_start, context_of_unit)."""
        start = self.pos
        c = self.src[start]
        ctx = self.context

        if ctx == CTX_LINE_COMMENT:
            if c == "\n":
                self.context = CTX_NORMAL
            self.pos += 1
            return start, ctx

        if ctx == CTX_BLOCK_COMMENT:
            if c == "*" and self._next_is("/"):
                self.context = CTX_NORMAL
                self.pos += 2
                return start, ctx
            self.pos += 1
            return start, ctx

        if ctx == CTX_STRING:
            if c == "\\":
                # A trailing backslash has nothing to escape
                if self.pos + 1 < self.end:
                    self.pos += 2
                else:
                    self.pos += 1
                return start, ctx
            if c == '"':
                self.context = CTX_NORMAL
            self.pos += 1
            return start, ctx

        # Normal context: openers first
        if c == "/" and self._next_is("*"):
            self.context = CTX_BLOCK_COMMENT
            self.pos += 2
            return start, CTX_BLOCK_COMMENT
        if c == "/" and self._next_is("/"):
            self.context = CTX_LINE_COMMENT
            self.pos += 2
            return start, CTX_LINE_COMMENT
        if c == "#":
            self.context = CTX_LINE_COMMENT
            self.pos += 1
            return start, CTX_LINE_COMMENT
        if c == '"':
            self.context = CTX_STRING
            self.pos += 1
            return start, CTX_STRING

        if c == "{":
            self.depth += 1
        elif c == "}":
            if self.depth > 0:
                self.depth -= 1
        self.pos += 1
        return start, CTX_NORMAL
