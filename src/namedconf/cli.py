"""namedconf CLI: round-trip, list and re-serialize named.conf files."""

from __future__ import annotations

import json
import logging
import sys

from .nodes import File, Node, Stmt
from .parse import parse
from .serialize import file_to_dict
from .storage import save


USAGE: str = """\
namedconf [OPTIONS] FILE

Parse a named.conf file and write it back out.

Options:
  --check          Verify the file round-trips byte-for-byte
  --list           Print one line per statement: depth, keyword, span
  --keyword KW     With --list, only show statements with keyword KW
  --dump           Print the parse tree as JSON
  --verbose        Enable debug logging on stderr
  -o, --output F   Write the re-serialized file to F instead of stdout
  --help           Show this help message
"""


def _list_lines(nodes: list[Node], depth: int, keyword: str, out: list[str]) -> None:
    for node in nodes:
        if not isinstance(node, Stmt):
            continue
        if keyword == "" or node.keyword == keyword:
            name = node.keyword if node.keyword != "" else "-"
            out.append(
                str(depth)
                + "\t"
                + name
                + "\t"
                + str(node.start)
                + "-"
                + str(node.end)
            )
        _list_lines(node.body, depth + 1, keyword, out)


def list_stmts(file: File, keyword: str = "") -> list[str]:
    out: list[str] = []
    _list_lines(file.nodes, 0, keyword.lower(), out)
    return out


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    filepath: str = ""
    output: str | None = None
    keyword: str = ""
    check = False
    listing = False
    dump = False
    verbose = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--check":
            check = True
            i += 1
        elif arg == "--list":
            listing = True
            i += 1
        elif arg == "--dump":
            dump = True
            i += 1
        elif arg == "--verbose":
            verbose = True
            i += 1
        elif arg == "--keyword" or arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("namedconf: " + arg + " requires an argument", file=sys.stderr)
                return 2
            if arg == "--keyword":
                keyword = args[i + 1]
            else:
                output = args[i + 1]
            i += 2
        elif arg.startswith("-"):
            print("namedconf: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif filepath == "":
            filepath = arg
            i += 1
        else:
            print("namedconf: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2
    if filepath == "":
        print("namedconf: missing file argument", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        with open(filepath, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        print("namedconf: " + filepath + ": No such file or directory", file=sys.stderr)
        return 1
    except OSError as e:
        print("namedconf: " + filepath + ": " + str(e), file=sys.stderr)
        return 1
    file = parse(raw)

    if check:
        if file.to_bytes() != raw:
            print("namedconf: " + filepath + ": round-trip mismatch", file=sys.stderr)
            return 1
        print("ok")
        return 0

    if dump:
        print(json.dumps(file_to_dict(file), indent=2))
        return 0

    if listing:
        for line in list_stmts(file, keyword):
            print(line)
        return 0

    if output is not None:
        try:
            save(file, output)
        except OSError as e:
            print("namedconf: " + output + ": " + str(e), file=sys.stderr)
            return 1
        return 0
    sys.stdout.buffer.write(file.to_bytes())
    return 0

