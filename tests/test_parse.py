"""Pytest-based parser tests.

Test cases live in parse/*.tests files. The expected section holds one
assertion per line, `dotpath: value`, checked against the serialized tree:

    nodes.length: 3
    nodes.0.keyword: options
    nodes.0.body.1.text: "\\n"

A value starting with a double quote is read as a JSON string literal.
Every case is also checked for byte-exact round-trip.
"""

import json

import pytest

from conftest import discover_tests
from namedconf import parse
from namedconf.serialize import file_to_dict


def resolve_dotpath(obj: object, path: str) -> object:
    """Resolve a dot-separated path against a nested dict/list structure."""
    current = obj
    for part in path.split("."):
        if part == "length":
            return len(current)
        if isinstance(current, list):
            current = current[int(part)]
        elif isinstance(current, dict):
            if part not in current:
                raise KeyError(part)
            current = current[part]
        else:
            raise KeyError(
                f"cannot traverse {type(current).__name__} with key {part!r}"
            )
    return current


def to_comparable(value: object) -> str:
    """Convert a value to its string form for comparison."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return json.dumps(value)


def check_assertion(tree: dict, line: str) -> None:
    path, _, expected = line.partition(":")
    expected = expected.strip()
    actual = resolve_dotpath(tree, path.strip())
    if expected.startswith('"'):
        want = json.loads(expected)
        assert actual == want, f"{path}: expected {want!r}, got {actual!r}"
        return
    got = to_comparable(actual)
    assert got == expected, f"{path}: expected {expected!r}, got {got!r}"


def pytest_generate_tests(metafunc):
    """Parametrize tests over parse test files."""
    if "parse_input" in metafunc.fixturenames:
        params = [
            pytest.param(input_text, expected, id=test_id)
            for test_id, input_text, expected in discover_tests("parse")
        ]
        metafunc.parametrize("parse_input,parse_expected", params)


def test_parse(parse_input: str, parse_expected: str):
    """Verify the parse tree matches the expected assertions."""
    file = parse(parse_input)
    assert file.serialize() == parse_input
    tree = file_to_dict(file)
    for line in parse_expected.split("\n"):
        line = line.strip()
        if not line:
            continue
        check_assertion(tree, line)
