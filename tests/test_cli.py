"""CLI tests for the namedconf entry point.

Test cases live in cli/*.tests files. Format:

    === test name
    args: --check {file}
    file contents here
    ---
    exit: 0
    stdout-contains: ok
    ---

Directives in the input section:
    args:           CLI arguments (first line); {file} is replaced by the path
                    of a temp file holding the rest of the input section

Assertion directives in the expected section:
    exit:                 exact exit code
    stderr:               exact stderr content (trailing newline stripped)
    stderr-contains:      stderr must contain substring
    stderr-empty:         stderr must be empty
    stdout-contains:      stdout must contain substring
    stdout-not-contains:  stdout must not contain substring
"""

import subprocess
import sys
from pathlib import Path

import pytest

from conftest import discover_tests

SRC_DIR = Path(__file__).parent.parent / "src"


def _parse_case(input_text: str, expected: str) -> dict:
    """Parse input + expected sections into a test case dict."""
    case: dict = {"args": [], "contents": "", "assertions": []}
    input_lines = input_text.split("\n")
    if input_lines and input_lines[0].startswith("args:"):
        args_str = input_lines[0][5:].strip()
        case["args"] = args_str.split() if args_str else []
        input_lines = input_lines[1:]
    case["contents"] = "\n".join(input_lines)
    for line in expected.split("\n"):
        line = line.strip()
        if not line:
            continue
        kind, _, value = line.partition(":")
        value = value.strip()
        if kind == "exit":
            case["assertions"].append((kind, int(value)))
        else:
            case["assertions"].append((kind, value))
    return case


def run_cli(case: dict, tmp_path: Path) -> subprocess.CompletedProcess[bytes]:
    """Run namedconf CLI from a test case."""
    conf = tmp_path / "named.conf"
    conf.write_text(case["contents"])
    args = [a.replace("{file}", str(conf)) for a in case["args"]]
    cmd = [sys.executable, "-m", "namedconf", *args]
    return subprocess.run(cmd, capture_output=True, cwd=SRC_DIR)


def check_assertions(
    result: subprocess.CompletedProcess[bytes], assertions: list[tuple]
) -> None:
    """Check all assertions against a CLI result."""
    stdout = result.stdout.decode(errors="replace")
    stderr = result.stderr.decode(errors="replace")
    for kind, value in assertions:
        if kind == "exit":
            assert result.returncode == value, (
                f"expected exit {value}, got {result.returncode}\nstderr: {stderr}"
            )
        elif kind == "stderr":
            actual = stderr.rstrip("\n")
            assert actual == value, f"expected stderr {value!r}, got {actual!r}"
        elif kind == "stderr-contains":
            assert value in stderr, f"expected stderr to contain {value!r}, got {stderr!r}"
        elif kind == "stderr-empty":
            assert stderr == "", f"expected empty stderr, got {stderr!r}"
        elif kind == "stdout-contains":
            assert value in stdout, f"expected stdout to contain {value!r}, got {stdout!r}"
        elif kind == "stdout-not-contains":
            assert value not in stdout, f"expected stdout without {value!r}, got {stdout!r}"
        else:
            pytest.fail(f"Unknown assertion: {kind}")


def pytest_generate_tests(metafunc):
    """Parametrize test_cli over all .tests files."""
    if "cli_case" in metafunc.fixturenames:
        params = [
            pytest.param(_parse_case(input_text, expected), id=test_id)
            for test_id, input_text, expected in discover_tests("cli")
        ]
        metafunc.parametrize("cli_case", params)


def test_cli(cli_case: dict, tmp_path: Path) -> None:
    """Run a single CLI test case from a .tests file."""
    result = run_cli(cli_case, tmp_path)
    check_assertions(result, cli_case["assertions"])


def test_output_flag_writes_file(tmp_path: Path) -> None:
    conf = tmp_path / "named.conf"
    conf.write_bytes(b"options { };\n")
    out = tmp_path / "copy.conf"
    result = subprocess.run(
        [sys.executable, "-m", "namedconf", "-o", str(out), str(conf)],
        capture_output=True,
        cwd=SRC_DIR,
    )
    assert result.returncode == 0
    assert result.stdout == b""
    assert out.read_bytes() == b"options { };\n"


def test_main_in_process(tmp_path: Path, capsys) -> None:
    from namedconf.cli import main

    conf = tmp_path / "named.conf"
    conf.write_text("zone \"x\" { };\n")
    assert main(["--list", str(conf)]) == 0
    assert capsys.readouterr().out == "0\tzone\t0-13\n"
