"""Load and save named.conf files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .nodes import File
from .parse import parse

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Error saving a file."""

    def __init__(self, msg: str, path: str | None = None):
        self.msg: str = msg
        self.path: str | None = path
        if path is None:
            super().__init__(msg)
        else:
            super().__init__(path + ": " + msg)


def parse_file(path: str | os.PathLike[str]) -> File:
    """Parse a named.conf file from disk. OSError propagates unchanged."""
    p = Path(path)
    raw = p.read_bytes()
    file = parse(raw)
    file.path = str(p.resolve())
    logger.debug("parsed %s: %d top-level nodes", file.path, len(file.nodes))
    return file


def save(file: File, path: str | os.PathLike[str] | None = None) -> None:
    """Write file to path (or the path it was loaded from).

    The text goes to a sibling temp file first, then replaces the target.
    """
    if path is None:
        if file.path is None:
            raise StorageError("no path provided to save")
        path = file.path
    target = Path(path)
    tmp = target.with_name(target.name + ".tmp")
    try:
        tmp.write_bytes(file.to_bytes())
        os.replace(tmp, target)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("saved %s", target)
