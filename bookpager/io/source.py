"""Scoped line reading for plain-text source documents.

Responsibilities:
- Open a UTF-8 source once and expose it as a lazy line stream.
- Guarantee the file handle is released on every exit path.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

_READ_BUFFER_BYTES = 8192


def _strip_line_terminator(line: str) -> str:
    """Remove one trailing newline left by universal-newline reading."""

    if line.endswith("\n"):
        return line[:-1]
    return line


def _iter_lines(handle: TextIO) -> Iterator[str]:
    """Yield source lines without terminators."""

    for line in handle:
        yield _strip_line_terminator(line)


@contextmanager
def open_source_lines(path: Path) -> Iterator[Iterator[str]]:
    """Open `path` as strict UTF-8 and yield its lines without terminators.

    `\\n`, `\\r\\n`, and `\\r` terminators are all recognized. Decoding errors
    surface as `UnicodeDecodeError` while iterating.
    """

    with path.open("r", encoding="utf-8", errors="strict", buffering=_READ_BUFFER_BYTES) as handle:
        yield _iter_lines(handle)
