"""Shared pytest fixtures for the full bookpager test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a factory writing UTF-8 source texts under the test temp directory."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / "sources" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
