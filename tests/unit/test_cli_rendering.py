"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from bookpager.cli_rendering import (
    echo_page,
    echo_page_list,
    echo_pagination_summary,
    exit_with_command_error,
)
from bookpager.errors import PaginationStageError
from bookpager.models.datatypes import BookPage, PaginationResult


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = PaginationStageError(
        stage="paginate",
        detail="Failed to paginate `broken`: No such file or directory",
        hint="Verify the source file exists.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("paginate", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "paginate failed at stage `paginate`" in captured.err
    assert "Hint: Verify the source file exists." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("list-pages", RuntimeError("unexpected page error"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "list-pages failed: unexpected page error" in captured.err


def test_summary_list_and_page_rendering(capsys: pytest.CaptureFixture[str]) -> None:
    echo_pagination_summary(
        "alice",
        PaginationResult(success=True, total_pages=2, pages_dir=Path("library/alice")),
    )
    echo_page_list(
        [
            BookPage(1, "pages of a few words", 43, 63),
            BookPage(0, "This is a simple test", 0, 21),
        ]
    )
    echo_page(BookPage(1, "pages of a few words", 43, 63), total_pages=2)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Book id: alice",
        "Total pages: 2",
        f"Pages dir: {Path('library/alice')}",
        "0. words=5 offsets=0-21",
        "1. words=5 offsets=43-63",
        "Page 2 / 2",
        "",
        "pages of a few words",
    ]
