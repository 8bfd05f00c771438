"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
pagination summaries, page listings, and page content.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PaginationStageError
from .models.datatypes import BookPage, PaginationResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PaginationStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_pagination_summary(book_id: str, result: PaginationResult) -> None:
    """Print the outcome of a successful pagination run."""

    typer.echo(f"Book id: {book_id}")
    typer.echo(f"Total pages: {result.total_pages}")
    typer.echo(f"Pages dir: {result.pages_dir}")


def echo_page_list(pages: list[BookPage]) -> None:
    """Print compact deterministic page rows."""

    for page in sorted(pages, key=lambda item: item.page_number):
        typer.echo(
            f"{page.page_number}. words={len(page.content.split())} "
            f"offsets={page.start_offset}-{page.end_offset}"
        )


def echo_page(page: BookPage, total_pages: int) -> None:
    """Print one page header followed by its content."""

    typer.echo(f"Page {page.page_number + 1} / {total_pages}")
    typer.echo("")
    typer.echo(page.content)
