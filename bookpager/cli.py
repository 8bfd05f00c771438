"""Command-line interface for bookpager.

Responsibilities:
- Expose user-facing commands for paginating and reading books.
- Convert CLI arguments and optional YAML defaults into `PaginatorConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_page,
    echo_page_list,
    echo_pagination_summary,
    exit_with_command_error,
)
from .config import ConfigLoader, PaginatorConfig
from .errors import PaginationStageError
from .io.storage import PageStore
from .library import LibraryImporter
from .models.datatypes import PaginationResult
from .paginator import ERROR_KIND_INVALID_INPUT, ERROR_KIND_IO, TextPaginator
from .parsing import parse_page_reference
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="bookpager",
    no_args_is_help=True,
    help="bookpager CLI.",
)

_FAILURE_HINTS = {
    ERROR_KIND_IO: (
        "Verify the source file exists, is UTF-8 text, and the output directory is writable."
    ),
    ERROR_KIND_INVALID_INPUT: "Check `--book-id` and `--words-per-page` values.",
}


def _load_yaml_config(config_path: Path | None) -> PaginatorConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PaginationStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PaginationStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PaginationStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    source: Path | None,
    out: Path | None,
    book_id: str | None,
    words_per_page: int | None,
) -> PaginatorConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)

    if loaded_config is None:
        if source is None:
            raise PaginationStageError(
                stage="config",
                detail="Source file path is required when `--config` is not provided.",
                hint="Pass `<source.txt>` or use `--config <path.yaml>` with `source_path`.",
            )
        config = PaginatorConfig(source_path=source)
    else:
        config = loaded_config
        if source is not None:
            config.source_path = source

    if out is not None:
        config.output_dir = out
    if book_id is not None:
        config.book_id = book_id
    if words_per_page is not None:
        config.words_per_page = words_per_page

    try:
        config.validate()
    except ValueError as exc:
        raise PaginationStageError(
            stage="config",
            detail=str(exc),
            hint="Fix the option value and rerun.",
        ) from exc
    return config


def _raise_for_failed_result(stage: str, result: PaginationResult) -> None:
    """Convert a failed pagination result into a stage error."""

    if result.success:
        return
    raise PaginationStageError.from_result(stage, result, _FAILURE_HINTS)


def _run_logger(verbose: bool) -> RunLogger:
    """Create the runtime logger for a command invocation."""

    return RunLogger(level="DEBUG" if verbose else "INFO")


@app.command("paginate")
def paginate_command(
    source: Annotated[
        Path | None,
        typer.Argument(
            help="Path to source text file. Required unless provided by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output directory (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
    book_id: Annotated[
        str | None,
        typer.Option("--book-id", help="Book id used as page directory name."),
    ] = None,
    words_per_page: Annotated[
        int | None,
        typer.Option("--words-per-page", help="Target word count per page."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log one event per saved page."),
    ] = False,
) -> None:
    """Paginate a plain-text book into page records."""
    try:
        config = _resolve_command_config(
            config_file=config_file,
            source=source,
            out=out,
            book_id=book_id,
            words_per_page=words_per_page,
        )
        resolved_book_id = config.resolved_book_id()
        paginator = TextPaginator(
            widow_guard_chars=config.widow_guard_chars,
            heading_max_chars=config.heading_max_chars,
            run_logger=_run_logger(verbose),
        )
        result = paginator.paginate(
            source_file=config.source_path,
            output_dir=config.output_dir,
            book_id=resolved_book_id,
            words_per_page=config.words_per_page,
        )
        _raise_for_failed_result("paginate", result)
    except Exception as exc:
        exit_with_command_error("paginate", exc)
    echo_pagination_summary(resolved_book_id, result)


@app.command("import")
def import_command(
    source: Annotated[
        Path | None,
        typer.Argument(
            help="Path to source text file. Required unless provided by `--config`.",
        ),
    ] = None,
    library: Annotated[
        Path | None,
        typer.Option("--library", help="Library pages directory (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
    book_id: Annotated[
        str | None,
        typer.Option("--book-id", help="Book id used as page directory name."),
    ] = None,
    words_per_page: Annotated[
        int | None,
        typer.Option("--words-per-page", help="Target word count per page."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log one event per saved page."),
    ] = False,
) -> None:
    """Import a book into the library, reusing an existing pagination when present."""
    try:
        config = _resolve_command_config(
            config_file=config_file,
            source=source,
            out=library,
            book_id=book_id,
            words_per_page=words_per_page,
        )
        resolved_book_id = config.resolved_book_id()
        run_logger = _run_logger(verbose)
        importer = LibraryImporter(
            pages_root=config.output_dir,
            paginator=TextPaginator(
                widow_guard_chars=config.widow_guard_chars,
                heading_max_chars=config.heading_max_chars,
                run_logger=run_logger,
            ),
            run_logger=run_logger,
        )
        result = importer.import_book(
            source_file=config.source_path,
            book_id=resolved_book_id,
            words_per_page=config.words_per_page,
        )
        _raise_for_failed_result("import", result)
    except Exception as exc:
        exit_with_command_error("import", exc)
    echo_pagination_summary(resolved_book_id, result)
    typer.echo(f"Reused existing pages: {'yes' if result.reused else 'no'}")


@app.command("list-pages")
def list_pages_command(
    pages_dir: Annotated[Path, typer.Argument(help="Directory holding `page_<N>.json` files.")],
) -> None:
    """List page numbers, word counts, and offsets of a paginated book."""
    try:
        store = PageStore(pages_dir)
        page_numbers = store.list_page_numbers()
        if not page_numbers:
            raise PaginationStageError(
                stage="list-pages",
                detail=f"No page records found in `{pages_dir}`.",
                hint="Run `bookpager paginate <source.txt>` first.",
            )
        pages = [store.load_page(number) for number in page_numbers]
    except Exception as exc:
        exit_with_command_error("list-pages", exc)
    echo_page_list([page for page in pages if page is not None])


@app.command("show-page")
def show_page_command(
    pages_dir: Annotated[Path, typer.Argument(help="Directory holding `page_<N>.json` files.")],
    page_reference: Annotated[
        str,
        typer.Argument(help="1-based page reference such as `p1` or `p42`."),
    ],
) -> None:
    """Print the content of one page."""
    try:
        store = PageStore(pages_dir)
        total_pages = store.page_count()
        try:
            page_number = parse_page_reference(page_reference, total_pages)
        except ValueError as exc:
            raise PaginationStageError(
                stage="page-reference",
                detail=str(exc),
                hint="Use `p<number>`, for example `p1`.",
            ) from exc
        page = store.load_page(page_number - 1)
        if page is None:
            raise PaginationStageError(
                stage="show-page",
                detail=f"Page {page_number} not found in `{pages_dir}`.",
                hint="Use `bookpager list-pages <pages_dir>` to see available pages.",
            )
    except Exception as exc:
        exit_with_command_error("show-page", exc)
    echo_page(page, total_pages)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
