"""Plain-text pagination entry point.

Responsibilities:
- Define the `Paginator` protocol shared by document paginators.
- Run the segment -> emit -> persist flow for one plain-text document.
- Convert every failure into an explicit `PaginationResult`.

Key types:
- `Paginator`: protocol for document paginators.
- `TextPaginator`: streaming paginator for UTF-8 plain text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .io.source import open_source_lines
from .io.storage import PageStore
from .models.datatypes import BookPage, PaginationResult
from .telemetry.logger import RunLogger
from .text.pagination import (
    DEFAULT_WIDOW_GUARD_CHARS,
    DEFAULT_WORDS_PER_PAGE,
    PageEmitter,
)
from .text.paragraphs import DEFAULT_HEADING_MAX_CHARS, ParagraphSegmenter

ERROR_KIND_IO = "io"
ERROR_KIND_INVALID_INPUT = "invalid_input"
ERROR_KIND_UNEXPECTED = "unexpected"

_STAGE = "paginate"


class Paginator(Protocol):
    """Protocol for document paginators."""

    def paginate(
        self,
        source_file: Path,
        output_dir: Path,
        book_id: str,
        words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    ) -> PaginationResult:
        """Paginate `source_file` into `<output_dir>/<book_id>/page_<N>.json`."""


def validate_book_id(book_id: str) -> str:
    """Return `book_id` when it is usable as a single directory name.

    Raises:
        ValueError: If the id is blank, a dot segment, or contains a path separator.
    """

    if not book_id or not book_id.strip():
        raise ValueError("Book id must be a non-empty string.")
    if book_id in {".", ".."} or "/" in book_id or "\\" in book_id:
        raise ValueError(f"Book id `{book_id}` must be a single directory name.")
    return book_id


class TextPaginator:
    """Stream a UTF-8 text file into paragraph-respecting page records."""

    def __init__(
        self,
        widow_guard_chars: int = DEFAULT_WIDOW_GUARD_CHARS,
        heading_max_chars: int = DEFAULT_HEADING_MAX_CHARS,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize heuristic thresholds and optional runtime logging."""

        self.widow_guard_chars = widow_guard_chars
        self.heading_max_chars = heading_max_chars
        self._run_logger = run_logger

    def paginate(
        self,
        source_file: Path,
        output_dir: Path,
        book_id: str,
        words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    ) -> PaginationResult:
        """Paginate one document and report the outcome.

        Pages already written before a failure are left on disk; the returned
        result then carries `success=False` and zero pages.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(_STAGE, book_id=book_id)
        try:
            book_dir = Path(output_dir) / validate_book_id(book_id)
            total_pages = self._paginate_file(Path(source_file), book_dir, words_per_page)
        except (OSError, UnicodeDecodeError) as exc:
            return self._failure(book_id, exc, ERROR_KIND_IO)
        except ValueError as exc:
            return self._failure(book_id, exc, ERROR_KIND_INVALID_INPUT)
        except Exception as exc:
            return self._failure(book_id, exc, ERROR_KIND_UNEXPECTED)

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(_STAGE, book_id=book_id, pages=total_pages)
        return PaginationResult(success=True, total_pages=total_pages, pages_dir=book_dir)

    def _paginate_file(self, source_file: Path, book_dir: Path, words_per_page: int) -> int:
        """Run the streaming pass and return the number of committed pages."""

        store = PageStore(book_dir)
        segmenter = ParagraphSegmenter(heading_max_chars=self.heading_max_chars)

        def _persist(page: BookPage) -> None:
            store.save_page(page)
            if self._run_logger is not None:
                self._run_logger.log_event(
                    _STAGE,
                    "page_saved",
                    page=page.page_number,
                    chars=len(page.content),
                    words=len(page.content.split()),
                )

        emitter = PageEmitter(
            words_per_page=words_per_page,
            on_page=_persist,
            widow_guard_chars=self.widow_guard_chars,
        )
        book_dir.mkdir(parents=True, exist_ok=True)
        with open_source_lines(source_file) as lines:
            for paragraph in segmenter.iter_paragraphs(lines):
                emitter.add_paragraph(paragraph)
        return emitter.finish()

    def _failure(self, book_id: str, exc: Exception, error_kind: str) -> PaginationResult:
        """Build the failure result for an aborted run."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(_STAGE, type(exc).__name__)
        detail = str(exc) or type(exc).__name__
        return PaginationResult(
            success=False,
            total_pages=0,
            pages_dir=None,
            error=f"Failed to paginate `{book_id}`: {detail}",
            error_kind=error_kind,
        )
