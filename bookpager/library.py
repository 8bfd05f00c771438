"""Library import flow for paginated books.

Responsibilities:
- Reuse an existing pagination when page records are already on disk.
- Report missing sources as failed results instead of raising.
- Route sources to the plain-text paginator.
"""

from __future__ import annotations

from pathlib import Path

from .io.storage import PageStore
from .models.datatypes import PaginationResult
from .paginator import (
    ERROR_KIND_INVALID_INPUT,
    ERROR_KIND_IO,
    Paginator,
    TextPaginator,
    validate_book_id,
)
from .telemetry.logger import RunLogger
from .text.pagination import DEFAULT_WORDS_PER_PAGE

_STAGE = "import"
_TEXT_EXTENSIONS = frozenset({".txt"})


class LibraryImporter:
    """Paginate books into a shared library directory, one folder per book id."""

    def __init__(
        self,
        pages_root: Path,
        paginator: Paginator | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the library root, paginator, and optional runtime logging."""

        self.pages_root = pages_root
        self._paginator = paginator or TextPaginator(run_logger=run_logger)
        self._run_logger = run_logger

    def import_book(
        self,
        source_file: Path,
        book_id: str,
        words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    ) -> PaginationResult:
        """Return the book's pagination, running the paginator only when needed."""

        try:
            book_dir = self.pages_root / validate_book_id(book_id)
        except ValueError as exc:
            return PaginationResult(
                success=False,
                total_pages=0,
                pages_dir=None,
                error=str(exc),
                error_kind=ERROR_KIND_INVALID_INPUT,
            )

        existing_pages = PageStore(book_dir).page_count()
        if existing_pages > 0:
            self._log("reused", book_id=book_id, pages=existing_pages)
            return PaginationResult(
                success=True,
                total_pages=existing_pages,
                pages_dir=book_dir,
                reused=True,
            )

        if not source_file.is_file():
            self._log("source_missing", level="ERROR", book_id=book_id)
            return PaginationResult(
                success=False,
                total_pages=0,
                pages_dir=None,
                error="Book file not found",
                error_kind=ERROR_KIND_IO,
            )

        extension = source_file.suffix.lower()
        if extension not in _TEXT_EXTENSIONS:
            self._log(
                "unsupported_extension",
                level="WARNING",
                book_id=book_id,
                extension=extension or "none",
            )

        return self._paginator.paginate(
            source_file=source_file,
            output_dir=self.pages_root,
            book_id=book_id,
            words_per_page=words_per_page,
        )

    def _log(self, event: str, level: str = "INFO", **context: object) -> None:
        """Emit one importer event when a logger is configured."""

        if self._run_logger is not None:
            self._run_logger.log_event(_STAGE, event, level=level, **context)
