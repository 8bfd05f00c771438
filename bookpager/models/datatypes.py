"""Core datatypes shared across bookpager modules.

Responsibilities:
- Represent immutable records exchanged between pagination stages.
- Provide explicit typing and a stable on-disk payload shape for pages.

Key types:
- `BookPage`, `PaginationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class BookPage:
    """One persisted page of a paginated document.

    Attributes:
        page_number: 0-based page number, contiguous within a document.
        content: Stripped page text; paragraphs are separated by a blank line.
        start_offset: Running character offset when the first word was appended.
        end_offset: Running character offset when the page was committed.
    """

    page_number: int
    content: str
    start_offset: int
    end_offset: int

    def to_payload(self) -> dict[str, object]:
        """Return the JSON payload persisted for this page."""

        return {
            "pageNumber": self.page_number,
            "content": self.content,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> BookPage:
        """Build a page from a persisted JSON payload.

        Raises:
            ValueError: If a required field is missing or has the wrong type.
        """

        try:
            page_number = payload["pageNumber"]
            content = payload["content"]
            start_offset = payload["startOffset"]
            end_offset = payload["endOffset"]
        except KeyError as exc:
            raise ValueError(f"Page payload is missing field `{exc.args[0]}`.") from exc

        for field_name, field_value in (
            ("pageNumber", page_number),
            ("startOffset", start_offset),
            ("endOffset", end_offset),
        ):
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise ValueError(f"Page payload field `{field_name}` must be an integer.")
        if not isinstance(content, str):
            raise ValueError("Page payload field `content` must be a string.")

        return cls(
            page_number=page_number,
            content=content,
            start_offset=start_offset,
            end_offset=end_offset,
        )


@dataclass(frozen=True, slots=True)
class PaginationResult:
    """Summary of one pagination invocation.

    Attributes:
        success: Whether every page was persisted without error.
        total_pages: Number of committed pages; `0` on failure.
        pages_dir: Directory holding the page files, or `None` on failure.
        error: Diagnostic message for failed runs.
        error_kind: Failure category: `"io"`, `"invalid_input"` or `"unexpected"`.
        reused: Whether an existing pagination was returned without re-running.
    """

    success: bool
    total_pages: int
    pages_dir: Path | None
    error: str | None = None
    error_kind: str | None = None
    reused: bool = False
