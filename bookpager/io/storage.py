"""Page record storage.

Responsibilities:
- Persist one JSON record per page under a document directory.
- Offer listing and lookup methods used by readers and the library importer.
"""

from __future__ import annotations

import json
from pathlib import Path
import re

from ..models.datatypes import BookPage

_PAGE_FILE_RE = re.compile(r"^page_(\d+)\.json$")


def page_file_name(page_number: int) -> str:
    """Return the deterministic file name for a page number."""

    return f"page_{page_number}.json"


class PageStore:
    """Filesystem-backed page store for one document directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with the document's page directory."""

        self.root = root

    def page_path(self, page_number: int) -> Path:
        """Return the file path for a page number."""

        return self.root / page_file_name(page_number)

    def save_page(self, page: BookPage) -> Path:
        """Save a page record and return its final path."""

        path = self.page_path(page.page_number)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(page.to_payload(), ensure_ascii=False),
            encoding="utf-8",
        )
        return path

    def load_page(self, page_number: int) -> BookPage | None:
        """Load a page record, or return `None` when it was never written."""

        path = self.page_path(page_number)
        if not path.is_file():
            return None
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Page file `{path}` must contain a JSON object.")
        return BookPage.from_payload(payload)

    def list_page_numbers(self) -> list[int]:
        """Return persisted page numbers in ascending numeric order."""

        if not self.root.is_dir():
            return []
        numbers: list[int] = []
        for path in self.root.iterdir():
            match = _PAGE_FILE_RE.match(path.name)
            if match is not None and path.is_file():
                numbers.append(int(match.group(1)))
        return sorted(numbers)

    def page_count(self) -> int:
        """Return the number of persisted page records."""

        return len(self.list_page_numbers())

    def exists(self, page_number: int) -> bool:
        """Return whether the given page record exists."""

        return self.page_path(page_number).is_file()
