"""Word accumulation and page-break decisions.

Responsibilities:
- Tokenize normalized paragraphs into whitespace-delimited words.
- Accumulate words into pages bounded by a target word count.
- Keep a running character offset for bookmarking.
- Delay page cuts that would leave a thin paragraph fragment (widow guard).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ..models.datatypes import BookPage

DEFAULT_WORDS_PER_PAGE = 100
DEFAULT_WIDOW_GUARD_CHARS = 40
PARAGRAPH_SEPARATOR = "\n\n"


class EmitterState(Enum):
    """Lifecycle states of a `PageEmitter`."""

    ACCUMULATING = "accumulating"
    CUT_PROPOSED = "cut_proposed"
    COMMITTED = "committed"
    DONE = "done"


class PageEmitter:
    """Accumulate paragraph words into pages and hand each finished page to a sink.

    Offset accounting:
    - the first word of a page records the running offset as `start_offset`;
    - a space is inserted (offset +1) between words of the same paragraph;
    - each word advances the offset by its length;
    - each paragraph ends with a two-character separator (offset +2).

    Once the page holds `words_per_page` words a cut is proposed after every
    appended word. The cut commits only when at least `widow_guard_chars`
    characters were appended since the last paragraph separator.
    """

    def __init__(
        self,
        words_per_page: int,
        on_page: Callable[[BookPage], object],
        widow_guard_chars: int = DEFAULT_WIDOW_GUARD_CHARS,
    ) -> None:
        """Initialize emitter limits and the committed-page sink."""

        if words_per_page <= 0:
            raise ValueError("`words_per_page` must be a positive integer.")
        if widow_guard_chars < 0:
            raise ValueError("`widow_guard_chars` must not be negative.")

        self.words_per_page = words_per_page
        self.widow_guard_chars = widow_guard_chars
        self._on_page = on_page

        self._parts: list[str] = []
        self._word_count = 0
        self._ends_with_separator = False
        self._page_start_offset = 0
        self._offset = 0
        self._chars_since_separator = 0
        self._page_count = 0
        self._state = EmitterState.ACCUMULATING

    @property
    def page_count(self) -> int:
        """Number of pages committed so far."""

        return self._page_count

    @property
    def offset(self) -> int:
        """Current running character offset."""

        return self._offset

    @property
    def state(self) -> EmitterState:
        """Current lifecycle state."""

        return self._state

    def add_paragraph(self, text: str) -> None:
        """Append all words of one normalized paragraph, then the separator."""

        if self._state is EmitterState.DONE:
            raise RuntimeError("Cannot add paragraphs after `finish()`.")

        for word in text.split():
            self._append_word(word)

        self._parts.append(PARAGRAPH_SEPARATOR)
        self._offset += len(PARAGRAPH_SEPARATOR)
        self._ends_with_separator = True
        self._chars_since_separator = 0

    def finish(self) -> int:
        """Commit any buffered words as the final page and return the page total."""

        if self._state is not EmitterState.DONE and self._word_count > 0:
            self._commit()
        self._state = EmitterState.DONE
        return self._page_count

    def _append_word(self, word: str) -> None:
        """Append one word with its leading space and evaluate the page cut."""

        if self._word_count == 0:
            self._page_start_offset = self._offset
        elif not self._ends_with_separator:
            self._parts.append(" ")
            self._offset += 1
            self._chars_since_separator += 1

        self._parts.append(word)
        self._offset += len(word)
        self._chars_since_separator += len(word)
        self._ends_with_separator = False
        self._word_count += 1

        if self._word_count < self.words_per_page:
            return

        self._state = EmitterState.CUT_PROPOSED
        if self._cut_allowed():
            self._commit()
        else:
            self._state = EmitterState.ACCUMULATING

    def _cut_allowed(self) -> bool:
        """Return whether a proposed cut passes the widow guard."""

        return self._chars_since_separator >= self.widow_guard_chars

    def _commit(self) -> None:
        """Emit the buffered page and reset the buffer for the next page."""

        page = BookPage(
            page_number=self._page_count,
            content="".join(self._parts).strip(),
            start_offset=self._page_start_offset,
            end_offset=self._offset,
        )
        self._state = EmitterState.COMMITTED
        self._on_page(page)
        self._page_count += 1
        self._parts = []
        self._word_count = 0
        self._ends_with_separator = False
        self._state = EmitterState.ACCUMULATING
