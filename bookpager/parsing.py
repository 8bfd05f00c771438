"""Shared parsing helpers for config values and page references."""

from __future__ import annotations


_PAGE_REFERENCE_PREFIX = "p"


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_page_reference(value: str, total_pages: int = 0) -> int:
    """Parse a 1-based page reference such as `p5` or `p123`.

    Args:
        value: Page reference text.
        total_pages: Upper bound for validation; `0` disables the range check.

    Returns:
        The 1-based page number.

    Raises:
        ValueError: If the format is invalid or the page is out of range.
    """

    text = value.strip()
    if not text.startswith(_PAGE_REFERENCE_PREFIX):
        raise ValueError("Invalid page number format. Use: p<number>")

    digits = text[len(_PAGE_REFERENCE_PREFIX) :]
    if not digits or not digits.isdigit():
        raise ValueError("Invalid page number format. Use: p<number>")

    page_number = int(digits)
    if page_number < 1:
        raise ValueError("Page number must be greater than 0")
    if total_pages > 0 and page_number > total_pages:
        raise ValueError(f"Page number must be between 1 and {total_pages}")
    return page_number
