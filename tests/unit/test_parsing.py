"""Unit tests for shared parsing helpers."""

import pytest

from bookpager.parsing import normalize_optional_string, parse_page_reference


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


def test_parse_page_reference_accepts_one_based_references() -> None:
    assert parse_page_reference("p1") == 1
    assert parse_page_reference(" p123 ") == 123
    assert parse_page_reference("p7", total_pages=7) == 7


@pytest.mark.parametrize("value", ["5", "page5", "p", "p-1", "p1.5", "P3"])
def test_parse_page_reference_rejects_bad_format(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid page number format"):
        parse_page_reference(value)


def test_parse_page_reference_validates_range() -> None:
    with pytest.raises(ValueError, match="greater than 0"):
        parse_page_reference("p0")
    with pytest.raises(ValueError, match="between 1 and 3"):
        parse_page_reference("p4", total_pages=3)
