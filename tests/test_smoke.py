"""Basic smoke tests for project wiring."""

from pathlib import Path

import bookpager
from bookpager.config import PaginatorConfig
from bookpager.paginator import TextPaginator


def test_paginator_can_be_instantiated() -> None:
    """Paginator class should be constructible with default thresholds."""

    paginator = TextPaginator()
    assert paginator.widow_guard_chars == 40
    assert paginator.heading_max_chars == 60


def test_package_exports_entry_points() -> None:
    assert bookpager.TextPaginator is TextPaginator
    assert bookpager.__version__


def test_config_dataclass_defaults() -> None:
    config = PaginatorConfig(source_path=Path("input.txt"))
    assert config.words_per_page > 0
