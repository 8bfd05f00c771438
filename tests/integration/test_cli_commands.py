"""CLI tests for pagination, import, and page reading commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from bookpager.cli import app

SourceWriter = Callable[[str, str], Path]

_BASIC_TEXT = "This is a simple test file to paginate into pages of a few words each."


def test_paginate_command_writes_pages_and_prints_summary(
    write_source: SourceWriter, tmp_path: Path
) -> None:
    source = write_source("basic.txt", _BASIC_TEXT)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["paginate", str(source), "--out", str(tmp_path / "library"), "--words-per-page", "5"],
    )

    assert result.exit_code == 0, result.output
    assert "Book id: basic" in result.output
    assert "Total pages: 3" in result.output
    assert (tmp_path / "library" / "basic" / "page_2.json").exists()


def test_paginate_command_reads_yaml_config_with_cli_overrides(
    write_source: SourceWriter, tmp_path: Path
) -> None:
    source = write_source("large.txt", "word " * 1000)
    config_path = tmp_path / "bookpager.yml"
    config_path.write_text(
        f"source_path: {source}\noutput_dir: {tmp_path / 'from-config'}\nwords_per_page: 500\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["paginate", "--config", str(config_path), "--book-id", "big", "--words-per-page", "100"],
    )

    assert result.exit_code == 0, result.output
    assert "Total pages: 10" in result.output
    assert (tmp_path / "from-config" / "big" / "page_9.json").exists()


def test_paginate_command_reports_missing_source_with_hint(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["paginate", str(tmp_path / "missing.txt"), "--out", str(tmp_path / "library")],
    )

    assert result.exit_code == 1
    assert "paginate failed at stage `paginate`" in result.output
    assert "Hint: Verify the source file exists" in result.output


def test_paginate_command_reports_missing_config_file() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["paginate", "--config", "missing-bookpager.yaml"])

    assert result.exit_code == 1
    assert "paginate failed at stage `config`" in result.output
    assert "Config file not found: `missing-bookpager.yaml`." in result.output


def test_paginate_command_requires_source_or_config() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["paginate"])

    assert result.exit_code == 1
    assert "Source file path is required" in result.output


def test_paginate_command_rejects_non_positive_word_target(
    write_source: SourceWriter, tmp_path: Path
) -> None:
    source = write_source("basic.txt", _BASIC_TEXT)
    runner = CliRunner()

    result = runner.invoke(app, ["paginate", str(source), "--words-per-page", "0"])

    assert result.exit_code == 1
    assert "paginate failed at stage `config`" in result.output
    assert "`words_per_page` must be a positive integer." in result.output


def test_import_command_reports_reuse_on_second_run(
    write_source: SourceWriter, tmp_path: Path
) -> None:
    source = write_source("pg11.txt", _BASIC_TEXT)
    library = tmp_path / "library"
    runner = CliRunner()
    arguments = ["import", str(source), "--library", str(library), "--words-per-page", "5"]

    first = runner.invoke(app, arguments)
    second = runner.invoke(app, arguments)

    assert first.exit_code == 0, first.output
    assert "Reused existing pages: no" in first.output
    assert second.exit_code == 0, second.output
    assert "Reused existing pages: yes" in second.output
    assert "Total pages: 3" in second.output


def test_list_pages_and_show_page_commands(write_source: SourceWriter, tmp_path: Path) -> None:
    source = write_source("basic.txt", _BASIC_TEXT)
    runner = CliRunner()
    runner.invoke(
        app,
        ["paginate", str(source), "--out", str(tmp_path), "--words-per-page", "5"],
    )
    pages_dir = tmp_path / "basic"

    listing = runner.invoke(app, ["list-pages", str(pages_dir)])
    shown = runner.invoke(app, ["show-page", str(pages_dir), "p2"])

    assert listing.exit_code == 0, listing.output
    assert "0. words=9 offsets=0-43" in listing.output
    assert "1. words=5 offsets=43-63" in listing.output
    assert "2. words=1 offsets=63-70" in listing.output
    assert shown.exit_code == 0, shown.output
    assert "Page 2 / 3" in shown.output
    assert "pages of a few words" in shown.output


def test_show_page_command_rejects_out_of_range_reference(
    write_source: SourceWriter, tmp_path: Path
) -> None:
    source = write_source("basic.txt", _BASIC_TEXT)
    runner = CliRunner()
    runner.invoke(
        app,
        ["paginate", str(source), "--out", str(tmp_path), "--words-per-page", "5"],
    )

    result = runner.invoke(app, ["show-page", str(tmp_path / "basic"), "p4"])

    assert result.exit_code == 1
    assert "show-page failed at stage `page-reference`" in result.output
    assert "Page number must be between 1 and 3" in result.output


def test_list_pages_command_reports_empty_directory(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["list-pages", str(tmp_path)])

    assert result.exit_code == 1
    assert "list-pages failed at stage `list-pages`" in result.output
