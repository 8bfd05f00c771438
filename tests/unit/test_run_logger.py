"""Unit tests for deterministic phase log formatting."""

from __future__ import annotations

import io

from bookpager.telemetry.logger import RunLogger


def test_stage_events_are_rendered_with_sorted_sanitized_context() -> None:
    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("paginate", book_id="my book", pages=3)
    run_logger.log_stage_failure("paginate", "OSError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=paginate event=start book_id=my_book pages=3",
        "[phase] level=ERROR stage=paginate event=failure error_type=OSError",
    ]


def test_debug_events_respect_configured_level() -> None:
    quiet_sink = io.StringIO()
    RunLogger(sink=quiet_sink).log_event("paginate", "page_saved", page=0)
    assert quiet_sink.getvalue() == ""

    verbose_sink = io.StringIO()
    RunLogger(sink=verbose_sink, level="DEBUG").log_event("paginate", "page_saved", page=0)
    assert verbose_sink.getvalue().strip() == (
        "[phase] level=DEBUG stage=paginate event=page_saved page=0"
    )


def test_blank_context_values_render_as_none() -> None:
    sink = io.StringIO()

    RunLogger(sink=sink).log_stage_complete("import", extension="")

    assert "extension=none" in sink.getvalue()


def test_records_carry_raw_context_as_extras() -> None:
    """Callable sinks receive unsanitized stage, event, and context values."""

    records: list[dict[str, object]] = []
    run_logger = RunLogger(sink=lambda message: records.append(message.record["extra"]))

    run_logger.log_event("paginate", "page_saved", level="INFO", page=2, book_id="my book")

    assert records == [
        {"stage": "paginate", "event": "page_saved", "page": 2, "book_id": "my book"}
    ]
