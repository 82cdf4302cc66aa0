"""Tests for SummaryLoadingObserver."""

from io import StringIO

from rich.console import Console

from filtered_loader.loading.infrastructure.summary_observer import (
    SummaryLoadingObserver,
)


def _make_observer() -> tuple[SummaryLoadingObserver, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return SummaryLoadingObserver(console=console), buffer


class TestSummaryOutput:
    def test_batch_filtered_prints_counts(self) -> None:
        observer, buffer = _make_observer()

        observer.batch_filtered(variant="batch", records_in=3, records_out=2)

        assert buffer.getvalue() == "batch filtered 3 records into 2\n"

    def test_end_of_data_prints_total(self) -> None:
        observer, buffer = _make_observer()

        observer.end_of_data(variant="incremental", total_records=5)

        assert buffer.getvalue() == "incremental streamed 5 records\n"

    def test_filter_failed_prints_stage(self) -> None:
        observer, buffer = _make_observer()

        observer.filter_failed(variant="incremental", stage="record", reason="boom")

        assert buffer.getvalue() == "incremental failed at record\n"


class TestSilentEvents:
    """Per-step events produce no output."""

    def test_step_events_are_silent(self) -> None:
        observer, buffer = _make_observer()

        observer.source_set(variant="batch", location="data.csv")
        observer.session_reset(variant="batch", location=None)
        observer.structure_discovered(
            variant="incremental", input_fields=2, output_fields=1
        )
        observer.record_filtered(variant="incremental", index=0)
        observer.mode_conflict(
            variant="batch", requested="incremental", active="batch"
        )

        assert buffer.getvalue() == ""
