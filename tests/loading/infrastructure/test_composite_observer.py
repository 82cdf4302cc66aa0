"""Tests for CompositeLoadingObserver."""

from filtered_loader.loading.infrastructure.composite_observer import (
    CompositeLoadingObserver,
)
from tests.loading.fake_observer import FakeLoadingObserver


def _make_composite(*observers: FakeLoadingObserver) -> CompositeLoadingObserver:
    return CompositeLoadingObserver(observers=list(observers))


class TestCompositeLoadingObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_source_set_forwarded_to_all(self) -> None:
        obs_a = FakeLoadingObserver()
        obs_b = FakeLoadingObserver()

        _make_composite(obs_a, obs_b).source_set(variant="batch", location="a.csv")

        assert obs_a.sources_set[0].location == "a.csv"
        assert obs_b.sources_set[0].location == "a.csv"

    def test_batch_filtered_preserves_all_fields(self) -> None:
        obs = FakeLoadingObserver()

        _make_composite(obs).batch_filtered(variant="batch", records_in=5, records_out=4)

        event = obs.batches[0]
        assert event.variant == "batch"
        assert event.records_in == 5
        assert event.records_out == 4

    def test_structure_discovered_forwarded(self) -> None:
        obs = FakeLoadingObserver()

        _make_composite(obs).structure_discovered(
            variant="incremental", input_fields=3, output_fields=2
        )

        assert obs.structures[0].input_fields == 3
        assert obs.structures[0].output_fields == 2

    def test_record_and_end_events_forwarded(self) -> None:
        obs_a = FakeLoadingObserver()
        obs_b = FakeLoadingObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.record_filtered(variant="incremental", index=0)
        composite.end_of_data(variant="incremental", total_records=1)

        for obs in (obs_a, obs_b):
            assert obs.records[0].index == 0
            assert obs.ends[0].total_records == 1

    def test_failure_events_forwarded(self) -> None:
        obs = FakeLoadingObserver()
        composite = _make_composite(obs)

        composite.session_reset(variant="batch", location=None)
        composite.mode_conflict(variant="batch", requested="batch", active="incremental")
        composite.filter_failed(variant="batch", stage="batch", reason="boom")

        assert obs.resets[0].location is None
        assert obs.conflicts[0].active == "incremental"
        assert obs.failures[0].reason == "boom"

    def test_empty_composite_accepts_events(self) -> None:
        _make_composite().end_of_data(variant="batch", total_records=0)
