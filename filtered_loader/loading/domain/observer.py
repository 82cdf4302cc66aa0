"""Observer port for the loading domain — defines events in domain language."""

from typing import Protocol


class LoadingObserver(Protocol):
    """Observer port emitting structured events during a filtered loading session.

    ``variant`` is "batch" or "incremental" and names the emitting loader.
    """

    def source_set(self, variant: str, location: str) -> None: ...

    def session_reset(self, variant: str, location: str | None) -> None: ...

    def structure_discovered(
        self, variant: str, input_fields: int, output_fields: int
    ) -> None: ...

    def batch_filtered(self, variant: str, records_in: int, records_out: int) -> None: ...

    def record_filtered(self, variant: str, index: int) -> None: ...

    def end_of_data(self, variant: str, total_records: int) -> None: ...

    def mode_conflict(self, variant: str, requested: str, active: str) -> None: ...

    def filter_failed(self, variant: str, stage: str, reason: str) -> None: ...
