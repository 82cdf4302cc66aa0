"""CompositeLoadingObserver — fans out all loading events to a list of observers."""

from filtered_loader.loading.domain.observer import LoadingObserver


class CompositeLoadingObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from LoadingObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[LoadingObserver]) -> None:
        self._observers = observers

    def source_set(self, variant: str, location: str) -> None:
        for obs in self._observers:
            obs.source_set(variant=variant, location=location)

    def session_reset(self, variant: str, location: str | None) -> None:
        for obs in self._observers:
            obs.session_reset(variant=variant, location=location)

    def structure_discovered(
        self, variant: str, input_fields: int, output_fields: int
    ) -> None:
        for obs in self._observers:
            obs.structure_discovered(
                variant=variant, input_fields=input_fields, output_fields=output_fields
            )

    def batch_filtered(self, variant: str, records_in: int, records_out: int) -> None:
        for obs in self._observers:
            obs.batch_filtered(
                variant=variant, records_in=records_in, records_out=records_out
            )

    def record_filtered(self, variant: str, index: int) -> None:
        for obs in self._observers:
            obs.record_filtered(variant=variant, index=index)

    def end_of_data(self, variant: str, total_records: int) -> None:
        for obs in self._observers:
            obs.end_of_data(variant=variant, total_records=total_records)

    def mode_conflict(self, variant: str, requested: str, active: str) -> None:
        for obs in self._observers:
            obs.mode_conflict(variant=variant, requested=requested, active=active)

    def filter_failed(self, variant: str, stage: str, reason: str) -> None:
        for obs in self._observers:
            obs.filter_failed(variant=variant, stage=stage, reason=reason)
