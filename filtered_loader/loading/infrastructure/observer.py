"""Structlog implementation of the LoadingObserver port."""

import structlog


class StructlogLoadingObserver:
    """Delegates loading domain events to structlog.

    Satisfies the LoadingObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def source_set(self, variant: str, location: str) -> None:
        self._log.info("loading.source_set", variant=variant, location=location)

    def session_reset(self, variant: str, location: str | None) -> None:
        self._log.info("loading.session_reset", variant=variant, location=location)

    def structure_discovered(
        self, variant: str, input_fields: int, output_fields: int
    ) -> None:
        self._log.info(
            "loading.structure_discovered",
            variant=variant,
            input_fields=input_fields,
            output_fields=output_fields,
        )

    def batch_filtered(self, variant: str, records_in: int, records_out: int) -> None:
        self._log.info(
            "loading.batch_filtered",
            variant=variant,
            records_in=records_in,
            records_out=records_out,
        )

    def record_filtered(self, variant: str, index: int) -> None:
        self._log.debug("loading.record_filtered", variant=variant, index=index)

    def end_of_data(self, variant: str, total_records: int) -> None:
        self._log.info(
            "loading.end_of_data", variant=variant, total_records=total_records
        )

    def mode_conflict(self, variant: str, requested: str, active: str) -> None:
        self._log.warning(
            "loading.mode_conflict",
            variant=variant,
            requested=requested,
            active=active,
        )

    def filter_failed(self, variant: str, stage: str, reason: str) -> None:
        self._log.error(
            "loading.filter_failed", variant=variant, stage=stage, reason=reason
        )
