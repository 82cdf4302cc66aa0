"""Structlog implementation of the SourceObserver port."""

import structlog


class StructlogSourceObserver:
    """Delegates source domain events to structlog.

    Satisfies the SourceObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def source_opened(self, kind: str, location: str) -> None:
        self._log.info("source.opened", kind=kind, location=location)

    def source_record_read(self, kind: str, index: int) -> None:
        self._log.debug("source.record_read", kind=kind, index=index)

    def source_read_failed(self, kind: str, location: str, reason: str) -> None:
        self._log.error(
            "source.read_failed", kind=kind, location=location, reason=reason
        )
