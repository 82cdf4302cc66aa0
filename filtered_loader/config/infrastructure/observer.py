"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(
        self, path: str, mode: str, source_kind: str, transform_kind: str
    ) -> None:
        self._log.info(
            "config.loaded",
            path=path,
            mode=mode,
            source_kind=source_kind,
            transform_kind=transform_kind,
        )
