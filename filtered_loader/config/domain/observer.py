"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(
        self, path: str, mode: str, source_kind: str, transform_kind: str
    ) -> None: ...
