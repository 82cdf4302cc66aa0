"""Observer port for the source domain — defines events in domain language."""

from typing import Protocol


class SourceObserver(Protocol):
    def source_opened(self, kind: str, location: str) -> None: ...

    def source_record_read(self, kind: str, index: int) -> None: ...

    def source_read_failed(self, kind: str, location: str, reason: str) -> None: ...
