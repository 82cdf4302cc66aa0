"""Source Protocol — structural interface for a generic record source."""

from pathlib import Path
from typing import Protocol, TextIO, TypeAlias

from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema

SourceLocation: TypeAlias = Path | TextIO


class Source(Protocol):
    """Provides raw, unfiltered records and their schema.

    A source is pointed at a location with set_source() and then read either
    in full (get_dataset) or one record at a time (get_next_record). Sources
    that cannot stream raise UnsupportedOperationError from get_next_record.
    """

    @property
    def file_extension(self) -> str: ...

    @property
    def file_extensions(self) -> list[str]: ...

    @property
    def description(self) -> str: ...

    def set_source(self, location: SourceLocation) -> None: ...

    def get_structure(self) -> Schema: ...

    def get_dataset(self) -> Dataset: ...

    def get_next_record(self, expected: Schema) -> Record | None: ...

    def reset(self) -> None: ...

    def close(self) -> None: ...
