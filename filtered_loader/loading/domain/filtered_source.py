"""FilteredSource Protocol — a Source whose records pass through a Transform."""

from typing import Protocol, Self

from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.domain.source import SourceLocation


class FilteredSource(Protocol):
    """Common interface of the batch and incremental filtered loaders."""

    @property
    def file_extension(self) -> str: ...

    @property
    def file_extensions(self) -> list[str]: ...

    @property
    def description(self) -> str: ...

    def set_source(self, location: SourceLocation) -> None: ...

    def reset(self) -> None: ...

    def get_structure(self) -> Schema: ...

    def get_data(self) -> Dataset: ...

    def get_next_record(self) -> Record | None: ...

    def close(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(self, *exc_info: object) -> None: ...
