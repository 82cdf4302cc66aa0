"""BatchFilteredSource — loads everything, then filters it as a single batch."""

from typing import Self

from filtered_loader.core.errors import UnsupportedOperationError
from filtered_loader.loading.application.core import SessionCore
from filtered_loader.loading.application.errors import StructureUnavailableError
from filtered_loader.loading.domain.observer import LoadingObserver
from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.domain.source import Source, SourceLocation
from filtered_loader.transform.domain.transform import Transform


class BatchFilteredSource:
    """Applies a Transform to the complete dataset read from a Source.

    The filtered structure is only known after get_data(): transforms with
    data-dependent output (discretisation, for instance) need every record
    before they can describe their output, so get_structure() never pre-reads.
    Record-at-a-time retrieval is never supported, whatever the wrapped
    Source and Transform could do, because filtered record i is not defined
    before the whole batch has been seen.

    Satisfies the FilteredSource protocol structurally.
    """

    variant = "batch"

    def __init__(
        self, source: Source, transform: Transform, observer: LoadingObserver
    ) -> None:
        self._core = SessionCore(
            source=source, transform=transform, observer=observer, variant=self.variant
        )

    @property
    def file_extension(self) -> str:
        return self._core.source.file_extension

    @property
    def file_extensions(self) -> list[str]:
        return self._core.source.file_extensions

    @property
    def description(self) -> str:
        return self._core.source.description

    def set_source(self, location: SourceLocation) -> None:
        self._core.set_source(location)

    def reset(self) -> None:
        self._core.reset()

    def get_structure(self) -> Schema:
        """Return the filtered structure of the last get_data() call.

        Raises:
            StructureUnavailableError: if no batch has been read in this session.
        """
        output_schema = self._core.session.output_schema
        if output_schema is None:
            raise StructureUnavailableError(
                reason="the filtered structure is only known after get_data()"
            )
        return output_schema

    def get_data(self) -> Dataset:
        """Read the whole dataset from the source and return it filtered.

        Raises:
            ModeConflictError: if the session is already reading incrementally.
            FilterFailureError: if the transform fails.
        """
        self._core.begin("batch")
        dataset = self._core.read_dataset()
        return self._core.filter_dataset(dataset)

    def get_next_record(self) -> Record | None:
        raise UnsupportedOperationError(
            operation="read next record",
            reason="a batch filtered source cannot be read incrementally",
        )

    def close(self) -> None:
        self._core.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
