"""FakeSource — in-memory Source implementation for use in tests."""

from filtered_loader.core.errors import UnsupportedOperationError
from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.domain.source import SourceLocation


class FakeSource:
    """Satisfies the Source protocol. Serves canned records and counts calls.

    If *streaming* is False, get_next_record raises UnsupportedOperationError.
    Any of the *_error arguments is raised by the matching operation.
    """

    def __init__(
        self,
        structure: Schema,
        records: list[Record],
        streaming: bool = True,
        set_source_error: Exception | None = None,
        structure_error: Exception | None = None,
        dataset_error: Exception | None = None,
    ) -> None:
        self._structure = structure
        self._records = list(records)
        self._streaming = streaming
        self._set_source_error = set_source_error
        self._structure_error = structure_error
        self._dataset_error = dataset_error
        self._cursor = 0
        self.locations: list[SourceLocation] = []
        self.structure_calls = 0
        self.dataset_calls = 0
        self.next_record_schemas: list[Schema] = []
        self.reset_calls = 0
        self.closed = False

    @property
    def file_extension(self) -> str:
        return ".fake"

    @property
    def file_extensions(self) -> list[str]:
        return [".fake", ".fk"]

    @property
    def description(self) -> str:
        return "Fake records"

    def set_source(self, location: SourceLocation) -> None:
        if self._set_source_error is not None:
            raise self._set_source_error
        self.locations.append(location)
        self._cursor = 0

    def get_structure(self) -> Schema:
        self.structure_calls += 1
        if self._structure_error is not None:
            raise self._structure_error
        return self._structure

    def get_dataset(self) -> Dataset:
        self.dataset_calls += 1
        if self._dataset_error is not None:
            raise self._dataset_error
        remaining = self._records[self._cursor :]
        self._cursor = len(self._records)
        return Dataset(structure=self._structure, records=remaining)

    def get_next_record(self, expected: Schema) -> Record | None:
        if not self._streaming:
            raise UnsupportedOperationError(
                operation="read next record", reason="fake source is batch-only"
            )
        self.next_record_schemas.append(expected)
        if self._cursor >= len(self._records):
            return None
        record = self._records[self._cursor]
        self._cursor += 1
        return record

    def reset(self) -> None:
        self.reset_calls += 1
        self._cursor = 0

    def close(self) -> None:
        self.closed = True
