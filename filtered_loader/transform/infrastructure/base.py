"""RecordTransform — base class for transforms that map each record to exactly one record."""

from abc import ABC, abstractmethod
from collections import deque

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.transform.infrastructure.errors import (
    TransformConfigurationError,
    TransformProcessingError,
)


class RecordTransform(ABC):
    """Implements the Transform protocol for strict one-in, one-out transforms.

    Subclasses provide _derive_output_format() and _transform(). Records fed
    through input_one() are converted immediately and queued, so
    signal_batch_complete() has nothing to flush and output_one() always has
    a record for every record put in.
    """

    kind: str = ""

    def __init__(self) -> None:
        self._input_format: Schema | None = None
        self._output_format: Schema | None = None
        self._queue: deque[Record] = deque()

    def set_input_format(self, schema: Schema) -> bool:
        """Configure for *schema*, discarding any queued output.

        Raises:
            TransformConfigurationError: if *schema* is not compatible.
        """
        self._input_format = None
        self._output_format = None
        self._queue.clear()
        self._output_format = self._derive_output_format(schema)
        self._input_format = schema
        return True

    def get_output_format(self) -> Schema:
        if self._output_format is None:
            raise TransformConfigurationError(
                transform=self.kind, reason="no input format has been set"
            )
        return self._output_format

    def apply_batch(self, records: list[Record]) -> list[Record]:
        self._require_input_format()
        return [self._transform(record) for record in records]

    def input_one(self, record: Record) -> None:
        self._require_input_format()
        self._queue.append(self._transform(record))

    def signal_batch_complete(self) -> None:
        self._require_input_format()

    def output_one(self) -> Record | None:
        if not self._queue:
            return None
        return self._queue.popleft()

    @abstractmethod
    def _derive_output_format(self, schema: Schema) -> Schema:
        """Return the output schema for *schema*, or raise TransformConfigurationError."""

    @abstractmethod
    def _transform(self, record: Record) -> Record:
        """Convert one record, or raise TransformProcessingError."""

    def _require_input_format(self) -> Schema:
        if self._input_format is None:
            raise TransformProcessingError(
                transform=self.kind, reason="no input format has been set"
            )
        return self._input_format

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind='{self.kind}')"
