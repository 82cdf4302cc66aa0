"""Transform Protocol — structural interface for a schema-aware record filter."""

from typing import Protocol

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema


class Transform(Protocol):
    """Filters records either as a whole batch or one at a time.

    set_input_format() must be called before any records are passed in. It
    returns True when the output format is known from the input format alone,
    and False when the transform has to see data first.

    Incremental use follows input_one -> signal_batch_complete -> output_one.
    A transform is stateful; one instance must not serve concurrent sessions.
    """

    def set_input_format(self, schema: Schema) -> bool: ...

    def get_output_format(self) -> Schema: ...

    def apply_batch(self, records: list[Record]) -> list[Record]: ...

    def input_one(self, record: Record) -> None: ...

    def signal_batch_complete(self) -> None: ...

    def output_one(self) -> Record | None: ...
