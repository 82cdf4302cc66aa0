"""IdentityTransform — passes every record through unchanged."""

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.transform.infrastructure.base import RecordTransform


class IdentityTransform(RecordTransform):
    """The default transform: output schema and records equal the input."""

    kind = "identity"

    def _derive_output_format(self, schema: Schema) -> Schema:
        return schema

    def _transform(self, record: Record) -> Record:
        return record
