"""DropFieldsTransform — removes named fields from the schema and every record."""

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.transform.infrastructure.base import RecordTransform
from filtered_loader.transform.infrastructure.errors import TransformConfigurationError


class DropFieldsTransform(RecordTransform):
    kind = "drop_fields"

    def __init__(self, fields: list[str]) -> None:
        super().__init__()
        self._dropped = frozenset(fields)
        self._kept: list[str] = []

    def _derive_output_format(self, schema: Schema) -> Schema:
        unknown = sorted(self._dropped - set(schema.names))
        if unknown:
            raise TransformConfigurationError(
                transform=self.kind,
                reason="schema has no field(s) " + ", ".join(f"'{n}'" for n in unknown),
            )
        kept = tuple(spec for spec in schema.fields if spec.name not in self._dropped)
        self._kept = [spec.name for spec in kept]
        return Schema(fields=kept)

    def _transform(self, record: Record) -> Record:
        return Record(values={name: record.values[name] for name in self._kept})
