"""ScaleTransform — multiplies one numeric field by a constant factor."""

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.transform.infrastructure.base import RecordTransform
from filtered_loader.transform.infrastructure.errors import (
    TransformConfigurationError,
    TransformProcessingError,
)


class ScaleTransform(RecordTransform):
    """Scales *field* by *factor*; missing values (None) stay missing.

    Integer values scaled by a whole-number factor stay integers.
    """

    kind = "scale"

    def __init__(self, field: str, factor: float) -> None:
        super().__init__()
        self._field = field
        self._factor = factor

    def _derive_output_format(self, schema: Schema) -> Schema:
        spec = schema.field(self._field)
        if spec is None:
            raise TransformConfigurationError(
                transform=self.kind, reason=f"schema has no field '{self._field}'"
            )
        if spec.type != "numeric":
            raise TransformConfigurationError(
                transform=self.kind,
                reason=f"field '{self._field}' is {spec.type}, expected numeric",
            )
        return schema

    def _transform(self, record: Record) -> Record:
        value = record.values.get(self._field)
        if value is None:
            return record
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TransformProcessingError(
                transform=self.kind,
                reason=f"field '{self._field}' holds non-numeric value {value!r}",
            )
        scaled = value * self._factor
        if isinstance(value, int) and float(self._factor).is_integer():
            scaled = int(scaled)
        return Record(values={**record.values, self._field: scaled})
