"""Schema value object — the ordered, typed structure of a record."""

from pydantic import BaseModel, model_validator

from filtered_loader.schema.domain.field import FieldSpec


class Schema(BaseModel, frozen=True):
    """Ordered collection of FieldSpecs.

    A Schema never carries records, so any Schema handed out by a loader is
    already the "zero-record copy" of a dataset header and is safe to share.
    """

    fields: tuple[FieldSpec, ...]

    @model_validator(mode="after")
    def _names_are_unique(self) -> "Schema":
        seen: set[str] = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ValueError(f"duplicate field name '{spec.name}'")
            seen.add(spec.name)
        return self

    @property
    def names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def field(self, name: str) -> FieldSpec | None:
        """Return the FieldSpec called *name*, or None if the schema lacks it."""
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None
