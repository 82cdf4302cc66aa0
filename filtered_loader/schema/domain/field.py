"""FieldSpec value object — one typed column of a Schema."""

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, Field

FieldType: TypeAlias = Literal["numeric", "string", "boolean"]


class FieldSpec(BaseModel, frozen=True):
    """Immutable description of a single field: name, type and free-form metadata."""

    name: str = Field(min_length=1)
    type: FieldType
    metadata: dict[str, Any] = Field(default_factory=dict)
