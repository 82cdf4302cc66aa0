"""Transform configuration model."""

from typing import Any

from pydantic import BaseModel, Field


class TransformConfig(BaseModel, frozen=True):
    kind: str = Field(default="identity", min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)
