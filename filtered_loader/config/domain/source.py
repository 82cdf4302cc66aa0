"""Source configuration model."""

from typing import Any

from pydantic import BaseModel, Field


class SourceConfig(BaseModel, frozen=True):
    kind: str = Field(min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)
