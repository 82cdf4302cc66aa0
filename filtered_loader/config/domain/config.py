"""Top-level LoaderConfig aggregate — the root configuration object."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, Field

from filtered_loader.config.domain.source import SourceConfig
from filtered_loader.config.domain.transform import TransformConfig

LoaderMode: TypeAlias = Literal["batch", "incremental"]


class LoaderConfig(BaseModel, frozen=True):
    """Selects and configures the source, the transform, and the retrieval mode."""

    mode: LoaderMode = "batch"
    source: SourceConfig
    transform: TransformConfig = Field(default_factory=TransformConfig)
