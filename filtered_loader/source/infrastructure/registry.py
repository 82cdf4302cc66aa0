"""Source registry — maps SourceConfig.kind (or a file extension) to a Source."""

from pathlib import Path

from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError

from filtered_loader.config.domain.source import SourceConfig
from filtered_loader.config.infrastructure.errors import ConfigValidationError
from filtered_loader.source.domain.observer import SourceObserver
from filtered_loader.source.domain.source import Source
from filtered_loader.source.infrastructure.csv_source import CsvSource
from filtered_loader.source.infrastructure.errors import SourceKindNotSupportedError
from filtered_loader.source.infrastructure.jsonl_source import JsonlSource

T = TypeVar("T", bound=BaseModel)


class _NoOptions(BaseModel, frozen=True, extra="forbid"):
    pass


class _CsvOptions(BaseModel, frozen=True, extra="forbid"):
    delimiter: str = Field(default=",", min_length=1, max_length=1)


def create_source(config: SourceConfig, observer: SourceObserver) -> Source:
    """Return a Source for the given SourceConfig.

    Raises:
        SourceKindNotSupportedError: if config.kind is not a known source kind.
        ConfigValidationError: if config.options do not suit the source kind.
    """
    if config.kind == JsonlSource.kind:
        _validate_options(_NoOptions, config)
        return JsonlSource(observer=observer)
    if config.kind == CsvSource.kind:
        options = _validate_options(_CsvOptions, config)
        return CsvSource(observer=observer, delimiter=options.delimiter)

    raise SourceKindNotSupportedError(kind=config.kind)


def source_kind_for_path(path: Path) -> str:
    """Pick the source kind whose extensions include path's suffix.

    Raises:
        SourceKindNotSupportedError: if no source handles the suffix.
    """
    suffix = path.suffix.lower()
    for source_cls in (JsonlSource, CsvSource):
        if suffix in source_cls.extensions:
            return source_cls.kind
    raise SourceKindNotSupportedError(kind=suffix or str(path))


def _validate_options(model: type[T], config: SourceConfig) -> T:
    try:
        return model.model_validate(config.options)
    except ValidationError as exc:
        raise ConfigValidationError(
            f"invalid options for source kind '{config.kind}': {exc}"
        ) from exc
