"""Transform registry — maps TransformConfig.kind to a configured Transform."""

from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError

from filtered_loader.config.domain.transform import TransformConfig
from filtered_loader.config.infrastructure.errors import ConfigValidationError
from filtered_loader.transform.domain.transform import Transform
from filtered_loader.transform.infrastructure.drop_fields import DropFieldsTransform
from filtered_loader.transform.infrastructure.errors import (
    TransformKindNotSupportedError,
)
from filtered_loader.transform.infrastructure.identity import IdentityTransform
from filtered_loader.transform.infrastructure.scale import ScaleTransform

T = TypeVar("T", bound=BaseModel)


class _NoOptions(BaseModel, frozen=True, extra="forbid"):
    pass


class _DropFieldsOptions(BaseModel, frozen=True, extra="forbid"):
    fields: list[str] = Field(min_length=1)


class _ScaleOptions(BaseModel, frozen=True, extra="forbid"):
    field: str = Field(min_length=1)
    factor: float


def create_transform(config: TransformConfig) -> Transform:
    """Return a freshly constructed Transform for the given TransformConfig.

    Raises:
        TransformKindNotSupportedError: if config.kind is not a known transform kind.
        ConfigValidationError: if config.options do not suit the transform kind.
    """
    if config.kind == IdentityTransform.kind:
        _validate_options(_NoOptions, config)
        return IdentityTransform()
    if config.kind == DropFieldsTransform.kind:
        drop = _validate_options(_DropFieldsOptions, config)
        return DropFieldsTransform(fields=drop.fields)
    if config.kind == ScaleTransform.kind:
        scale = _validate_options(_ScaleOptions, config)
        return ScaleTransform(field=scale.field, factor=scale.factor)

    raise TransformKindNotSupportedError(kind=config.kind)


def _validate_options(model: type[T], config: TransformConfig) -> T:
    try:
        return model.model_validate(config.options)
    except ValidationError as exc:
        raise ConfigValidationError(
            f"invalid options for transform kind '{config.kind}': {exc}"
        ) from exc
