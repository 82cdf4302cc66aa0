"""Tests for the transform registry — create_transform routing."""

import pytest

from filtered_loader.config.domain.transform import TransformConfig
from filtered_loader.config.infrastructure.errors import ConfigValidationError
from filtered_loader.transform.infrastructure.drop_fields import DropFieldsTransform
from filtered_loader.transform.infrastructure.errors import (
    TransformKindNotSupportedError,
)
from filtered_loader.transform.infrastructure.identity import IdentityTransform
from filtered_loader.transform.infrastructure.registry import create_transform
from filtered_loader.transform.infrastructure.scale import ScaleTransform


class TestCreateTransform:
    def test_default_config_is_identity(self) -> None:
        assert isinstance(create_transform(TransformConfig()), IdentityTransform)

    def test_drop_fields_kind(self) -> None:
        config = TransformConfig(kind="drop_fields", options={"fields": ["b"]})

        assert isinstance(create_transform(config), DropFieldsTransform)

    def test_scale_kind(self) -> None:
        config = TransformConfig(kind="scale", options={"field": "a", "factor": 3})

        assert isinstance(create_transform(config), ScaleTransform)

    def test_each_call_returns_a_fresh_instance(self) -> None:
        config = TransformConfig()

        assert create_transform(config) is not create_transform(config)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(TransformKindNotSupportedError) as exc_info:
            create_transform(TransformConfig(kind="discretize"))

        assert "discretize" in str(exc_info.value)

    def test_empty_field_list_rejected(self) -> None:
        config = TransformConfig(kind="drop_fields", options={"fields": []})

        with pytest.raises(ConfigValidationError):
            create_transform(config)

    def test_identity_rejects_options(self) -> None:
        with pytest.raises(ConfigValidationError):
            create_transform(TransformConfig(options={"field": "a"}))

    def test_scale_requires_factor(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            create_transform(TransformConfig(kind="scale", options={"field": "a"}))

        assert "scale" in str(exc_info.value)
