"""Tests for the source registry — create_source and source_kind_for_path routing."""

from pathlib import Path

import pytest

from filtered_loader.config.domain.source import SourceConfig
from filtered_loader.config.infrastructure.errors import ConfigValidationError
from filtered_loader.core.errors import FilteredLoaderError
from filtered_loader.source.infrastructure.csv_source import CsvSource
from filtered_loader.source.infrastructure.errors import SourceKindNotSupportedError
from filtered_loader.source.infrastructure.jsonl_source import JsonlSource
from filtered_loader.source.infrastructure.registry import (
    create_source,
    source_kind_for_path,
)
from tests.source.fake_observer import FakeSourceObserver


class TestCreateSource:
    def test_jsonl_kind_returns_jsonl_source(self) -> None:
        source = create_source(SourceConfig(kind="jsonl"), FakeSourceObserver())

        assert isinstance(source, JsonlSource)

    def test_csv_kind_returns_csv_source(self) -> None:
        config = SourceConfig(kind="csv", options={"delimiter": ";"})

        assert isinstance(create_source(config, FakeSourceObserver()), CsvSource)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(SourceKindNotSupportedError) as exc_info:
            create_source(SourceConfig(kind="arff"), FakeSourceObserver())

        assert str(exc_info.value).startswith("Failed to ")
        assert "arff" in str(exc_info.value)

    def test_unknown_option_raises_config_validation_error(self) -> None:
        config = SourceConfig(kind="jsonl", options={"delimiter": ","})

        with pytest.raises(ConfigValidationError):
            create_source(config, FakeSourceObserver())

    def test_multi_character_delimiter_rejected(self) -> None:
        config = SourceConfig(kind="csv", options={"delimiter": "::"})

        with pytest.raises(ConfigValidationError):
            create_source(config, FakeSourceObserver())

    def test_source_kind_error_is_filtered_loader_error(self) -> None:
        with pytest.raises(FilteredLoaderError):
            create_source(SourceConfig(kind="parquet"), FakeSourceObserver())


class TestSourceKindForPath:
    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("data.jsonl", "jsonl"),
            ("data.NDJSON", "jsonl"),
            ("data.csv", "csv"),
        ],
    )
    def test_known_extensions(self, name: str, kind: str) -> None:
        assert source_kind_for_path(Path(name)) == kind

    def test_unknown_extension_raises(self) -> None:
        with pytest.raises(SourceKindNotSupportedError):
            source_kind_for_path(Path("data.arff"))
