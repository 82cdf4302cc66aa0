"""JSONL source — one JSON object per line, structure taken from the first object."""

import json
from typing import Any, TextIO

from filtered_loader.schema.domain.record import Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.infrastructure.text_source import (
    TextFileSource,
    infer_field_type,
)


class JsonlSource(TextFileSource):
    """Reads JSON Lines data. Supports both full and record-at-a-time retrieval.

    Blank lines are skipped. Every object must carry exactly the keys of the
    first object; values of the first object decide the field types.
    """

    kind = "jsonl"
    extensions = (".jsonl", ".ndjson")
    summary = "JSON Lines data files"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._line_no = 0

    def _clear_session(self) -> None:
        super()._clear_session()
        self._line_no = 0

    def _read_header(self, stream: TextIO) -> tuple[Schema, list[Record]]:
        first = self._next_object(stream=stream)
        if first is None:
            return Schema(fields=()), []
        structure = self._build_structure(
            (name, infer_field_type(value)) for name, value in first.items()
        )
        return structure, [self._conform(data=first, expected=structure)]

    def _read_record(self, stream: TextIO, expected: Schema) -> Record | None:
        data = self._next_object(stream=stream)
        if data is None:
            return None
        return self._conform(data=data, expected=expected)

    def _next_object(self, stream: TextIO) -> dict[str, Any] | None:
        for line in stream:
            self._line_no += 1
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as exc:
                raise self._fail(
                    reason=f"line {self._line_no}: invalid JSON: {exc}"
                ) from exc
            if not isinstance(data, dict):
                raise self._fail(reason=f"line {self._line_no}: expected a JSON object")
            return data
        return None

    def _conform(self, data: dict[str, Any], expected: Schema) -> Record:
        names = expected.names
        missing = [name for name in names if name not in data]
        extra = [key for key in data if key not in names]
        if missing or extra:
            problems: list[str] = []
            if missing:
                problems.append("missing key(s) " + ", ".join(f"'{k}'" for k in missing))
            if extra:
                problems.append("unexpected key(s) " + ", ".join(f"'{k}'" for k in extra))
            raise self._fail(reason=f"line {self._line_no}: " + "; ".join(problems))
        return Record(values={name: data[name] for name in names})
