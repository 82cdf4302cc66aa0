"""CSV source — header row names the fields, the first data row decides their types."""

import csv
from typing import Any, TextIO

from filtered_loader.schema.domain.record import FieldValue, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.infrastructure.text_source import (
    TextFileSource,
    infer_field_type,
)

_BOOLEANS = {"true": True, "false": False}


class CsvSource(TextFileSource):
    """Reads comma-separated data with a header row.

    Empty cells load as None. Numeric cells load as int where possible and
    float otherwise; "true"/"false" (any case) load as booleans.
    """

    kind = "csv"
    extensions = (".csv",)
    summary = "CSV data files"

    def __init__(self, *args: Any, delimiter: str = ",", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._delimiter = delimiter
        self._reader: Any = None
        self._row_no = 0

    def _clear_session(self) -> None:
        super()._clear_session()
        self._reader = None
        self._row_no = 0

    def _read_header(self, stream: TextIO) -> tuple[Schema, list[Record]]:
        self._reader = csv.reader(stream, delimiter=self._delimiter)
        header = self._next_row()
        if header is None:
            return Schema(fields=()), []
        first = self._next_row()
        if first is None:
            return self._build_structure((name, "string") for name in header), []
        self._check_width(row=first, width=len(header))
        parsed = [_parse_cell(cell) for cell in first]
        structure = self._build_structure(
            (name, infer_field_type(value))
            for name, value in zip(header, parsed, strict=True)
        )
        return structure, [self._to_record(row=first, expected=structure)]

    def _read_record(self, stream: TextIO, expected: Schema) -> Record | None:
        # The reader wrapping *stream* was created by _read_header.
        row = self._next_row()
        if row is None:
            return None
        return self._to_record(row=row, expected=expected)

    def _next_row(self) -> list[str] | None:
        try:
            for row in self._reader:
                self._row_no += 1
                if row:
                    return row
        except csv.Error as exc:
            raise self._fail(reason=f"row {self._row_no}: {exc}") from exc
        return None

    def _check_width(self, row: list[str], width: int) -> None:
        if len(row) != width:
            raise self._fail(
                reason=f"row {self._row_no}: expected {width} cells, got {len(row)}"
            )

    def _to_record(self, row: list[str], expected: Schema) -> Record:
        self._check_width(row=row, width=len(expected.fields))
        values: dict[str, FieldValue] = {}
        for spec, cell in zip(expected.fields, row, strict=True):
            try:
                values[spec.name] = _convert_cell(cell=cell, field_type=spec.type)
            except ValueError as exc:
                raise self._fail(
                    reason=f"row {self._row_no}: field '{spec.name}': {exc}"
                ) from exc
        return Record(values=values)


def _parse_cell(cell: str) -> FieldValue:
    """Best-effort parse used for type inference on the first data row."""
    if cell == "":
        return None
    lowered = cell.strip().lower()
    if lowered in _BOOLEANS:
        return _BOOLEANS[lowered]
    try:
        return _to_number(cell)
    except ValueError:
        return cell


def _convert_cell(cell: str, field_type: str) -> FieldValue:
    if cell == "":
        return None
    if field_type == "numeric":
        return _to_number(cell)
    if field_type == "boolean":
        lowered = cell.strip().lower()
        if lowered not in _BOOLEANS:
            raise ValueError(f"not a boolean: {cell!r}")
        return _BOOLEANS[lowered]
    return cell


def _to_number(cell: str) -> int | float:
    try:
        return int(cell)
    except ValueError:
        pass
    try:
        return float(cell)
    except ValueError:
        raise ValueError(f"not a number: {cell!r}") from None
