"""Record and Dataset value objects."""

from typing import Any, TypeAlias

from pydantic import BaseModel

from filtered_loader.schema.domain.schema import Schema

FieldValue: TypeAlias = Any


class Record(BaseModel, frozen=True):
    """One data row: field name to value, in schema order."""

    values: dict[str, FieldValue]

    def __getitem__(self, name: str) -> FieldValue:
        return self.values[name]


class Dataset(BaseModel, frozen=True):
    """A Schema together with the records that conform to it."""

    structure: Schema
    records: list[Record]

    def header(self) -> Schema:
        """Return the dataset structure without any records."""
        return self.structure

    def __len__(self) -> int:
        return len(self.records)
