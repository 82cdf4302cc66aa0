"""Rich table rendering of a Schema."""

import json

from rich.table import Table

from filtered_loader.schema.domain.schema import Schema


def build_schema_table(schema: Schema, title: str) -> Table:
    """Return a table with one row per field: position, name, type, metadata."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("name", style="cyan")
    table.add_column("type", style="green")
    table.add_column("metadata")
    for position, spec in enumerate(schema.fields):
        metadata = json.dumps(spec.metadata, default=str) if spec.metadata else ""
        table.add_row(str(position), spec.name, spec.type, metadata)
    return table
