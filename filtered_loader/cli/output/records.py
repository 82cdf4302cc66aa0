"""JSON Lines rendering of filtered records."""

import json

from filtered_loader.schema.domain.record import Record


def record_to_json_line(record: Record) -> str:
    """Serialise one record as a single compact JSON object, keys in schema order."""
    return json.dumps(record.values, ensure_ascii=False, default=str)
