"""Session — the mutable state of one source-to-caller loading run."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

from filtered_loader.schema.domain.schema import Schema

RetrievalMode: TypeAlias = Literal["none", "batch", "incremental"]


@dataclass
class Session:
    """State owned exclusively by one SessionCore.

    retrieval_mode only ever moves away from "none"; returning to "none"
    means replacing the whole Session. output_schema is set once the
    transform has been configured; base_schema is the unfiltered source
    schema the incremental loader reads records against. datasets_read counts
    completed full reads, so a repeated read knows to rewind the source.
    """

    location: Path | None = None
    retrieval_mode: RetrievalMode = "none"
    output_schema: Schema | None = None
    base_schema: Schema | None = None
    records_emitted: int = 0
    datasets_read: int = 0
