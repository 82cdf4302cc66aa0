"""TextFileSource — shared plumbing for line-oriented text sources.

Handles the location lifecycle (path or already-open text stream), header
discovery, and the single look-ahead buffer that lets structure discovery
peek at data rows without losing them for later retrieval.
"""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from filtered_loader.schema.domain.field import FieldSpec, FieldType
from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.domain.observer import SourceObserver
from filtered_loader.source.domain.source import SourceLocation
from filtered_loader.source.infrastructure.errors import SourceReadError

_STREAM_NAME = "<stream>"
_UNSET_NAME = "<unset>"


class TextFileSource(ABC):
    """Base class for sources that read records from a UTF-8 text file or stream.

    Subclasses implement _read_header() and _read_record(); everything else
    (opening, rewinding, closing, buffering) lives here.
    """

    kind: str = ""
    extensions: tuple[str, ...] = ()
    summary: str = ""

    def __init__(self, observer: SourceObserver) -> None:
        self._observer = observer
        self._path: Path | None = None
        self._stream: TextIO | None = None
        self._owns_stream = False
        self._structure: Schema | None = None
        self._pending: deque[Record] = deque()
        self._records_read = 0
        # True while a file this source opened has not been read from yet.
        self._untouched = False

    @property
    def file_extension(self) -> str:
        return self.extensions[0]

    @property
    def file_extensions(self) -> list[str]:
        return list(self.extensions)

    @property
    def description(self) -> str:
        return self.summary

    def set_source(self, location: SourceLocation) -> None:
        """Point the source at a file path or an open text stream.

        Raises:
            SourceReadError: if a path cannot be opened.
        """
        self.close()
        self._clear_session()
        if isinstance(location, Path):
            self._path = location
            self._stream = self._open(path=location)
            self._owns_stream = True
            self._untouched = True
        else:
            self._path = None
            self._stream = location
            self._owns_stream = False
        self._observer.source_opened(kind=self.kind, location=self._location_name())

    def get_structure(self) -> Schema:
        """Return the source schema, reading the header on first call only."""
        return self._ensure_header()

    def get_dataset(self) -> Dataset:
        """Read every remaining record and return them with the source schema."""
        structure = self._ensure_header()
        records: list[Record] = []
        while (record := self.get_next_record(expected=structure)) is not None:
            records.append(record)
        return Dataset(structure=structure, records=records)

    def get_next_record(self, expected: Schema) -> Record | None:
        """Return the next record conforming to *expected*, or None at end of data."""
        self._ensure_header()
        if self._pending:
            record = self._pending.popleft()
        else:
            stream = self._require_stream()
            self._untouched = False
            try:
                record = self._read_record(stream=stream, expected=expected)
            except UnicodeDecodeError as exc:
                raise self._fail(reason=f"not valid UTF-8: {exc}") from exc
        if record is None:
            return None
        self._observer.source_record_read(kind=self.kind, index=self._records_read)
        self._records_read += 1
        return record

    def reset(self) -> None:
        """Rewind to the start of the current location.

        Raises:
            SourceReadError: if the location is a stream that cannot seek.
        """
        self._clear_session()
        if self._path is not None:
            if self._untouched:
                return
            self.close()
            self._stream = self._open(path=self._path)
            self._owns_stream = True
            self._untouched = True
            return
        if self._stream is None:
            return
        if not self._stream.seekable():
            raise self._fail(reason="stream cannot be rewound")
        self._stream.seek(0)

    def close(self) -> None:
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None
        self._owns_stream = False
        self._untouched = False

    def __enter__(self) -> "TextFileSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @abstractmethod
    def _read_header(self, stream: TextIO) -> tuple[Schema, list[Record]]:
        """Read the schema, returning it with any data records consumed while doing so."""

    @abstractmethod
    def _read_record(self, stream: TextIO, expected: Schema) -> Record | None:
        """Read one record from *stream*, or return None at end of data."""

    def _ensure_header(self) -> Schema:
        if self._structure is None:
            stream = self._require_stream()
            self._untouched = False
            try:
                structure, peeked = self._read_header(stream=stream)
            except UnicodeDecodeError as exc:
                raise self._fail(reason=f"not valid UTF-8: {exc}") from exc
            self._structure = structure
            self._pending.extend(peeked)
        return self._structure

    def _build_structure(self, fields: Iterable[tuple[str, FieldType]]) -> Schema:
        """Build the source Schema from (name, type) pairs read off the header.

        Raises:
            SourceReadError: if names are empty or repeated.
        """
        try:
            return Schema(
                fields=tuple(
                    FieldSpec(name=name, type=field_type) for name, field_type in fields
                )
            )
        except ValidationError as exc:
            problems = "; ".join(error["msg"] for error in exc.errors())
            raise self._fail(reason=f"invalid header: {problems}") from exc

    def _require_stream(self) -> TextIO:
        if self._stream is None:
            raise self._fail(reason="no source location has been set")
        return self._stream

    def _open(self, path: Path) -> TextIO:
        try:
            return open(path, encoding="utf-8", newline="")
        except OSError as exc:
            raise self._fail(reason=str(exc), location=str(path)) from exc

    def _fail(self, reason: str, location: str | None = None) -> SourceReadError:
        """Report a read failure to the observer and return the error to raise."""
        name = location if location is not None else self._location_name()
        self._observer.source_read_failed(kind=self.kind, location=name, reason=reason)
        return SourceReadError(location=name, reason=reason)

    def _clear_session(self) -> None:
        self._structure = None
        self._pending.clear()
        self._records_read = 0

    def _location_name(self) -> str:
        if self._path is not None:
            return str(self._path)
        if self._stream is not None:
            return _STREAM_NAME
        return _UNSET_NAME


def infer_field_type(value: object) -> FieldType:
    """Map a parsed Python value onto a schema field type."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "numeric"
    return "string"
