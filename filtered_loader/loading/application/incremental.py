"""IncrementalFilteredSource — streams records one at a time through the transform."""

from collections.abc import Iterator
from typing import Self

from filtered_loader.loading.application.core import SessionCore
from filtered_loader.loading.application.errors import (
    FilterFailureError,
    StructureDiscoveryError,
)
from filtered_loader.loading.domain.observer import LoadingObserver
from filtered_loader.schema.domain.record import Dataset, Record
from filtered_loader.schema.domain.schema import Schema
from filtered_loader.source.domain.source import Source, SourceLocation
from filtered_loader.transform.domain.transform import Transform


class IncrementalFilteredSource:
    """Exposes the filtered structure up front, then filters record by record.

    Each record is pushed into the transform, the batch is declared complete,
    and exactly one output record is pulled back. Only transforms with a
    strict one-to-one record correspondence are valid here: a transform that
    buffers several inputs before emitting (a windowed aggregate, say) yields
    nothing after the flush, and the read fails with FilterFailureError.

    get_data() is still available and drains the source as one batch, but
    the two retrieval modes cannot be mixed within one session.

    Satisfies the FilteredSource protocol structurally.
    """

    variant = "incremental"

    def __init__(
        self, source: Source, transform: Transform, observer: LoadingObserver
    ) -> None:
        self._core = SessionCore(
            source=source, transform=transform, observer=observer, variant=self.variant
        )
        self._observer = observer

    @property
    def file_extension(self) -> str:
        return self._core.source.file_extension

    @property
    def file_extensions(self) -> list[str]:
        return self._core.source.file_extensions

    @property
    def description(self) -> str:
        return self._core.source.description

    def set_source(self, location: SourceLocation) -> None:
        self._core.set_source(location)

    def reset(self) -> None:
        self._core.reset()

    def get_structure(self) -> Schema:
        """Return the filtered structure, discovering it on the first call only.

        Raises:
            StructureDiscoveryError: if the transform rejects the source structure.
        """
        output_schema = self._core.session.output_schema
        if output_schema is not None:
            return output_schema
        return self._discover_structure()

    def get_data(self) -> Dataset:
        """Drain the source in one call and return the filtered dataset.

        Raises:
            ModeConflictError: if records have already been read incrementally.
            FilterFailureError: if the transform fails.
        """
        self._core.begin("batch")
        dataset = self._core.read_dataset()
        self._core.session.base_schema = dataset.header()
        return self._core.filter_dataset(dataset)

    def get_next_record(self) -> Record | None:
        """Return the next filtered record, or None once the source is exhausted.

        Raises:
            ModeConflictError: if get_data() has already been used in this session.
            StructureDiscoveryError: if structure has to be discovered and fails.
            FilterFailureError: if the transform rejects the record or emits nothing.
        """
        self._core.begin("incremental")
        session = self._core.session
        if session.base_schema is None:
            self._discover_structure()
        base_schema = session.base_schema
        assert base_schema is not None

        record = self._core.source.get_next_record(expected=base_schema)
        if record is None:
            self._observer.end_of_data(
                variant=self.variant, total_records=session.records_emitted
            )
            return None

        index = session.records_emitted
        transform = self._core.transform
        try:
            transform.input_one(record)
            transform.signal_batch_complete()
            filtered = transform.output_one()
        except Exception as exc:  # noqa: BLE001
            self._observer.filter_failed(
                variant=self.variant, stage="record", reason=str(exc)
            )
            raise FilterFailureError(
                reason=f"transform rejected record {index}", cause=exc
            ) from exc

        if filtered is None:
            reason = (
                f"transform emitted no output for record {index};"
                " incremental loading needs a one-to-one transform"
            )
            self._observer.filter_failed(
                variant=self.variant, stage="record", reason=reason
            )
            raise FilterFailureError(reason=reason)

        session.records_emitted += 1
        self._observer.record_filtered(variant=self.variant, index=index)
        return filtered

    def __iter__(self) -> Iterator[Record]:
        while (record := self.get_next_record()) is not None:
            yield record

    def close(self) -> None:
        self._core.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _discover_structure(self) -> Schema:
        session = self._core.session
        base_schema = self._core.source.get_structure()
        transform = self._core.transform
        try:
            known = transform.set_input_format(base_schema)
            output_schema = transform.get_output_format() if known else None
        except Exception as exc:  # noqa: BLE001
            self._forget_structure()
            self._observer.filter_failed(
                variant=self.variant, stage="structure", reason=str(exc)
            )
            raise StructureDiscoveryError(
                reason="transform rejected the source structure", cause=exc
            ) from exc

        if output_schema is None:
            reason = "transform cannot determine its output format before seeing data"
            self._forget_structure()
            self._observer.filter_failed(
                variant=self.variant, stage="structure", reason=reason
            )
            raise StructureDiscoveryError(reason=reason)

        session.base_schema = base_schema
        session.output_schema = output_schema
        self._observer.structure_discovered(
            variant=self.variant,
            input_fields=len(base_schema.fields),
            output_fields=len(output_schema.fields),
        )
        return output_schema

    def _forget_structure(self) -> None:
        self._core.session.base_schema = None
        self._core.session.output_schema = None
