"""SessionCore — session bookkeeping shared by the batch and incremental loaders."""

from pathlib import Path

from filtered_loader.loading.application.errors import (
    FilterFailureError,
    ModeConflictError,
)
from filtered_loader.loading.domain.observer import LoadingObserver
from filtered_loader.loading.domain.session import RetrievalMode, Session
from filtered_loader.schema.domain.record import Dataset
from filtered_loader.source.domain.source import Source, SourceLocation
from filtered_loader.transform.domain.transform import Transform

_STREAM_NAME = "<stream>"


class SessionCore:
    """Owns the Source, drives the Transform, and holds the current Session.

    The loaders compose a SessionCore rather than inheriting from a common
    base; each reads and updates ``session`` through it.
    """

    def __init__(
        self,
        source: Source,
        transform: Transform,
        observer: LoadingObserver,
        variant: str,
    ) -> None:
        self.source = source
        self.transform = transform
        self.session = Session()
        self._observer = observer
        self._variant = variant

    def set_source(self, location: SourceLocation) -> None:
        """Start a new session on *location*. Source errors propagate unchanged."""
        self.session = Session(location=self.session.location)
        self.source.set_source(location)
        self.session.location = location if isinstance(location, Path) else None
        self._observer.source_set(
            variant=self._variant,
            location=str(location) if isinstance(location, Path) else _STREAM_NAME,
        )

    def reset(self) -> None:
        """Return to a fresh session on the last known file location."""
        location = self.session.location
        self.session = Session(location=location)
        self._rewind_source()
        self._observer.session_reset(
            variant=self._variant,
            location=str(location) if location is not None else None,
        )

    def begin(self, mode: RetrievalMode) -> None:
        """Enter *mode*, or raise ModeConflictError if the other mode is active."""
        active = self.session.retrieval_mode
        if active not in ("none", mode):
            self._observer.mode_conflict(
                variant=self._variant, requested=mode, active=active
            )
            raise ModeConflictError(requested=mode, active=active)
        self.session.retrieval_mode = mode

    def read_dataset(self) -> Dataset:
        """Read the full dataset from the Source, invalidating cached structure on failure.

        A repeated read in the same session rewinds the Source first, so every
        call sees the whole location rather than whatever is left of it.
        """
        try:
            if self.session.datasets_read:
                self._rewind_source()
            dataset = self.source.get_dataset()
        except Exception:
            self.session.output_schema = None
            raise
        self.session.datasets_read += 1
        return dataset

    def filter_dataset(self, dataset: Dataset) -> Dataset:
        """Configure the transform for *dataset* and apply it as one batch.

        Raises:
            FilterFailureError: if the transform rejects the schema or any record.
        """
        try:
            self.transform.set_input_format(dataset.header())
            records = self.transform.apply_batch(dataset.records)
            output_schema = self.transform.get_output_format()
        except Exception as exc:  # noqa: BLE001
            self.session.output_schema = None
            self._observer.filter_failed(
                variant=self._variant, stage="batch", reason=str(exc)
            )
            raise FilterFailureError(
                reason="transform rejected the dataset", cause=exc
            ) from exc

        self.session.output_schema = output_schema
        self._observer.batch_filtered(
            variant=self._variant,
            records_in=len(dataset.records),
            records_out=len(records),
        )
        return Dataset(structure=output_schema, records=records)

    def close(self) -> None:
        self.source.close()

    def _rewind_source(self) -> None:
        # Re-applying the path reopens it; reset() then rewinds streams and any
        # state a Source keeps outside its location.
        location = self.session.location
        if location is not None:
            self.source.set_source(location)
        self.source.reset()
