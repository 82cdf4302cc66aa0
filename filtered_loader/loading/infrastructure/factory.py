"""create_filtered_source — builds a ready-to-use FilteredSource from a LoaderConfig."""

from filtered_loader.config.domain.config import LoaderConfig
from filtered_loader.loading.application.batch import BatchFilteredSource
from filtered_loader.loading.application.incremental import IncrementalFilteredSource
from filtered_loader.loading.domain.filtered_source import FilteredSource
from filtered_loader.loading.domain.observer import LoadingObserver
from filtered_loader.source.domain.observer import SourceObserver
from filtered_loader.source.infrastructure.registry import create_source
from filtered_loader.transform.infrastructure.registry import create_transform


def create_filtered_source(
    config: LoaderConfig,
    observer: LoadingObserver,
    source_observer: SourceObserver,
) -> FilteredSource:
    """Return the batch or incremental loader selected by config.mode.

    Raises:
        SourceKindNotSupportedError: if config.source.kind is unknown.
        TransformKindNotSupportedError: if config.transform.kind is unknown.
        ConfigValidationError: if either component's options are invalid.
    """
    source = create_source(config=config.source, observer=source_observer)
    transform = create_transform(config=config.transform)
    if config.mode == "incremental":
        return IncrementalFilteredSource(
            source=source, transform=transform, observer=observer
        )
    return BatchFilteredSource(source=source, transform=transform, observer=observer)
