"""Error types raised by the filtered loaders."""

from filtered_loader.core.errors import FilteredLoaderError


class ModeConflictError(FilteredLoaderError):
    """Raised when batch and incremental retrieval are mixed within one session."""

    def __init__(self, requested: str, active: str) -> None:
        self.requested = requested
        self.active = active
        super().__init__(
            f"Failed to start {requested} retrieval: session is already in"
            f" {active} mode; reset() or set a new source first"
        )


class StructureUnavailableError(FilteredLoaderError):
    """Raised when the structure is queried before it can be known."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to get structure: {reason}")


class FilterFailureError(FilteredLoaderError):
    """Raised when the transform rejects the data; the original error is kept on ``cause``."""

    def __init__(self, reason: str, cause: Exception | None = None) -> None:
        self.cause = cause
        detail = f"{reason}: {cause}" if cause is not None else reason
        super().__init__(f"Failed to filter data: {detail}")


class StructureDiscoveryError(FilteredLoaderError):
    """Raised when the transform rejects the source structure during discovery."""

    def __init__(self, reason: str, cause: Exception | None = None) -> None:
        self.cause = cause
        detail = f"{reason}: {cause}" if cause is not None else reason
        super().__init__(f"Failed to discover structure: {detail}")
