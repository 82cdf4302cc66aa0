"""Error types raised by source infrastructure."""

from filtered_loader.core.errors import FilteredLoaderError


class SourceReadError(FilteredLoaderError):
    """Raised when a source location cannot be opened, read, or parsed."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        super().__init__(f"Failed to read source '{location}': {reason}")


class SourceKindNotSupportedError(FilteredLoaderError):
    """Raised when the source kind requested in config is not a known kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Failed to create source: unsupported source kind '{kind}'")
