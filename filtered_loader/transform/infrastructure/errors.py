"""Error types raised by transform infrastructure."""

from filtered_loader.core.errors import FilteredLoaderError


class TransformError(FilteredLoaderError):
    """Common base for errors a transform raises while configuring or processing."""


class TransformConfigurationError(TransformError):
    """Raised when a transform cannot accept the given input schema."""

    def __init__(self, transform: str, reason: str) -> None:
        self.transform = transform
        super().__init__(f"Failed to configure transform '{transform}': {reason}")


class TransformProcessingError(TransformError):
    """Raised when a transform cannot process a record."""

    def __init__(self, transform: str, reason: str) -> None:
        self.transform = transform
        super().__init__(f"Failed to apply transform '{transform}': {reason}")


class TransformKindNotSupportedError(FilteredLoaderError):
    """Raised when the transform kind requested in config is not a known kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Failed to create transform: unsupported transform kind '{kind}'"
        )
