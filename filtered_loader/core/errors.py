"""Base exception classes shared by every filtered-loader bounded context."""


class FilteredLoaderError(Exception):
    """Base class for all filtered-loader errors."""


class UnsupportedOperationError(FilteredLoaderError):
    """Raised when an operation is structurally impossible for a component.

    Used both by sources that cannot stream records and by the batch loader,
    which never supports record-at-a-time retrieval.
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"Failed to {operation}: {reason}")
