"""
Infrastructure Errors

Errors raised while talking to the filesystem.
"""
from typing import Optional

from artifact_store.shared.errors.domain import ErrorKind


class InfrastructureError(Exception):
    """Base class for infrastructure errors."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class StorageError(InfrastructureError):
    """Filesystem operation failed."""

    kind: ErrorKind = ErrorKind.IO

    @classmethod
    def from_os_error(cls, error: OSError) -> "StorageError":
        """Wrap an OSError, keeping the OS description as the message."""
        message = error.strerror or str(error)
        if error.filename is not None:
            message = f"{message}: {error.filename}"
        return cls(message, original_error=error)

    @property
    def is_not_found(self) -> bool:
        """Whether the wrapped error is a missing path."""
        return isinstance(self.original_error, FileNotFoundError)
