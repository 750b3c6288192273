"""
Shared Errors

Domain and infrastructure error types.
"""

from .domain import (
    CorruptedVersionError,
    DomainError,
    ErrorKind,
    InvalidFileError,
    InvalidProjectError,
    InvalidVersionError,
    StoreError,
    UnauthorizedError,
    UnprovidedAuthorizationError,
    VersionAlreadyExistsError,
)
from .infrastructure import InfrastructureError, StorageError

__all__ = [
    "ErrorKind",
    "DomainError",
    "StoreError",
    "InvalidProjectError",
    "InvalidVersionError",
    "InvalidFileError",
    "CorruptedVersionError",
    "UnprovidedAuthorizationError",
    "UnauthorizedError",
    "VersionAlreadyExistsError",
    "InfrastructureError",
    "StorageError",
]
