"""
Artifact Store

Filesystem-backed storage of project versions, gated by per-project
bearer-token allow-lists.
"""

__version__ = "0.1.0"

from .application.services.store_service import Store
from .domain.capabilities import ProjectReader, ProjectWriter
from .domain.value_objects import Credential, FileName, ProjectName, VersionName
from .shared.errors import (
    CorruptedVersionError,
    ErrorKind,
    InvalidFileError,
    InvalidProjectError,
    InvalidVersionError,
    StorageError,
    StoreError,
    UnauthorizedError,
    UnprovidedAuthorizationError,
    VersionAlreadyExistsError,
)

__all__ = [
    "Store",
    "ProjectReader",
    "ProjectWriter",
    "Credential",
    "FileName",
    "ProjectName",
    "VersionName",
    "ErrorKind",
    "StoreError",
    "StorageError",
    "InvalidProjectError",
    "InvalidVersionError",
    "InvalidFileError",
    "CorruptedVersionError",
    "UnprovidedAuthorizationError",
    "UnauthorizedError",
    "VersionAlreadyExistsError",
]
