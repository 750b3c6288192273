"""
Domain Errors

Error types raised by the store core. Every failure carries a description
naming the invariant that was violated, plus an ErrorKind the transport layer
uses to pick a response.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Failure kinds surfaced to the transport layer."""

    INVALID_PROJECT = "invalid_project"
    INVALID_VERSION = "invalid_version"
    INVALID_FILE = "invalid_file"
    CORRUPTED_VERSION = "corrupted_version"
    UNPROVIDED_AUTHORIZATION = "unprovided_authorization"
    UNAUTHORIZED = "unauthorized"
    VERSION_ALREADY_EXISTS = "version_already_exists"
    IO = "io"
    OTHER = "other"


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreError(DomainError):
    """
    Store failure.

    Raised directly for the catch-all kind: bad header encoding, unknown
    authentication method, missing version parameter, nothing uploaded.
    """

    kind: ErrorKind = ErrorKind.OTHER


class InvalidProjectError(StoreError):
    """Project name failed validation."""

    kind = ErrorKind.INVALID_PROJECT

    def __init__(self, name: str = ""):
        super().__init__("invalid project name", {"project": name})


class InvalidVersionError(StoreError):
    """Version name failed validation."""

    kind = ErrorKind.INVALID_VERSION

    def __init__(self, name: str = ""):
        super().__init__("invalid version name", {"version": name})


class InvalidFileError(StoreError):
    """Requested or uploaded file name is not acceptable for the version."""

    kind = ErrorKind.INVALID_FILE

    def __init__(self, message: str = "invalid file for version", file_name: str = ""):
        super().__init__(message, {"file": file_name})


class CorruptedVersionError(StoreError):
    """Version directory holds zero or more than one file."""

    kind = ErrorKind.CORRUPTED_VERSION

    def __init__(self, version: str = "", entries: int = 0):
        super().__init__(
            "corrupted storage for version",
            {"version": version, "entries": entries},
        )


class UnprovidedAuthorizationError(StoreError):
    """No authorization header was supplied."""

    kind = ErrorKind.UNPROVIDED_AUTHORIZATION

    def __init__(self):
        super().__init__("did not provide authorization")


class UnauthorizedError(StoreError):
    """Token is not present on the project's allow-list for the role."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, role: str, project: str = ""):
        self.role = role
        super().__init__(f"unauthorized {role}", {"project": project, "role": role})


class VersionAlreadyExistsError(StoreError):
    """Version directory is already populated."""

    kind = ErrorKind.VERSION_ALREADY_EXISTS

    def __init__(self, version: str = ""):
        super().__init__("version already exists", {"version": version})
