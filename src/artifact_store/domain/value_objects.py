"""
Store Value Objects

Immutable, self-validating names and credentials. Names are concatenated
straight into filesystem paths, so the checks here are the only defense
against directory traversal.
"""

import re
from dataclasses import dataclass, field

from artifact_store.shared.errors.domain import (
    InvalidFileError,
    InvalidProjectError,
    InvalidVersionError,
)

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
VERSION_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")

# Characters that would let an uploaded file name escape its version directory
_FORBIDDEN_FILE_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class ProjectName:
    """
    Validated project name.

    Every character must be an ASCII letter, digit, '-' or '_'. The empty
    string is rejected since it would resolve to the store root.
    """

    value: str

    def __post_init__(self):
        if not PROJECT_NAME_PATTERN.fullmatch(self.value):
            raise InvalidProjectError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VersionName:
    """
    Validated version name.

    Every character must be an ASCII letter, digit, '-', '_' or '.'.
    Names starting with '.' and names containing '..' are rejected.
    """

    value: str

    def __post_init__(self):
        if not VERSION_NAME_PATTERN.fullmatch(self.value):
            raise InvalidVersionError(self.value)
        if self.value.startswith(".") or ".." in self.value:
            raise InvalidVersionError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileName:
    """Name of an uploaded artifact, a single path component."""

    value: str

    def __post_init__(self):
        if self.value in ("", ".", ".."):
            raise InvalidFileError("invalid file name", self.value)
        if any(c in self.value for c in _FORBIDDEN_FILE_CHARS):
            raise InvalidFileError("invalid file name", self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Credential:
    """
    Opaque bearer token.

    Carries no identity beyond its exact string value. May be empty.
    """

    token: str = field(repr=False)


def validate_project_name(name: str) -> ProjectName:
    """Return a ProjectName or raise InvalidProjectError."""
    return ProjectName(name)


def validate_version_name(name: str) -> VersionName:
    """Return a VersionName or raise InvalidVersionError."""
    return VersionName(name)


def validate_file_name(name: str) -> FileName:
    """Return a FileName or raise InvalidFileError."""
    return FileName(name)
