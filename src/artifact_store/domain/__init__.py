"""
Store Domain Layer

Validated names, credentials and the capability values that gate every
version operation.
"""

from .capabilities import ProjectReader, ProjectWriter
from .services import extract_token
from .value_objects import (
    Credential,
    FileName,
    ProjectName,
    VersionName,
    validate_file_name,
    validate_project_name,
    validate_version_name,
)

__all__ = [
    "Credential",
    "FileName",
    "ProjectName",
    "VersionName",
    "ProjectReader",
    "ProjectWriter",
    "extract_token",
    "validate_file_name",
    "validate_project_name",
    "validate_version_name",
]
