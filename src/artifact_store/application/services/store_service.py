"""
Store Service

Public operations consumed by the transport layer. Every raw project,
version and file name is validated before it reaches the filesystem, and
every version operation requires a capability issued by access control.

All calls perform blocking filesystem I/O and keep no state between calls.
"""

from pathlib import Path
from typing import List, Optional, Union

from artifact_store.domain.capabilities import ProjectReader, ProjectWriter
from artifact_store.domain.services import extract_token
from artifact_store.domain.value_objects import (
    validate_file_name,
    validate_project_name,
    validate_version_name,
)
from artifact_store.infrastructure.persistence.access_control import AllowListAccessControl
from artifact_store.infrastructure.persistence.filesystem import read_dir
from artifact_store.infrastructure.persistence.upload_placement import (
    StagedUpload,
    UploadPlacement,
)
from artifact_store.infrastructure.persistence.version_resolver import VersionResolver

AuthHeader = Optional[Union[str, bytes]]


class Store:
    """
    Filesystem-backed artifact store.

    Layout under the root:
        <project>/readers.txt
        <project>/writers.txt
        <project>/versions/<version>/<single-file>
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self._access_control = AllowListAccessControl(self.root)
        self._resolver = VersionResolver(self.root)
        self._placement = UploadPlacement(self.root)

    def list_projects(self) -> List[str]:
        """Every entry of the store root, unfiltered."""
        return read_dir(self.root)

    def project_reader(self, project_name: str, auth_header: AuthHeader) -> ProjectReader:
        """
        Authorize a reader for the project.

        Raises:
            UnprovidedAuthorizationError: no header
            StoreError: malformed header
            InvalidProjectError: bad project name
            UnauthorizedError: token not on readers.txt
            StorageError: readers.txt missing or unreadable
        """
        credential = extract_token(auth_header)
        project = validate_project_name(project_name)
        return self._access_control.authorize_reader(project, credential)

    def project_writer(self, project_name: str, auth_header: AuthHeader) -> ProjectWriter:
        """Authorize a writer for the project. Same failures as project_reader."""
        credential = extract_token(auth_header)
        project = validate_project_name(project_name)
        return self._access_control.authorize_writer(project, credential)

    def list_versions(self, project: ProjectReader) -> List[str]:
        return self._resolver.list_versions(project)

    def file_for_version(self, project: ProjectReader, version: str) -> str:
        return self._resolver.file_for_version(project, validate_version_name(version))

    def path_for_version(self, project: ProjectReader, version: str) -> Path:
        return self._resolver.path_for_version(project, validate_version_name(version))

    def outpath_for(self, project: ProjectWriter, version: str, file_name: str) -> Path:
        """
        Allocate the destination of a new version's artifact.

        Check-then-create: concurrent first uploads of one version are not
        serialized. Use stage_upload() when that matters.
        """
        return self._placement.outpath_for(
            project,
            validate_version_name(version),
            validate_file_name(file_name),
        )

    def stage_upload(self, project: ProjectWriter, version: str, file_name: str) -> StagedUpload:
        """Allocate a staging destination published atomically as the version."""
        return self._placement.stage_upload(
            project,
            validate_version_name(version),
            validate_file_name(file_name),
        )
