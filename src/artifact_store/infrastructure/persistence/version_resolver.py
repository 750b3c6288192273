"""
Version resolution.

A version is a directory under <root>/<project>/versions/ that holds exactly
one artifact file. The directory is listed on every call.
"""

from pathlib import Path
from typing import List

from artifact_store.domain.capabilities import ProjectReader
from artifact_store.domain.value_objects import VersionName
from artifact_store.infrastructure.logging import get_logger
from artifact_store.infrastructure.persistence.filesystem import read_dir
from artifact_store.shared.errors.domain import CorruptedVersionError

logger = get_logger(__name__)

VERSIONS_DIR = "versions"


class VersionResolver:
    """Maps (project, version) to the version's single artifact."""

    def __init__(self, root: Path):
        self._root = Path(root)

    def versions_dir(self, project: ProjectReader) -> Path:
        return self._root / project.name / VERSIONS_DIR

    def list_versions(self, project: ProjectReader) -> List[str]:
        return read_dir(self.versions_dir(project))

    def file_for_version(self, project: ProjectReader, version: VersionName) -> str:
        """
        Name of the version's artifact file.

        Raises:
            CorruptedVersionError: the version directory holds zero or
                several entries
            StorageError: the version directory cannot be listed
        """
        entries = read_dir(self.versions_dir(project) / version.value)
        if len(entries) != 1:
            logger.error(
                "Corrupted version",
                project=project.name,
                version=version.value,
                entries=len(entries),
            )
            raise CorruptedVersionError(version.value, len(entries))
        return entries[0]

    def path_for_version(self, project: ProjectReader, version: VersionName) -> Path:
        """Full path of the version's artifact file."""
        file_name = self.file_for_version(project, version)
        return self.versions_dir(project) / version.value / file_name
