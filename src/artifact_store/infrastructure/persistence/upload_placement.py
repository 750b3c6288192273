"""
Upload placement.

Versions are write-once: once <versions>/<version>/ holds a file it is never
written again. Two ways to place an upload are offered:

- outpath_for(): check the version directory, create it, and hand back the
  destination path. The check and the create are separate syscalls, so two
  concurrent first uploads of the same version can both pass and leave a
  multi-file (corrupted) version behind.
- stage_upload(): the artifact is written into a private staging directory
  and published with a single rename(2) onto the version directory. rename
  replaces an empty directory and fails on a non-empty one, so exactly one
  concurrent uploader wins and the others get VersionAlreadyExistsError.
"""

import errno
import os
import shutil
import uuid
from pathlib import Path
from typing import Optional

from artifact_store.domain.capabilities import ProjectWriter
from artifact_store.domain.value_objects import FileName, VersionName
from artifact_store.infrastructure.logging import get_logger
from artifact_store.infrastructure.persistence.version_resolver import VERSIONS_DIR
from artifact_store.shared.errors.domain import StoreError, VersionAlreadyExistsError
from artifact_store.shared.errors.infrastructure import StorageError

logger = get_logger(__name__)

STAGING_DIR = ".staging"


def _is_populated(directory: Path) -> bool:
    """Whether the directory exists and holds at least one entry."""
    try:
        with os.scandir(directory) as it:
            return next(it, None) is not None
    except FileNotFoundError:
        return False
    except OSError as e:
        raise StorageError.from_os_error(e) from e


class StagedUpload:
    """
    An upload written to staging, waiting to be published as a version.

    Usage:
        with placement.stage_upload(writer, version, file_name) as staged:
            write bytes to staged.path
            staged.publish()

    Leaving the block without publishing removes the staging directory.
    """

    def __init__(self, staging_dir: Path, version_dir: Path, file_name: FileName):
        self.staging_dir = staging_dir
        self.version_dir = version_dir
        self.file_name = file_name
        self.published = False

    @property
    def path(self) -> Path:
        """Where the caller writes the artifact bytes."""
        return self.staging_dir / self.file_name.value

    @property
    def final_path(self) -> Path:
        """Where the artifact lives once published."""
        return self.version_dir / self.file_name.value

    def publish(self) -> Path:
        """
        Move the staged artifact into place as the version.

        Raises:
            StoreError: nothing was written to `path`
            VersionAlreadyExistsError: the version was populated meanwhile
            StorageError: rename failed for another reason
        """
        if not self.path.is_file():
            self.discard()
            raise StoreError("failed to upload")

        try:
            os.rename(self.staging_dir, self.version_dir)
        except OSError as e:
            self.discard()
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                raise VersionAlreadyExistsError(self.version_dir.name) from e
            raise StorageError.from_os_error(e) from e

        self.published = True
        return self.final_path

    def discard(self) -> None:
        if not self.published:
            shutil.rmtree(self.staging_dir, ignore_errors=True)

    def __enter__(self) -> "StagedUpload":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.discard()
        return None


class UploadPlacement:
    """Allocates destinations for new versions."""

    def __init__(self, root: Path):
        self._root = Path(root)

    def version_dir(self, project: ProjectWriter, version: VersionName) -> Path:
        return self._root / project.name / VERSIONS_DIR / version.value

    def outpath_for(
        self,
        project: ProjectWriter,
        version: VersionName,
        file_name: FileName,
    ) -> Path:
        """
        Create the version directory and return the artifact destination.

        An existing empty version directory (left by an abandoned upload) is
        reused.

        Raises:
            VersionAlreadyExistsError: version directory is not empty
            StorageError: directory cannot be inspected or created
        """
        version_path = self.version_dir(project, version)
        if _is_populated(version_path):
            raise VersionAlreadyExistsError(version.value)

        try:
            version_path.mkdir(exist_ok=True)
        except OSError as e:
            raise StorageError.from_os_error(e) from e

        return version_path / file_name.value

    def stage_upload(
        self,
        project: ProjectWriter,
        version: VersionName,
        file_name: FileName,
    ) -> StagedUpload:
        """
        Reserve a staging directory for a new version.

        Fails early when the version is already populated; the authoritative
        check happens in StagedUpload.publish().
        """
        version_path = self.version_dir(project, version)
        if _is_populated(version_path):
            raise VersionAlreadyExistsError(version.value)

        staging_root = self._root / project.name / STAGING_DIR
        staging_dir = staging_root / f"{version.value}-{uuid.uuid4().hex}"
        try:
            staging_root.mkdir(exist_ok=True)
            staging_dir.mkdir()
        except OSError as e:
            raise StorageError.from_os_error(e) from e

        logger.debug(
            "Upload staged",
            project=project.name,
            version=version.value,
            staging_dir=str(staging_dir),
        )
        return StagedUpload(staging_dir, version_path, file_name)
