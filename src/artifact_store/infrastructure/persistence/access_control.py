"""
Allow-list access control.

Each project directory holds readers.txt and writers.txt, newline-delimited
lists of bearer tokens. The files are re-read on every check so edits take
effect immediately.
"""

from pathlib import Path

from artifact_store.domain.capabilities import (
    ProjectReader,
    ProjectWriter,
    issue_reader,
    issue_writer,
)
from artifact_store.domain.value_objects import Credential, ProjectName
from artifact_store.infrastructure.logging import get_logger
from artifact_store.infrastructure.persistence.filesystem import file_contains
from artifact_store.shared.errors.domain import UnauthorizedError
from artifact_store.shared.errors.infrastructure import StorageError

logger = get_logger(__name__)

READERS_FILE = "readers.txt"
WRITERS_FILE = "writers.txt"


class AllowListAccessControl:
    """Issues project capabilities to tokens found on the allow-lists."""

    def __init__(self, root: Path):
        self._root = Path(root)

    def allow_list_path(self, project: ProjectName, role: str) -> Path:
        file_name = READERS_FILE if role == "reader" else WRITERS_FILE
        return self._root / project.value / file_name

    def is_listed(self, project: ProjectName, credential: Credential, role: str) -> bool:
        """
        Check the role's allow-list for the credential.

        Raises:
            StorageError: allow-list is missing or unreadable. This is a
                configuration problem, not a denial.
        """
        path = self.allow_list_path(project, role)
        try:
            return file_contains(path, credential.token)
        except OSError as e:
            logger.error(
                "Allow-list unreadable",
                project=project.value,
                role=role,
                path=str(path),
                error=str(e),
            )
            raise StorageError.from_os_error(e) from e

    def authorize_reader(self, project: ProjectName, credential: Credential) -> ProjectReader:
        """Return a ProjectReader or raise UnauthorizedError("reader")."""
        if not self.is_listed(project, credential, "reader"):
            logger.warning("Reader denied", project=project.value)
            raise UnauthorizedError("reader", project.value)
        return issue_reader(project)

    def authorize_writer(self, project: ProjectName, credential: Credential) -> ProjectWriter:
        """Return a ProjectWriter or raise UnauthorizedError("writer")."""
        if not self.is_listed(project, credential, "writer"):
            logger.warning("Writer denied", project=project.value)
            raise UnauthorizedError("writer", project.value)
        return issue_writer(project)
