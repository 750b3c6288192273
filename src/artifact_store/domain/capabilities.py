"""
Project Capabilities

Proof-of-authorization values. A ProjectReader or ProjectWriter can only be
built with the module-level grant, which is handed out by access control
after a successful allow-list check. They hold no secrets and no resources.

The grant is an init-only field: it is checked at construction and never
stored, so dataclasses.replace() cannot carry it over to a new project.
"""

from dataclasses import InitVar, dataclass

from artifact_store.domain.value_objects import ProjectName

_GRANT = object()


@dataclass(frozen=True)
class ProjectReader:
    """Permission to list and read the versions of one project."""

    project: ProjectName
    _grant: InitVar[object] = None

    def __post_init__(self, _grant):
        if _grant is not _GRANT:
            raise TypeError("ProjectReader can only be issued by access control")

    @property
    def name(self) -> str:
        return self.project.value


@dataclass(frozen=True)
class ProjectWriter:
    """Permission to publish new versions of one project. Implies reading."""

    project: ProjectName
    _grant: InitVar[object] = None

    def __post_init__(self, _grant):
        if _grant is not _GRANT:
            raise TypeError("ProjectWriter can only be issued by access control")

    @property
    def name(self) -> str:
        return self.project.value

    def reader(self) -> ProjectReader:
        """Read view of the same project, without re-checking the readers list."""
        return ProjectReader(self.project, _GRANT)


def issue_reader(project: ProjectName) -> ProjectReader:
    """Issue a reader capability. Reserved for access control."""
    return ProjectReader(project, _GRANT)


def issue_writer(project: ProjectName) -> ProjectWriter:
    """Issue a writer capability. Reserved for access control."""
    return ProjectWriter(project, _GRANT)
