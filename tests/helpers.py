"""
Shared test helpers

Builders for on-disk store fixtures.
"""
from pathlib import Path
from typing import Dict, Iterable

READER_TOKEN = "tok-r"
WRITER_TOKEN = "tok-w"


def make_project(
    root: Path,
    name: str,
    readers: Iterable[str] = (),
    writers: Iterable[str] = (),
) -> Path:
    """Provision a project directory the way an operator would."""
    project_dir = root / name
    (project_dir / "versions").mkdir(parents=True)
    (project_dir / "readers.txt").write_text("".join(f"{t}\n" for t in readers))
    (project_dir / "writers.txt").write_text("".join(f"{t}\n" for t in writers))
    return project_dir


def make_version(root: Path, project: str, version: str, files: Dict[str, bytes]) -> Path:
    """Create a version directory holding the given files."""
    version_dir = root / project / "versions" / version
    version_dir.mkdir(parents=True)
    for name, content in files.items():
        (version_dir / name).write_bytes(content)
    return version_dir


def bearer(token: str) -> str:
    return f"Bearer {token}"
