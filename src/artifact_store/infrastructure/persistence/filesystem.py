"""
Filesystem helpers shared by the persistence adapters.
"""

import os
from pathlib import Path
from typing import List

from artifact_store.shared.errors.infrastructure import StorageError


def read_dir(directory: Path) -> List[str]:
    """
    List the entry names of a directory, sorted.

    Raises:
        StorageError: directory cannot be listed, or an entry name is not
            valid UTF-8
    """
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise StorageError.from_os_error(e) from e

    for name in names:
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageError(f"couldn't decode utf8: {directory}", original_error=e) from e

    return sorted(names)


def file_contains(path: Path, line: str) -> bool:
    """
    Check whether a text file holds a line exactly equal to `line`.

    Line terminators ("\\n" or "\\r\\n") are removed, nothing else is trimmed.
    A line that is not valid UTF-8 counts as non-matching and the scan moves
    on to the next one.

    Raises:
        OSError: file cannot be opened or read
    """
    with open(path, "rb") as f:
        for raw in f:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            try:
                decoded = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            if decoded == line:
                return True
    return False
