"""Existence and kind checks for candidate paths."""

import os
import stat
from pathlib import Path

from cfml_resolver.file_type import FileType


def probe(path: str | Path) -> FileType | None:
    """Return the kind of the entry at ``path``, or None when nothing is there.

    Missing entries, permission problems and invalid paths are all reported as
    None. Symlinks are followed.
    """
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return None
    if stat.S_ISREG(mode):
        return FileType.FILE
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    return FileType.OTHER


def file_exists(path: str | Path) -> bool:
    """Check whether any entry exists at ``path``."""
    return probe(path) is not None
