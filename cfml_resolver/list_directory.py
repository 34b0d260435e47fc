"""Logic for listing a directory as (name, kind) entries."""

from pathlib import Path

from cfml_resolver.file_type import FileType
from cfml_resolver.probe import probe


def list_directory(path: str | Path) -> list[tuple[str, FileType]]:
    """List the entries of a directory, sorted by name.

    Errors from the filesystem (missing path, not a directory) propagate.
    Entries that vanish between listing and probing are reported as OTHER.
    """
    entries: list[tuple[str, FileType]] = []
    for child in sorted(Path(path).iterdir(), key=lambda p: p.name):
        entries.append((child.name, probe(child) or FileType.OTHER))
    return entries
