"""Logic for keeping only the directories of a listing."""

from pathlib import Path

from cfml_resolver.file_type import FileType
from cfml_resolver.list_directory import list_directory


def filter_directories(
    files: list[tuple[str, FileType]],
) -> list[tuple[str, FileType]]:
    """Filter a listing down to its directories, preserving order."""
    return [f for f in files if f[1] == FileType.DIRECTORY]


def get_directories(src_path: str | Path) -> list[tuple[str, FileType]]:
    """List the sub-directories of ``src_path``."""
    return filter_directories(list_directory(src_path))
