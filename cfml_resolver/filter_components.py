"""Logic for keeping only the component files of a listing."""

from pathlib import Path

from cfml_resolver.file_type import FileType
from cfml_resolver.list_directory import list_directory

COMPONENT_EXTENSION = ".cfc"


def filter_components(
    files: list[tuple[str, FileType]],
    extension: str = COMPONENT_EXTENSION,
) -> list[tuple[str, FileType]]:
    """Filter a listing down to component files, preserving order.

    The extension comparison is case-insensitive: Foo.CFC and foo.cfc both
    match, foo.cfctxt does not.
    """
    suffix = extension.lower()
    return [
        f for f in files if f[1] == FileType.FILE and f[0].lower().endswith(suffix)
    ]


def get_components(
    src_path: str | Path,
    extension: str = COMPONENT_EXTENSION,
) -> list[tuple[str, FileType]]:
    """List the component files directly inside ``src_path``."""
    return filter_components(list_directory(src_path), extension)
