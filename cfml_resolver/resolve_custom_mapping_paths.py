"""Logic for turning a normalized component path into mapped candidate paths."""

import logging
from collections.abc import Iterable
from pathlib import Path

from cfml_resolver.join_path import join_path
from cfml_resolver.logical_mapping import LogicalMapping
from cfml_resolver.resolve_root_path import resolve_root_path
from cfml_resolver.workspace import Workspace

logger = logging.getLogger(__name__)


def _strip_logical_path(logical_path: str) -> str:
    prefix = logical_path.replace("\\", "/")
    if prefix.startswith("/"):
        prefix = prefix[1:]
    return prefix.rstrip("/")


def resolve_custom_mapping_paths(
    base: str | Path,
    appending_path: str,
    mappings: Iterable[LogicalMapping],
    workspace: Workspace | None = None,
) -> list[Path]:
    """Build one candidate path per mapping whose logical prefix covers the path.

    A prefix only matches on whole segments: ``/foo`` covers ``/foo`` and
    ``foo/bar`` but not ``/foobar/baz``. One leading separator on the path is
    ignored, the same as on the logical path. Candidates are returned in mapping
    order without existence checks.
    """
    custom_mapping_paths: list[Path] = []
    normalized_path = appending_path.replace("\\", "/")
    if normalized_path.startswith("/"):
        normalized_path = normalized_path[1:]
    for mapping in mappings:
        prefix = _strip_logical_path(mapping.logical_path)
        if normalized_path != prefix and not normalized_path.startswith(f"{prefix}/"):
            continue

        if mapping.is_physical:
            directory_path: Path | None = Path(mapping.directory_path)
        else:
            directory_path = resolve_root_path(base, mapping.directory_path, workspace)
        if directory_path is None:
            logger.debug(
                "Skipping mapping %s: %s has no project root",
                mapping.logical_path,
                base,
            )
            continue

        remainder = normalized_path[len(prefix) :]
        custom_mapping_paths.append(join_path(directory_path, remainder))
    return custom_mapping_paths
