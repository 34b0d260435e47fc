"""Logic for resolving dotted component paths to existing files or folders.

Candidates are tried in tiers: next to the requesting document, under its
project root, then through the configured logical mappings. The first tier
that yields an existing path wins.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from cfml_resolver.logical_mapping import LogicalMapping
from cfml_resolver.probe import file_exists
from cfml_resolver.resolve_custom_mapping_paths import resolve_custom_mapping_paths
from cfml_resolver.resolve_relative_path import resolve_relative_path
from cfml_resolver.resolve_root_path import resolve_root_path
from cfml_resolver.workspace import Workspace

logger = logging.getLogger(__name__)


def normalize_dotted_path(dot_path: str) -> str:
    """Convert ``a.b.Component`` to ``a/b/Component``."""
    return dot_path.replace(".", "/")


def resolve_dotted_paths(
    dot_path: str,
    base: str | Path,
    workspace: Workspace | None = None,
    mappings: Sequence[LogicalMapping] = (),
) -> list[Path]:
    """Resolve a dotted path from ``base`` to the list of existing locations.

    For a non-empty path at most one location is returned. An empty path
    collects the hits of every tier instead of stopping at the first.
    """
    paths: list[Path] = []
    normalized_path = normalize_dotted_path(dot_path)

    # TODO: Check cfimport/import prefixes declared in the requesting document
    local_path = resolve_relative_path(base, normalized_path)
    if file_exists(local_path):
        paths.append(local_path)
        if normalized_path:
            return paths
    else:
        logger.debug("No local match for %r at %s", dot_path, local_path)

    root_path = resolve_root_path(base, normalized_path, workspace)
    if root_path is not None and file_exists(root_path):
        paths.append(root_path)
        if normalized_path:
            return paths

    for mapped_path in resolve_custom_mapping_paths(
        base, normalized_path, mappings, workspace
    ):
        if not file_exists(mapped_path):
            logger.debug("No mapped match for %r at %s", dot_path, mapped_path)
            continue
        paths.append(mapped_path)
        if normalized_path:
            return paths

    return paths
