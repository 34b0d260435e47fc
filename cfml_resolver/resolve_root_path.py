"""Utility for resolving a path under the project root of a document."""

from pathlib import Path

from cfml_resolver.join_path import join_path
from cfml_resolver.workspace import Workspace


def resolve_root_path(
    base: str | Path,
    appending_path: str,
    workspace: Workspace | None,
) -> Path | None:
    """Resolve ``appending_path`` under the root of ``base``, or None outside any root."""
    root = workspace.root_of(base) if workspace else None
    if root is None:
        return None
    return join_path(root, appending_path)
