"""Utility for resolving a path next to a given document."""

from pathlib import Path

from cfml_resolver.join_path import join_path


def resolve_relative_path(base: str | Path, appending_path: str) -> Path:
    """Resolve ``appending_path`` against the directory containing ``base``."""
    return join_path(Path(base).parent, appending_path)
