"""Data model for the set of project root folders."""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _absolute(path: str | Path) -> Path:
    return Path(os.path.abspath(path))


@dataclass
class Workspace:
    """Represents the project roots that root-relative references resolve against."""

    folders: list[Path] = field(default_factory=list)

    def root_of(self, location: str | Path) -> Path | None:
        """Return the nearest folder enclosing ``location``, or None."""
        target = _absolute(location)
        best: Path | None = None
        for folder in self.folders:
            root = _absolute(folder)
            if target != root and root not in target.parents:
                continue
            if best is None or len(root.parts) > len(best.parts):
                best = root
        return best
