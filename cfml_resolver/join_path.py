"""Utility for syntactically joining path segments onto a base location."""

import os
from pathlib import Path


def join_path(base: str | Path, *segments: str) -> Path:
    """Join segments onto ``base`` and normalize ``.``/``..`` components.

    Leading separators on the segments are ignored, so ``/img/a.png`` is joined
    under the base rather than replacing it. No existence check is made.
    """
    parts = [s.replace("\\", "/").lstrip("/") for s in segments]
    joined = Path(base).joinpath(*[p for p in parts if p])
    return Path(os.path.normpath(joined))
