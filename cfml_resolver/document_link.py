"""Data model for a resolved link inside a document."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DocumentLink:
    """A document span and the file or external URI it points at."""

    start: int
    end: int  # exclusive
    target: Path | str  # Path for local files, verbatim str for URIs

    @property
    def is_external(self) -> bool:
        return isinstance(self.target, str)
