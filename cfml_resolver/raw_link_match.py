"""Data model for a link-shaped substring found in a document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawLinkMatch:
    """Link text and where it starts in the document."""

    text: str
    offset: int

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.offset + len(self.text)
