"""Data model for logical-path to directory mappings."""

from dataclasses import dataclass
from typing import Any


class InvalidMappingError(ValueError):
    """Raised when a configured mapping entry cannot be interpreted."""


@dataclass(frozen=True)
class LogicalMapping:
    """A virtual path prefix served from a physical or root-relative directory."""

    logical_path: str  # e.g. /lib
    directory_path: str
    is_physical_directory_path: bool | None = None

    @property
    def is_physical(self) -> bool:
        """Whether ``directory_path`` is used as-is rather than under the project root."""
        return self.is_physical_directory_path is None or self.is_physical_directory_path

    @classmethod
    def from_dict(cls, raw: Any) -> "LogicalMapping":
        """Build a mapping from a config entry using camelCase or snake_case keys."""
        if not isinstance(raw, dict):
            msg = f"Mapping entry must be a mapping, got {type(raw).__name__}"
            raise InvalidMappingError(msg)
        logical = raw.get("logicalPath", raw.get("logical_path"))
        directory = raw.get("directoryPath", raw.get("directory_path"))
        if not isinstance(logical, str) or not isinstance(directory, str):
            msg = f"Mapping entry needs string logicalPath and directoryPath: {raw!r}"
            raise InvalidMappingError(msg)
        physical = raw.get(
            "isPhysicalDirectoryPath", raw.get("is_physical_directory_path")
        )
        return cls(
            logical_path=logical,
            directory_path=directory,
            is_physical_directory_path=None if physical is None else bool(physical),
        )
