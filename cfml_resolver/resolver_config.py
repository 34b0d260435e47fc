"""Typed view of the configuration consumed by the resolvers."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cfml_resolver.filter_components import COMPONENT_EXTENSION
from cfml_resolver.link_pattern import DEFAULT_LINK_PATTERNS, LinkPattern
from cfml_resolver.logical_mapping import LogicalMapping
from cfml_resolver.workspace import Workspace

logger = logging.getLogger(__name__)


def _link_pattern_from_dict(raw: Any) -> LinkPattern | None:
    if not isinstance(raw, dict) or not isinstance(raw.get("pattern"), str):
        logger.warning("Ignoring link pattern without a 'pattern' string: %r", raw)
        return None
    flags = re.IGNORECASE if raw.get("ignore_case", True) else 0
    try:
        compiled = re.compile(raw["pattern"], flags)
    except re.error as e:
        logger.warning("Ignoring invalid link pattern %r: %s", raw["pattern"], e)
        return None
    link_index = int(raw.get("link_index", 1))
    if link_index > compiled.groups:
        logger.warning(
            "Ignoring link pattern %r: group %d does not exist",
            raw["pattern"],
            link_index,
        )
        return None
    return LinkPattern(pattern=compiled, link_index=link_index)


@dataclass
class ResolverConfig:
    """Workspace, mappings and scan patterns passed explicitly to the resolvers."""

    workspace: Workspace = field(default_factory=Workspace)
    mappings: list[LogicalMapping] = field(default_factory=list)
    folder_mappings: dict[Path, list[LogicalMapping]] = field(default_factory=dict)
    component_extension: str = COMPONENT_EXTENSION
    link_patterns: tuple[LinkPattern, ...] = DEFAULT_LINK_PATTERNS

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ResolverConfig":
        """Build a ResolverConfig from a loaded configuration dict.

        Raises InvalidMappingError for malformed mapping entries.
        """
        folders = [Path(f) for f in config.get("workspace_folders") or []]
        mappings = [LogicalMapping.from_dict(m) for m in config.get("mappings") or []]
        folder_mappings = {
            Path(folder): [LogicalMapping.from_dict(m) for m in entries or []]
            for folder, entries in (config.get("folder_mappings") or {}).items()
        }
        extra = [_link_pattern_from_dict(p) for p in config.get("link_patterns") or []]
        return cls(
            workspace=Workspace(folders),
            mappings=mappings,
            folder_mappings=folder_mappings,
            component_extension=config.get("component_extension") or COMPONENT_EXTENSION,
            link_patterns=DEFAULT_LINK_PATTERNS + tuple(p for p in extra if p),
        )

    def mappings_for(self, location: str | Path) -> list[LogicalMapping]:
        """Return the mappings that apply to ``location``.

        A folder-level list for the location's project root replaces the
        workspace-wide list, the way folder settings override workspace ones.
        """
        root = self.workspace.root_of(location)
        if root is not None:
            for folder, mappings in self.folder_mappings.items():
                if Path(os.path.abspath(folder)) == root:
                    return list(mappings)
        return list(self.mappings)
