"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from cfml_resolver.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "workspace_folders": [],
    "component_extension": ".cfc",
    "mappings": [],
    "folder_mappings": {},
    "link_patterns": [],
}


def _anchor(base: Path, folder: object) -> str:
    return str((base / str(folder)).resolve())


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Relative workspace folders (and folder_mappings keys) are taken relative
    to the config file.
    """
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            folders = user_config.get("workspace_folders")
            if isinstance(folders, list):
                user_config["workspace_folders"] = [_anchor(p.parent, f) for f in folders]
            scoped = user_config.get("folder_mappings")
            if isinstance(scoped, dict):
                user_config["folder_mappings"] = {
                    _anchor(p.parent, k): v for k, v in scoped.items()
                }
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.info("No configuration at %s, using defaults", p)
    return config
