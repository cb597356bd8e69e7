"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from doclinks.merge_config import merge_config
from doclinks.load_error import LoadError

DEFAULT_CONFIG: dict[str, Any] = {
    "extensions": [".md"],
    "exclude": [".*", "node_modules", "_site"],
    "ignore": [],
    "index_names": ["index", "readme"],
    "entry_points": ["index"],
    "check_anchors": False,
    "report_orphans": False,
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = "Invalid configuration file"
                raise LoadError(msg, p) from e
            if not isinstance(user_config, dict):
                msg = "Configuration file must contain a mapping"
                raise LoadError(msg, p)
            config = merge_config(config, user_config)
    return config


def with_defaults(config: dict[str, Any] | None) -> dict[str, Any]:
    """Fill keys missing from a caller-supplied config with the defaults."""
    return merge_config(DEFAULT_CONFIG, config or {})
