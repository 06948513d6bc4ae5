"""Catalog configuration: where the catalog document lives.

Resolution priority for the catalog path:
1. explicit ``--path`` CLI argument
2. ``MESSAGE_CATALOG_PATH`` environment variable
3. ``catalog_path`` in ~/.message_catalog/config.json
4. ./messages.json relative to the current directory
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".message_catalog" / "config.json"
DEFAULT_CATALOG_NAME = "messages.json"
CATALOG_PATH_ENV = "MESSAGE_CATALOG_PATH"


def load_config(config_path: Optional[Path] = None) -> Dict[str, str]:
    """Load the config file, or an empty config if it is missing or unreadable."""
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return {}
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config %s: not a JSON object", path)
    return {}


def save_config(config: Dict[str, str], config_path: Optional[Path] = None):
    """Save config to disk."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")


def resolve_catalog_path(
    cli_arg: Optional[str] = None,
    config_path: Optional[Path] = None,
) -> Path:
    """Resolve the catalog document path from CLI arg, env var, config or default."""
    if cli_arg:
        return Path(cli_arg)

    env_path = os.environ.get(CATALOG_PATH_ENV)
    if env_path:
        return Path(env_path)

    configured = load_config(config_path).get("catalog_path")
    if configured:
        return Path(configured)

    return Path.cwd() / DEFAULT_CATALOG_NAME
