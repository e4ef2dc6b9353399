"""Read-only JSON defaults for listing options.

The file lives under the platform config directory and is never written.
All access is defensive: malformed or missing config falls back to no
defaults, and values of the wrong type are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lsx"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

BOOLEAN_KEYS: tuple[str, ...] = (
    "show_hidden",
    "long_format",
    "human_readable",
    "omit_group",
    "add_slash",
    "numeric_ids",
    "quote_names",
    "ascii_borders",
    "no_color",
)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_listing_defaults() -> dict[str, object]:
    """Return only the recognized, well-typed defaults from the config file."""
    data = load_config()
    defaults: dict[str, object] = {}
    for key in BOOLEAN_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            defaults[key] = value
    depth = data.get("depth")
    if isinstance(depth, int) and not isinstance(depth, bool) and depth >= 0:
        defaults["depth"] = depth
    return defaults


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "BOOLEAN_KEYS",
    "load_config",
    "load_listing_defaults",
]
