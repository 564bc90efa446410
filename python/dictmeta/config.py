"""Configuration loader for dictmeta.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "default_culture": "en_US",
    "property_encoding": "utf-8",
    "encoding_aliases": {},
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/dictmeta -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                logger.debug("Loaded configuration from %s", config_path)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_culture() -> str:
    return get_default("default_culture", FALLBACK_DEFAULTS["default_culture"])


def property_encoding() -> str:
    return get_default("property_encoding", FALLBACK_DEFAULTS["property_encoding"])


def encoding_aliases() -> dict[str, str]:
    return get_default("encoding_aliases", FALLBACK_DEFAULTS["encoding_aliases"])
