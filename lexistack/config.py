"""Configuration loader for lexistack.

Loads defaults from lexistack.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "lexistack.json"

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "max_suggestions": 18,
    "max_bigrams": 60,
    "default_frequency": 1,
    "min_length": 1,
    "max_length": 48,
    "log_level": "WARNING",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find lexistack.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent / CONFIG_FILENAME,  # lexistack -> root
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from lexistack.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_max_suggestions() -> int:
    return get_default("max_suggestions", FALLBACK_DEFAULTS["max_suggestions"])


def default_max_bigrams() -> int:
    return get_default("max_bigrams", FALLBACK_DEFAULTS["max_bigrams"])


def default_frequency() -> int:
    return get_default("default_frequency", FALLBACK_DEFAULTS["default_frequency"])


def default_min_length() -> int:
    return get_default("min_length", FALLBACK_DEFAULTS["min_length"])


def default_max_length() -> int:
    return get_default("max_length", FALLBACK_DEFAULTS["max_length"])


def default_log_level() -> str:
    return get_default("log_level", FALLBACK_DEFAULTS["log_level"])
