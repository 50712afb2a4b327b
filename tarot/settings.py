"""
Settings for the tarot pile library.
Handles loading of environment configuration and version information.
"""

import logging
import os
from typing import Any, Dict, Optional

from .version import get_version_info


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Read KEY=VALUE pairs from a .env file. A missing file yields no settings."""
    if not os.path.exists(filepath):
        return {}
    settings = {}
    with open(filepath, "r", encoding="utf-8") as env_file:
        for raw in env_file:
            entry = raw.strip()
            if not entry or entry.startswith("#"):
                continue
            key, sep, value = entry.partition("=")
            if sep:
                settings[key.strip()] = value.strip()
    return settings


def get_settings() -> Dict[str, Any]:
    """Get library settings from the environment or .env file, with defaults"""
    env_vars = load_env_file()

    seed = os.getenv('TAROT_SEED') or env_vars.get('TAROT_SEED') or None
    log_level = os.getenv('TAROT_LOG_LEVEL') or env_vars.get('TAROT_LOG_LEVEL', 'INFO')

    return {
        'seed': seed,
        'log_level': log_level.upper(),
        **get_version_info()
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging. Falls back to TAROT_LOG_LEVEL when no level is given."""
    if level is None:
        level = get_settings()['log_level']
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric)
