from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

import yaml

from .options import DEFAULT_OPTIONS, MasonryOptions

logger = logging.getLogger(__name__)

SETTINGS_ENV = "MASONRY_SETTINGS"


def get_settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.abspath(os.path.expanduser(env_path))
    return os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "settings.yaml"
    )


def read_settings(path: str) -> Dict[str, Any]:
    """Read the ``masonry`` section (or the whole document) of a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: settings must be a mapping")
    section = loaded.get("masonry", loaded)
    if not isinstance(section, dict):
        raise ValueError(f"{path}: 'masonry' section must be a mapping")
    return section


@lru_cache(maxsize=None)
def load_options(path: Optional[str] = None) -> MasonryOptions:
    """Load layout options from ``settings.yaml`` when available."""
    settings_path = path or get_settings_path()
    if not os.path.exists(settings_path):
        if path:
            raise FileNotFoundError(settings_path)
        logger.warning("settings file %s not found, using defaults", settings_path)
        return DEFAULT_OPTIONS
    options = MasonryOptions.from_mapping(read_settings(settings_path))
    logger.debug("loaded masonry options from %s: %s", settings_path, options)
    return options
