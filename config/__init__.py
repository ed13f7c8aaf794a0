"""Config package facade."""

from config.loader import load_settings, settings_from_dict
from config.models import (
    DEFAULT_CONFIG_PATH,
    OUTPUT_CONFIG_PATH,
    SETTINGS_FILENAME,
    MergeSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "OUTPUT_CONFIG_PATH",
    "SETTINGS_FILENAME",
    "MergeSettings",
    "load_settings",
    "settings_from_dict",
]
