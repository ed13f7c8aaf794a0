"""Settings loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from config.models import DEFAULT_CONFIG_PATH, OUTPUT_CONFIG_PATH, MergeSettings
from logger import level_names


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_level(value: Any, default: str | None) -> str | None:
    if not isinstance(value, str):
        return default
    level = value.strip().upper()
    return level if level in level_names() else default


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {path}")
    return data


def settings_from_dict(raw: Dict[str, Any]) -> MergeSettings:
    """Build a MergeSettings instance from a raw dictionary.

    Unknown keys are ignored and invalid values fall back to defaults.
    """
    indent = _as_int(raw.get("indent", 4), 4)
    return MergeSettings(
        default_path=_as_str(raw.get("default_path"), DEFAULT_CONFIG_PATH),
        output_path=_as_str(raw.get("output_path"), OUTPUT_CONFIG_PATH),
        indent=indent if indent >= 0 else 4,
        log_level=_as_level(raw.get("log_level"), None),
    )


def load_settings(path: Path | None) -> MergeSettings:
    """Load settings from an optional JSON file.

    Args:
        path: Optional settings file; defaults apply when omitted.

    Returns:
        Parsed MergeSettings instance.
    """
    raw: Dict[str, Any] = {}
    if path is not None:
        raw = _load_json(path)
    return settings_from_dict(raw)
