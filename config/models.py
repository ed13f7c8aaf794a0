"""Settings dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_CONFIG_PATH = ".default.secretlintrc.json"
OUTPUT_CONFIG_PATH = ".secretlintrc.json"
SETTINGS_FILENAME = "secretlint-merge.json"


@dataclass
class MergeSettings:
    """Paths and output formatting for a merge run."""

    default_path: str = DEFAULT_CONFIG_PATH
    output_path: str = OUTPUT_CONFIG_PATH
    indent: int = 4
    log_level: str | None = None
