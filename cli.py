"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from config.models import SETTINGS_FILENAME
from logger import level_names


@dataclass
class MergeOptions:
    """Parsed CLI options used by the merge pipeline."""

    external_path: Path | None
    default_path: Path | None
    output_path: Path | None
    settings_path: Path | None
    log_level: str | None


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="secretlint-merge",
        description="Merge an external secretlint config into the default config.",
    )
    parser.add_argument("external", nargs="?", help="Path to the external config to merge")
    parser.add_argument("--default", dest="default_path", help="Path to the default config")
    parser.add_argument("--output", dest="output_path", help="Path of the merged config to write")
    parser.add_argument("--settings", help="Path to a secretlint-merge.json settings file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=level_names(),
        help="Console log level",
    )
    return parser.parse_args(argv)


def _as_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value).expanduser()


def resolve_settings_path(args: argparse.Namespace) -> Path | None:
    """Resolve the settings path from CLI arguments.

    Falls back to a settings file in the working directory when present.
    """
    if args.settings:
        return Path(args.settings).expanduser().resolve()
    default_file = Path.cwd() / SETTINGS_FILENAME
    if default_file.exists():
        return default_file.resolve()
    return None


def parse_cli(argv: list[str] | None = None) -> MergeOptions:
    """Parse command-line arguments into MergeOptions."""
    args = _parse_args(argv)
    return MergeOptions(
        external_path=_as_path(args.external),
        default_path=_as_path(args.default_path),
        output_path=_as_path(args.output_path),
        settings_path=resolve_settings_path(args),
        log_level=args.log_level,
    )
