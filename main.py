#!/usr/bin/env python3
"""CLI entrypoint for the secretlint config merger."""

from __future__ import annotations

from cli import parse_cli
from config import load_settings
from core.run import run
from logger import get_logger


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv: Optional argument list; defaults to sys.argv.

    Returns:
        Process exit code.
    """
    options = parse_cli(argv)
    log = get_logger()

    if options.settings_path:
        if not options.settings_path.exists():
            log.error(f"Settings path not found: {options.settings_path}")
            return 2
        if options.settings_path.is_dir():
            log.error(f"Settings path must be a file: {options.settings_path}")
            return 2

    try:
        settings = load_settings(options.settings_path)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError.
        log.error(f"Invalid settings file {options.settings_path}: {exc}")
        return 2

    if options.log_level:
        settings.log_level = options.log_level
    if settings.log_level:
        log.set_level(settings.log_level)
    return run(options, settings)


if __name__ == "__main__":
    raise SystemExit(main())
