"""Merge pipeline: read the config documents, merge them and write the result."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from cli import MergeOptions
from config import MergeSettings
from core.documents import (
    DocumentError,
    InvalidJsonError,
    load_default_document,
    load_document,
    rule_count,
    write_document,
)
from core.regex_literal import UnsupportedFlagError
from core.rules_merge import find_duplicate_rule_ids, merge_secretlint_config, overlay_top_level
from logger import get_logger

log = get_logger()


@dataclass
class RunPaths:
    """Resolved input and output locations for a run."""

    default_path: Path
    external_path: Path | None
    output_path: Path
    indent: int


def resolve_paths(options: MergeOptions, settings: MergeSettings) -> RunPaths:
    """Resolve run paths, letting CLI options override settings.

    Args:
        options: Parsed CLI options.
        settings: Loaded settings.

    Returns:
        RunPaths for the run.
    """
    return RunPaths(
        default_path=options.default_path or Path(settings.default_path),
        external_path=options.external_path,
        output_path=options.output_path or Path(settings.output_path),
        indent=settings.indent,
    )


def _write_output(document: Dict[str, Any], paths: RunPaths, message: str) -> None:
    log.info(f"Writing config to: {paths.output_path}")
    write_document(paths.output_path, document, indent=paths.indent)
    log.info(message)
    log.info(f"Output file: {paths.output_path.resolve()}")


def _warn_duplicate_ids(document: Dict[str, Any], label: str) -> None:
    rules = document.get("rules")
    if not isinstance(rules, list):
        return
    for rule_id in find_duplicate_rule_ids(rule for rule in rules if isinstance(rule, dict)):
        log.warn(f"Duplicate rule id '{rule_id}' in {label} config; only the last occurrence is merged")


def _load_default(paths: RunPaths) -> Dict[str, Any]:
    log.info(f"Reading default config from: {paths.default_path}")
    return load_default_document(paths.default_path)


def merge_files(paths: RunPaths) -> int:
    """Merge the configured documents and write the output.

    Falls back to the default config when no external config is given, the
    external file is missing or blank, or it carries no rules.

    Args:
        paths: Resolved run paths.

    Returns:
        Process exit code.

    Raises:
        DocumentError: If a document cannot be read or parsed.
        UnsupportedFlagError: If a combined pattern carries unknown flags.
    """
    if not paths.default_path.exists():
        log.error(f"Default config file not found: {paths.default_path}")
        return 1

    if paths.external_path is None:
        log.info("No external config provided, using default config only")
        default_config = _load_default(paths)
        _write_output(default_config, paths, "Default config copied successfully!")
        log.info("\nSummary:")
        log.info(f"- Rules: {rule_count(default_config)}")
        return 0

    if not paths.external_path.exists():
        log.warn(f"External config file not found: {paths.external_path}")
        log.info("Using default config only")
        default_config = _load_default(paths)
        _write_output(default_config, paths, "Default config copied successfully!")
        return 0

    default_config = _load_default(paths)
    log.info(f"Reading external config from: {paths.external_path}")
    external_config = load_document(paths.external_path)

    if external_config is None:
        log.info("External config file is empty, using default config only")
        _write_output(default_config, paths, "Default config copied successfully!")
        return 0

    external_rules = external_config.get("rules")
    if not isinstance(external_rules, list) or not external_rules:
        log.info("External config has no rules, using default config with other properties merged")
        merged = overlay_top_level(copy.deepcopy(default_config), copy.deepcopy(external_config))
        _write_output(merged, paths, "Config merged successfully!")
        return 0

    _warn_duplicate_ids(default_config, "default")
    _warn_duplicate_ids(external_config, "external")

    log.info("Merging configurations...")
    merged = merge_secretlint_config(default_config, external_config)
    _write_output(merged, paths, "Merge completed successfully!")

    log.info("\nMerge Summary:")
    log.info(f"- Default rules: {rule_count(default_config)}")
    log.info(f"- External rules: {rule_count(external_config)}")
    log.info(f"- Merged rules: {rule_count(merged)}")
    return 0


def run(options: MergeOptions, settings: MergeSettings) -> int:
    """Run a merge and report failures.

    Args:
        options: Parsed CLI options.
        settings: Loaded settings.

    Returns:
        Process exit code.
    """
    paths = resolve_paths(options, settings)
    try:
        return merge_files(paths)
    except InvalidJsonError as exc:
        log.error(f"Error during merge: {exc}")
        log.error("Invalid JSON format in config file.")
        return 1
    except (DocumentError, UnsupportedFlagError) as exc:
        log.error(f"Error during merge: {exc}")
        return 1
