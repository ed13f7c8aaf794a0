"""Merge a default secretlint config with an external override config."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List

from core.regex_literal import combine_patterns


COMBINED_SUFFIX = " (Combined)"


def merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge overrides into a copy of base; overrides win."""
    merged = dict(base)
    merged.update(overrides)
    return merged


def _without_patterns(options: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in options.items() if key != "patterns"}


def merge_patterns(existing: List[Dict[str, Any]], incoming: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Merge incoming pattern records into existing ones, matched by name.

    Unknown names are appended. A known name with identical pattern text gets
    its other fields updated; a known name with different text is replaced by
    a combined entry whose regex matches either source pattern.

    Args:
        existing: Patterns already on the rule.
        incoming: Patterns from the external rule.

    Returns:
        New list of pattern records.
    """
    merged = list(existing)
    for pattern in incoming:
        index = next(
            (i for i, current in enumerate(merged) if current.get("name") == pattern.get("name")),
            None,
        )
        if index is None:
            merged.append(pattern)
            continue
        current = merged[index]
        if current.get("pattern") == pattern.get("pattern"):
            merged[index] = merge_dicts(current, pattern)
            continue
        combined = merge_dicts(current, pattern)
        combined["pattern"] = combine_patterns(current.get("pattern"), pattern.get("pattern"))
        combined["name"] = f"{current.get('name')}{COMBINED_SUFFIX}"
        merged[index] = combined
    return merged


def merge_options(existing: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    """Merge the options of two rules sharing an id."""
    existing_patterns = existing.get("patterns")
    incoming_patterns = incoming.get("patterns")
    if existing_patterns is not None and incoming_patterns is not None:
        merged = merge_dicts(_without_patterns(existing), _without_patterns(incoming))
        merged["patterns"] = merge_patterns(existing_patterns, incoming_patterns)
        return merged
    if existing_patterns is not None:
        return merge_dicts(existing, _without_patterns(incoming))
    return merge_dicts(existing, incoming)


def overlay_top_level(merged: Dict[str, Any], external_config: Dict[str, Any]) -> Dict[str, Any]:
    """Copy every non-rules top-level key of the external config into merged."""
    for key, value in external_config.items():
        if key != "rules":
            merged[key] = value
    return merged


def find_duplicate_rule_ids(rules: Iterable[Dict[str, Any]]) -> List[str]:
    """Return rule ids that appear more than once, in first-seen order."""
    seen: set[Any] = set()
    duplicates: List[str] = []
    for rule in rules:
        rule_id = rule.get("id")
        if rule_id in seen and rule_id not in duplicates:
            duplicates.append(rule_id)
        seen.add(rule_id)
    return duplicates


def merge_secretlint_config(default_config: Dict[str, Any], external_config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge an external secretlint config into the default one.

    Rules are matched by id. Rules only in the external config are appended;
    shared rules get their options merged, with pattern lists combined by
    pattern name. Top-level keys other than rules are overwritten by the
    external config. Neither input is modified and the result shares no
    objects with them.

    Args:
        default_config: Base config holding a rules list.
        external_config: Override config; its rules are optional.

    Returns:
        The merged config.
    """
    merged = copy.deepcopy(default_config)
    external = copy.deepcopy(external_config)

    external_rules = external.get("rules")
    if isinstance(external_rules, list) and external_rules:
        rules = merged["rules"]
        # Last occurrence wins when an id repeats.
        positions = {rule.get("id"): index for index, rule in enumerate(rules)}
        for rule in external_rules:
            index = positions.get(rule.get("id"))
            if index is None:
                rules.append(rule)
                continue
            options = rule.get("options")
            if options is None:
                continue
            current = rules[index]
            if current.get("options") is None:
                current["options"] = options
            else:
                current["options"] = merge_options(current["options"], options)

    return overlay_top_level(merged, external)
