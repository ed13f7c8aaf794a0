"""Reading and writing secretlint config documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


class DocumentError(RuntimeError):
    """Raised when a config document cannot be read or parsed."""


class InvalidJsonError(DocumentError):
    """Raised when a config document holds invalid JSON."""


def read_text(path: Path) -> str:
    """Read a document's raw text."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Unable to read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Unable to read {path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def parse_document(text: str, path: Path) -> Dict[str, Any]:
    """Parse document text into a mapping.

    Args:
        text: JSON text.
        path: Source path, used in error messages.

    Returns:
        Parsed document.

    Raises:
        InvalidJsonError: If the text is not valid JSON.
        DocumentError: If the top-level value is not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(f"{path}: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    if not isinstance(data, dict):
        raise DocumentError(f"{path}: top-level JSON value must be an object")
    return data


def load_document(path: Path) -> Dict[str, Any] | None:
    """Load a document, returning None when the file is blank."""
    text = read_text(path).strip()
    if not text:
        return None
    return parse_document(text, path)


def load_default_document(path: Path) -> Dict[str, Any]:
    """Load the default document, which must hold a rules list."""
    document = load_document(path)
    if document is None:
        raise DocumentError(f"Default config file is empty: {path}")
    if not isinstance(document.get("rules"), list):
        raise DocumentError(f"Default config must contain a 'rules' list: {path}")
    return document


def dump_document(document: Dict[str, Any], indent: int = 4) -> str:
    """Serialize a document as pretty-printed JSON."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def write_document(path: Path, document: Dict[str, Any], indent: int = 4) -> None:
    """Write a document to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(dump_document(document, indent=indent))


def rule_count(document: Dict[str, Any] | None) -> int:
    """Return the number of rules in a document."""
    if not document:
        return 0
    rules = document.get("rules")
    return len(rules) if isinstance(rules, list) else 0
