"""Slash-delimited regex literals as used in secretlint pattern options."""

from __future__ import annotations

import re
from dataclasses import dataclass


DEFAULT_FLAGS = "gi"
# JavaScript RegExp flags; secretlint compiles patterns with the JS engine.
SUPPORTED_FLAGS = frozenset("dgimsuvy")

_LITERAL_RE = re.compile(r"^/(?P<body>.*?)(?:/(?P<flags>[A-Za-z]*))?\Z", re.DOTALL)


class UnsupportedFlagError(ValueError):
    """Raised when a regex literal carries flags the JS engine rejects."""


def union_flags(*flag_sets: str) -> str:
    """Union flag strings character-wise, keeping first-seen order."""
    seen: list[str] = []
    for flags in flag_sets:
        for flag in flags:
            if flag not in seen:
                seen.append(flag)
    return "".join(seen)


@dataclass(frozen=True)
class RegexLiteral:
    """A regex literal split into its body and flags."""

    body: str
    flags: str = DEFAULT_FLAGS

    @classmethod
    def parse(cls, text: str | None) -> "RegexLiteral":
        """Parse `/body/flags` text.

        Text without a leading slash is taken whole as the body. When no flags
        can be read (including an empty suffix such as `/abc/`) the default
        `gi` is used.

        Args:
            text: Literal text from a pattern record.

        Returns:
            Parsed RegexLiteral.

        Raises:
            UnsupportedFlagError: If the flag suffix holds unknown flags.
        """
        raw = "" if text is None else str(text)
        match = _LITERAL_RE.match(raw)
        if match is None:
            return cls(body=raw)
        body = match.group("body")
        flags = match.group("flags") or ""
        unknown = sorted(set(flags) - SUPPORTED_FLAGS)
        if unknown:
            raise UnsupportedFlagError(
                f"Unsupported regex flag(s) {''.join(unknown)!r} in pattern {raw!r}"
            )
        return cls(body=body, flags=union_flags(flags) or DEFAULT_FLAGS)

    def union(self, other: "RegexLiteral") -> "RegexLiteral":
        """Return a literal matching either this body or the other one."""
        return RegexLiteral(
            body=f"({self.body})|({other.body})",
            flags=union_flags(self.flags, other.flags),
        )

    def __str__(self) -> str:
        return f"/{self.body}/{self.flags}"


def combine_patterns(existing: str | None, incoming: str | None) -> str:
    """Combine two literal strings into `/(a)|(b)/flags` form."""
    return str(RegexLiteral.parse(existing).union(RegexLiteral.parse(incoming)))
