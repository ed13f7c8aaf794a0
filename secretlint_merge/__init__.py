"""secretlint config merger."""

from core.rules_merge import merge_secretlint_config

__all__ = ["merge_secretlint_config"]
