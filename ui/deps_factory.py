"""Dependency factory for app-shell injection."""

from __future__ import annotations

from collections.abc import Mapping

from ui.app_shell import SHELL_KEYS
from ui.tab_registry import required_dep_keys

# Hooks the shell and tabs call on every rerun.
CALLABLE_KEYS = ("get_scheduler", "stop_scheduler", "_tip")


def build_app_deps(source: Mapping[str, object], **overrides: object) -> dict:
    """Collect the shell and tab dependencies, failing fast on missing keys or non-callable hooks."""
    merged = {**source, **overrides}
    required = set(SHELL_KEYS) | required_dep_keys()

    missing = sorted(required.difference(merged))
    if missing:
        raise KeyError(f"Missing app dependencies: {', '.join(missing)}")

    not_callable = [k for k in CALLABLE_KEYS if k in required and not callable(merged[k])]
    if not_callable:
        raise TypeError(f"App dependencies must be callable: {', '.join(not_callable)}")

    return {k: merged[k] for k in sorted(required)}
