"""Shared context helpers for tab render functions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping


def require_keys(ctx: Mapping[str, object], keys: Iterable[str], *, scope: str = "ctx") -> None:
    missing = sorted(k for k in keys if k not in ctx)
    if missing:
        raise KeyError(f"Missing keys in {scope}: {', '.join(missing)}")


def get_ctx(ctx: Mapping[str, object], key: str, *, scope: str = "ctx") -> object:
    try:
        return ctx[key]
    except KeyError:
        raise KeyError(f"Missing key '{key}' in {scope}") from None


def get_ctx_callable(ctx: Mapping[str, object], key: str, *, scope: str = "ctx") -> Callable:
    value = get_ctx(ctx, key, scope=scope)
    if not callable(value):
        raise TypeError(f"Key '{key}' in {scope} must be callable")
    return value
