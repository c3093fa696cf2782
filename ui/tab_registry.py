"""Registry for tab renderers and their dependency keys."""

from __future__ import annotations

from ui.ctx import get_ctx, require_keys

from tabs.guide_tab import render as render_guide_tab_ui
from tabs.heatmap_tab import render as render_heatmap_tab_ui


TAB_TITLES = ["Funding Heatmap", "Guide"]


_TAB_DEPS = [
    (
        render_heatmap_tab_ui,
        [
            "TEXT_MUTED", "POSITIVE", "NEGATIVE", "PRIMARY_BG", "_tip",
            "get_scheduler", "REQUEST_TIMEOUT", "LIQUIDITY_STEP",
        ],
    ),
    (render_guide_tab_ui, []),
]


def build_tab_specs(deps: dict) -> list[tuple]:
    """Build render specs as (renderer, context) from dependency keys."""
    require_keys(deps, required_dep_keys(), scope="tab_registry.deps")
    specs = []
    for renderer, keys in _TAB_DEPS:
        specs.append((renderer, {k: get_ctx(deps, k, scope="tab_registry.deps") for k in keys}))
    return specs


def required_dep_keys() -> set[str]:
    """Return all dependency keys needed by the tab registry."""
    keys: set[str] = set()
    for _, dep_keys in _TAB_DEPS:
        keys.update(dep_keys)
    return keys
