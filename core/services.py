"""Application service layer: wires settings to the refresh pipeline."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from core.client import fetch_assets
from core.models import AssetRecord
from core.scheduler import RefreshScheduler
from core.settings import Settings
from core.state import initial_state


def make_fetcher(settings: Settings) -> Callable[[], list[AssetRecord]]:
    return partial(fetch_assets, settings.api_base_url, timeout=settings.request_timeout_sec)


def build_scheduler(settings: Settings, **overrides) -> RefreshScheduler:
    """Create a scheduler with a fresh view state. ``overrides`` go to the constructor."""
    kwargs = {
        "state": initial_state(settings.default_max_liquidity_millions),
        "period": settings.refresh_interval_sec,
    }
    kwargs.update(overrides)
    return RefreshScheduler(make_fetcher(settings), **kwargs)
