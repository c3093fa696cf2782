"""Liquidity threshold filter."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from core.catalog import Catalog
from core.models import AssetRecord
from core.policy import DEFAULT_MAX_LIQUIDITY_MILLIONS, USD_PER_MILLION


@dataclass(frozen=True)
class ThresholdState:
    min_liquidity_millions: float = 0.0
    max_liquidity_bound_millions: float = DEFAULT_MAX_LIQUIDITY_MILLIONS


def max_liquidity_bound(
    assets: Sequence[AssetRecord], default: float = DEFAULT_MAX_LIQUIDITY_MILLIONS
) -> float:
    """Slider upper bound in millions: ceil(max liquidity), or ``default`` when empty."""
    if not assets:
        return float(default)
    peak = max(a.liquidity_usd for a in assets)
    return float(math.ceil(peak / USD_PER_MILLION))


def rebound(
    threshold: ThresholdState, assets: Sequence[AssetRecord], default: float = DEFAULT_MAX_LIQUIDITY_MILLIONS
) -> ThresholdState:
    # The user's minimum is never clamped to the new bound.
    return replace(threshold, max_liquidity_bound_millions=max_liquidity_bound(assets, default))


def set_min_liquidity(threshold: ThresholdState, value: float) -> ThresholdState:
    return replace(threshold, min_liquidity_millions=max(0.0, float(value)))


def min_liquidity_usd(threshold: ThresholdState) -> float:
    return threshold.min_liquidity_millions * USD_PER_MILLION


def visible(catalog: Catalog, threshold: ThresholdState) -> list[AssetRecord]:
    cutoff = min_liquidity_usd(threshold)
    return [a for a in catalog.assets if a.liquidity_usd >= cutoff]
