"""Asset records and normalization of raw endpoint payloads."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = (
    "funding_rate",
    "annualized_return",
    "mark_price",
    "liquidity_usd",
    "day_volume",
    "premium",
)
NON_NEGATIVE_FIELDS = ("liquidity_usd", "day_volume")


@dataclass(frozen=True)
class AssetRecord:
    name: str
    funding_rate: float
    annualized_return: float
    mark_price: float
    liquidity_usd: float
    day_volume: float
    premium: float


def _as_finite(value: object) -> float | None:
    # bool is an int subclass; a JSON true/false is not a number here.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    out = float(value)
    if not math.isfinite(out):
        return None
    return out


def parse_asset(raw: object) -> AssetRecord | None:
    """Build an ``AssetRecord`` from one raw item, or ``None`` if it is unusable."""
    if not isinstance(raw, Mapping):
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    values: dict[str, float] = {}
    for key in NUMERIC_FIELDS:
        num = _as_finite(raw.get(key))
        if num is None:
            return None
        values[key] = num
    if any(values[key] < 0 for key in NON_NEGATIVE_FIELDS):
        return None
    return AssetRecord(name=name, **values)


def normalize_assets(raw_items: Iterable[object]) -> list[AssetRecord]:
    """Parse raw items, dropping invalid records and repeated names.

    The first occurrence of a name wins. Response order is preserved.
    """
    records: list[AssetRecord] = []
    seen: set[str] = set()
    dropped = 0
    for item in raw_items:
        record = parse_asset(item)
        if record is None or record.name in seen:
            dropped += 1
            logger.debug("Dropping asset record %r", item)
            continue
        seen.add(record.name)
        records.append(record)
    if dropped:
        logger.debug("Dropped %d invalid asset records", dropped)
    return records
