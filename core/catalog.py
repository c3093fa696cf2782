"""Asset catalog snapshot and its success/failure transitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from core.models import AssetRecord


@dataclass(frozen=True)
class Catalog:
    assets: tuple[AssetRecord, ...] = ()
    last_updated_at: datetime | None = None
    error_message: str | None = None

    @property
    def has_snapshot(self) -> bool:
        return self.last_updated_at is not None

    def find(self, name: str) -> AssetRecord | None:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


def sort_assets(assets: Iterable[AssetRecord]) -> tuple[AssetRecord, ...]:
    # sorted() is stable, so ties keep response order.
    return tuple(sorted(assets, key=lambda a: abs(a.annualized_return), reverse=True))


def apply_success(
    catalog: Catalog, assets: Iterable[AssetRecord], now: datetime | None = None
) -> Catalog:
    """Replace the snapshot wholesale and clear any error."""
    return Catalog(
        assets=sort_assets(assets),
        last_updated_at=now or datetime.now(timezone.utc),
        error_message=None,
    )


def apply_failure(catalog: Catalog, message: str) -> Catalog:
    """Record a failed fetch while keeping whatever assets are already shown."""
    return replace(catalog, error_message=message)
