"""Dashboard view state and its pure ``reduce(state, event)`` transitions.

Every change to the catalog, the liquidity threshold or the selection goes
through :func:`reduce`. Fetch outcomes carry the id of the request that
produced them; only the most recently started request may commit, and
nothing commits once the view is unmounted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Union

from core import selection as sel
from core.catalog import Catalog, apply_failure, apply_success
from core.models import AssetRecord
from core.policy import DEFAULT_MAX_LIQUIDITY_MILLIONS
from core.threshold import ThresholdState, rebound, set_min_liquidity, visible


@dataclass(frozen=True)
class FetchStarted:
    request_id: int


@dataclass(frozen=True)
class FetchSucceeded:
    request_id: int
    assets: tuple[AssetRecord, ...]
    received_at: datetime | None = None


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    message: str


@dataclass(frozen=True)
class ThresholdChanged:
    min_liquidity_millions: float


@dataclass(frozen=True)
class AssetSelected:
    name: str


@dataclass(frozen=True)
class SelectionCleared:
    pass


@dataclass(frozen=True)
class Unmounted:
    pass


Event = Union[
    FetchStarted, FetchSucceeded, FetchFailed, ThresholdChanged, AssetSelected, SelectionCleared, Unmounted
]


@dataclass(frozen=True)
class DashboardState:
    catalog: Catalog = field(default_factory=Catalog)
    threshold: ThresholdState = field(default_factory=ThresholdState)
    selection: sel.SelectionState = field(default_factory=sel.SelectionState)
    latest_request: int = 0
    loading: bool = False
    active: bool = True
    default_max_bound: float = DEFAULT_MAX_LIQUIDITY_MILLIONS

    @property
    def visible_assets(self) -> list[AssetRecord]:
        return visible(self.catalog, self.threshold)

    @property
    def selected_asset(self) -> AssetRecord | None:
        return sel.resolve(self.selection, self.catalog)

    @property
    def show_fullscreen_error(self) -> bool:
        return self.catalog.error_message is not None and not self.catalog.has_snapshot

    @property
    def show_first_load(self) -> bool:
        return self.loading and not self.catalog.assets and self.catalog.error_message is None


def initial_state(default_max_bound: float = DEFAULT_MAX_LIQUIDITY_MILLIONS) -> DashboardState:
    return DashboardState(
        threshold=ThresholdState(max_liquidity_bound_millions=float(default_max_bound)),
        default_max_bound=float(default_max_bound),
    )


def is_current(state: DashboardState, request_id: int) -> bool:
    return state.active and request_id == state.latest_request


def reduce(state: DashboardState, event: Event) -> DashboardState:
    if isinstance(event, FetchStarted):
        if not state.active or event.request_id <= state.latest_request:
            return state
        return replace(state, latest_request=event.request_id, loading=True)

    if isinstance(event, FetchSucceeded):
        if not is_current(state, event.request_id):
            return state
        catalog = apply_success(state.catalog, event.assets, now=event.received_at)
        return replace(
            state,
            catalog=catalog,
            threshold=rebound(state.threshold, catalog.assets, state.default_max_bound),
            selection=sel.prune(state.selection, catalog),
            loading=False,
        )

    if isinstance(event, FetchFailed):
        if not is_current(state, event.request_id):
            return state
        return replace(state, catalog=apply_failure(state.catalog, event.message), loading=False)

    if isinstance(event, ThresholdChanged):
        return replace(state, threshold=set_min_liquidity(state.threshold, event.min_liquidity_millions))

    if isinstance(event, AssetSelected):
        return replace(state, selection=sel.select(event.name))

    if isinstance(event, SelectionCleared):
        return replace(state, selection=sel.clear())

    if isinstance(event, Unmounted):
        return replace(state, active=False, loading=False)

    raise TypeError(f"Unknown dashboard event: {type(event).__name__}")
