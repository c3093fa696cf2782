from __future__ import annotations

import unittest
from datetime import datetime, timezone

from core.state import (
    AssetSelected,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    SelectionCleared,
    ThresholdChanged,
    Unmounted,
    initial_state,
    reduce,
)
from tests._fixtures import make_asset

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _loaded(*assets):
    state = reduce(initial_state(), FetchStarted(1))
    return reduce(state, FetchSucceeded(1, tuple(assets), NOW))


class ReducerFetchTests(unittest.TestCase):
    def test_initial_state(self) -> None:
        state = initial_state(250)
        self.assertEqual(state.catalog.assets, ())
        self.assertIsNone(state.catalog.last_updated_at)
        self.assertEqual(state.threshold.max_liquidity_bound_millions, 250.0)
        self.assertFalse(state.loading)

    def test_success_round_trip(self) -> None:
        state = reduce(initial_state(), FetchStarted(1))
        self.assertTrue(state.loading)
        self.assertTrue(state.show_first_load)
        assets = (make_asset("A", 5, 2_000_000), make_asset("B", -70, 9_100_000), make_asset("C", 22, 500_000))
        state = reduce(state, FetchSucceeded(1, assets, NOW))
        self.assertEqual([a.name for a in state.catalog.assets], ["B", "C", "A"])
        self.assertIsNone(state.catalog.error_message)
        self.assertEqual(state.catalog.last_updated_at, NOW)
        self.assertEqual(state.threshold.max_liquidity_bound_millions, 10.0)
        self.assertFalse(state.loading)

    def test_application_failure_keeps_assets(self) -> None:
        state = _loaded(make_asset("BTC", 10))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchFailed(2, "rate limited"))
        self.assertEqual(state.catalog.error_message, "rate limited")
        self.assertEqual([a.name for a in state.catalog.assets], ["BTC"])
        self.assertFalse(state.show_fullscreen_error)

    def test_first_load_failure_is_fullscreen(self) -> None:
        state = reduce(initial_state(), FetchStarted(1))
        state = reduce(state, FetchFailed(1, "Failed to fetch data from server"))
        self.assertTrue(state.show_fullscreen_error)
        self.assertFalse(state.show_first_load)

    def test_error_cleared_on_next_success(self) -> None:
        state = reduce(initial_state(), FetchStarted(1))
        state = reduce(state, FetchFailed(1, "down"))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchSucceeded(2, (make_asset("ETH", 3),), NOW))
        self.assertIsNone(state.catalog.error_message)
        self.assertFalse(state.show_fullscreen_error)

    def test_later_initiation_wins_regardless_of_arrival(self) -> None:
        state = initial_state()
        state = reduce(state, FetchStarted(1))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchSucceeded(2, (make_asset("B", 1),), NOW))
        state = reduce(state, FetchSucceeded(1, (make_asset("A", 1),), NOW))
        self.assertEqual([a.name for a in state.catalog.assets], ["B"])

    def test_superseded_result_arriving_first_is_discarded(self) -> None:
        state = initial_state()
        state = reduce(state, FetchStarted(1))
        state = reduce(state, FetchStarted(2))
        after = reduce(state, FetchSucceeded(1, (make_asset("A", 1),), NOW))
        self.assertIs(after, state)
        self.assertTrue(after.loading)

    def test_stale_failure_does_not_set_error(self) -> None:
        state = _loaded(make_asset("BTC", 1))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchStarted(3))
        state = reduce(state, FetchFailed(2, "old failure"))
        self.assertIsNone(state.catalog.error_message)

    def test_request_ids_must_increase(self) -> None:
        state = reduce(initial_state(), FetchStarted(5))
        self.assertIs(reduce(state, FetchStarted(4)), state)

    def test_unmounted_ignores_results(self) -> None:
        state = reduce(initial_state(), FetchStarted(1))
        state = reduce(state, Unmounted())
        self.assertFalse(state.active)
        after = reduce(state, FetchSucceeded(1, (make_asset("A", 1),), NOW))
        self.assertEqual(after.catalog.assets, ())
        self.assertIs(reduce(after, FetchStarted(2)), after)


class ReducerUserEventTests(unittest.TestCase):
    def test_threshold_preserved_across_refresh(self) -> None:
        state = _loaded(make_asset("BTC", 60, 40_000_000), make_asset("ETH", 5, 20_000_000))
        state = reduce(state, ThresholdChanged(15.0))
        self.assertEqual([a.name for a in state.visible_assets], ["BTC", "ETH"])
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchSucceeded(2, (make_asset("BTC", 60, 11_700_000),), NOW))
        self.assertEqual(state.threshold.max_liquidity_bound_millions, 12.0)
        self.assertEqual(state.threshold.min_liquidity_millions, 15.0)
        self.assertEqual(state.visible_assets, [])

    def test_user_events_use_committed_catalog_while_loading(self) -> None:
        state = _loaded(make_asset("BTC", 60, 5_000_000), make_asset("ETH", 5, 1_000_000))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, ThresholdChanged(2.0))
        self.assertEqual([a.name for a in state.visible_assets], ["BTC"])
        state = reduce(state, AssetSelected("ETH"))
        self.assertEqual(state.selected_asset.name, "ETH")

    def test_selection_follows_latest_values(self) -> None:
        state = reduce(_loaded(make_asset("BTC", 10)), AssetSelected("BTC"))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchSucceeded(2, (make_asset("BTC", 33),), NOW))
        self.assertEqual(state.selected_asset.annualized_return, 33)

    def test_selection_auto_dismissed_when_asset_disappears(self) -> None:
        state = reduce(_loaded(make_asset("BTC", 10), make_asset("LUNA", 90)), AssetSelected("LUNA"))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchSucceeded(2, (make_asset("BTC", 10),), NOW))
        self.assertFalse(state.selection.is_open)
        self.assertIsNone(state.selected_asset)

    def test_selection_kept_on_failed_refresh(self) -> None:
        state = reduce(_loaded(make_asset("BTC", 10)), AssetSelected("BTC"))
        state = reduce(state, FetchStarted(2))
        state = reduce(state, FetchFailed(2, "down"))
        self.assertEqual(state.selected_asset.name, "BTC")

    def test_clear_selection(self) -> None:
        state = reduce(_loaded(make_asset("BTC", 10)), AssetSelected("BTC"))
        state = reduce(state, SelectionCleared())
        self.assertIsNone(state.selected_asset)

    def test_unknown_event_rejected(self) -> None:
        with self.assertRaises(TypeError):
            reduce(initial_state(), object())


if __name__ == "__main__":
    unittest.main()
