"""Periodic and manual refresh of the dashboard catalog.

Fetches run on worker threads and only hand their outcome to a queue.
``pump()`` applies queued outcomes on the caller's thread through
``core.state.reduce``, so the view's state is only ever touched by the view.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone

from core.errors import FundingDataError, user_message
from core.models import AssetRecord
from core.policy import DEFAULT_REFRESH_INTERVAL_SEC, TRANSPORT_ERROR_MESSAGE
from core.state import (
    DashboardState,
    Event,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    Unmounted,
    initial_state,
    reduce,
)

logger = logging.getLogger(__name__)


class CancelToken:
    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class RefreshScheduler:
    def __init__(
        self,
        fetch_fn: Callable[[], Sequence[AssetRecord]],
        state: DashboardState | None = None,
        *,
        period: float = DEFAULT_REFRESH_INTERVAL_SEC,
        clock: Callable[[], float] = time.monotonic,
        executor: Executor | None = None,
    ) -> None:
        if period <= 0:
            raise ValueError("Refresh period must be positive")
        self._fetch_fn = fetch_fn
        self._state = state if state is not None else initial_state()
        self._period = float(period)
        self._clock = clock
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="funding-fetch")
        self._outcomes: queue.Queue[Event] = queue.Queue()
        self._token = CancelToken()
        self._running = False
        self._next_id = 0
        self._next_due: float | None = None
        self._futures: dict[int, Future] = {}

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def running(self) -> bool:
        return self._running and not self._token.cancelled

    @property
    def period(self) -> float:
        return self._period

    def seconds_until_next(self) -> float | None:
        if not self.running or self._next_due is None:
            return None
        return max(0.0, self._next_due - self._clock())

    def dispatch(self, event: Event) -> DashboardState:
        """Apply a user event (threshold, selection) to the committed state."""
        self._state = reduce(self._state, event)
        return self._state

    def start(self) -> None:
        if self._running or self._token.cancelled:
            return
        self._running = True
        self._next_due = self._clock() + self._period
        logger.info("Refresh scheduler started (every %.0fs)", self._period)
        self._initiate()

    def stop(self) -> None:
        """Cancel the timer and make every outstanding fetch a no-op."""
        if self._token.cancelled:
            return
        self._token.cancel()
        self._running = False
        self._next_due = None
        self._state = reduce(self._state, Unmounted())
        for future in self._futures.values():
            future.cancel()
        self._futures.clear()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
        logger.info("Refresh scheduler stopped")

    def refresh_now(self) -> int | None:
        """Start an out-of-band fetch without moving the timer's schedule."""
        if not self.running:
            return None
        return self._initiate()

    def tick(self) -> bool:
        """Start a fetch if the period has elapsed. Missed periods are skipped."""
        if not self.running or self._next_due is None:
            return False
        now = self._clock()
        if now < self._next_due:
            return False
        while self._next_due <= now:
            self._next_due += self._period
        self._initiate()
        return True

    def pump(self) -> int:
        """Apply queued fetch outcomes. Returns how many changed the state."""
        applied = 0
        while True:
            try:
                outcome = self._outcomes.get_nowait()
            except queue.Empty:
                break
            if self._token.cancelled:
                continue
            before = self._state
            self._state = reduce(self._state, outcome)
            if self._state is before:
                logger.debug("Discarded result of superseded request %d", outcome.request_id)
            else:
                applied += 1
        return applied

    def wait(self, timeout: float | None = None) -> int:
        """Block until the latest request settles, then ``pump()``."""
        future = self._futures.get(self._next_id)
        if future is not None:
            wait([future], timeout=timeout)
        return self.pump()

    def _initiate(self) -> int:
        self._next_id += 1
        request_id = self._next_id
        self._state = reduce(self._state, FetchStarted(request_id))
        # Only the newest request can commit; older futures are no longer needed.
        self._futures = {rid: f for rid, f in self._futures.items() if not f.done()}
        self._futures[request_id] = self._executor.submit(self._run_fetch, request_id, self._token)
        logger.debug("Started fetch request %d", request_id)
        return request_id

    def _run_fetch(self, request_id: int, token: CancelToken) -> None:
        outcome: Event
        try:
            assets = self._fetch_fn()
            outcome = FetchSucceeded(request_id, tuple(assets), datetime.now(timezone.utc))
        except FundingDataError as exc:
            logger.warning("Fetch request %d failed: %s", request_id, exc)
            outcome = FetchFailed(request_id, user_message(exc))
        except Exception:
            logger.exception("Unexpected error in fetch request %d", request_id)
            outcome = FetchFailed(request_id, TRANSPORT_ERROR_MESSAGE)
        if token.cancelled:
            logger.debug("Dropping result of request %d after stop", request_id)
            return
        self._outcomes.put(outcome)
