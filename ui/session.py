"""Per-session ownership of the dashboard's refresh scheduler."""

from __future__ import annotations

from collections.abc import Callable

from core.scheduler import RefreshScheduler

SCHEDULER_KEY = "funding_scheduler"


def mount_scheduler(st, factory: Callable[[], RefreshScheduler], key: str = SCHEDULER_KEY) -> RefreshScheduler:
    """Return this session's scheduler, creating and starting it on first use."""
    scheduler = st.session_state.get(key)
    if scheduler is None:
        scheduler = factory()
        st.session_state[key] = scheduler
        scheduler.start()
    return scheduler


def unmount_scheduler(st, key: str = SCHEDULER_KEY) -> bool:
    """Stop and forget the session's scheduler. Returns False if none was mounted."""
    scheduler = st.session_state.get(key)
    if scheduler is None:
        return False
    scheduler.stop()
    del st.session_state[key]
    return True
