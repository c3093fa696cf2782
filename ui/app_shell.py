"""Application shell: sidebar, tab routing, and UI context wiring."""

from __future__ import annotations

from streamlit_autorefresh import st_autorefresh

from ui.ctx import get_ctx, get_ctx_callable
from ui.tab_registry import TAB_TITLES, build_tab_specs

SHELL_KEYS = ("st", "ACCENT", "POSITIVE", "TEXT_MUTED", "API_BASE_URL", "UI_POLL_MS", "get_scheduler", "stop_scheduler")


def render_app(deps: dict) -> None:
    st = get_ctx(deps, "st", scope="app_shell.deps")
    ACCENT = get_ctx(deps, "ACCENT", scope="app_shell.deps")
    POSITIVE = get_ctx(deps, "POSITIVE", scope="app_shell.deps")
    TEXT_MUTED = get_ctx(deps, "TEXT_MUTED", scope="app_shell.deps")
    api_base_url = get_ctx(deps, "API_BASE_URL", scope="app_shell.deps")
    poll_ms = int(get_ctx(deps, "UI_POLL_MS", scope="app_shell.deps"))
    get_scheduler = get_ctx_callable(deps, "get_scheduler", scope="app_shell.deps")
    stop_scheduler = get_ctx_callable(deps, "stop_scheduler", scope="app_shell.deps")

    with st.sidebar:
        st.markdown(
            f"<div style='text-align:center; margin:8px 0;'>"
            f"<span style='color:{ACCENT}; font-size:1.1rem; font-weight:700;'>"
            f"Funding Heatmap</span></div>",
            unsafe_allow_html=True,
        )
        st.caption(f"Source: {api_base_url}")

        auto_refresh = st.checkbox("Auto-Refresh", value=True, key="auto_refresh")
        scheduler = get_scheduler()
        if auto_refresh and scheduler.running:
            # Reruns the script on a short cadence; the scheduler decides when a fetch is due.
            st_autorefresh(interval=poll_ms, key="funding_autorefresh")
            remaining = scheduler.seconds_until_next()
            st.markdown(
                f"<div class='pulse' style='text-align:center; color:{POSITIVE}; font-size:0.8rem;'>"
                f"LIVE &bull; Refreshing every {scheduler.period:.0f}s</div>",
                unsafe_allow_html=True,
            )
            if remaining is not None:
                st.markdown(
                    f"<div style='text-align:center; color:{TEXT_MUTED}; font-size:0.75rem;'>"
                    f"Next update in ~{remaining:.0f}s</div>",
                    unsafe_allow_html=True,
                )

        if st.button("Reset view", key="reset_view", help="Discard the current view and reload from scratch"):
            stop_scheduler()
            st.rerun()

    tabs = st.tabs(TAB_TITLES)

    tab_specs = build_tab_specs(deps)

    for idx, (renderer, extra_ctx) in enumerate(tab_specs):
        with tabs[idx]:
            render_fn = get_ctx_callable({"renderer": renderer}, "renderer", scope=f"tab:{TAB_TITLES[idx]}")
            render_fn({"st": st, **extra_ctx})
