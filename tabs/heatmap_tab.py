from __future__ import annotations

from collections.abc import Sequence

import pandas as pd
import plotly.express as px

from core.classifier import BUCKET_COLORS, classify, return_color, side
from core.models import AssetRecord
from core.policy import USD_PER_MILLION, trade_url
from core.state import AssetSelected, DashboardState, SelectionCleared, ThresholdChanged
from ui.ctx import get_ctx, get_ctx_callable
from ui.helpers import (
    detail_header_html,
    format_percentage,
    format_price,
    format_rate,
    format_usd,
    opportunity_text,
    tile_html,
)
from ui.theme import legend_html

GRID_COLUMNS = 6
VIEW_MODES = ("Tiles", "Treemap", "Table")


def build_assets_frame(assets: Sequence[AssetRecord]) -> pd.DataFrame:
    rows = [
        {
            "Asset": a.name,
            "Side": side(a.annualized_return),
            "Annualized Return (%)": a.annualized_return,
            "Funding Rate (%)": a.funding_rate * 100,
            "Mark Price": a.mark_price,
            "Liquidity (USD)": a.liquidity_usd,
            "24h Volume (USD)": a.day_volume,
            "Premium (%)": a.premium * 100,
            "Bucket": classify(a.annualized_return).value,
        }
        for a in assets
    ]
    return pd.DataFrame(rows, columns=[
        "Asset", "Side", "Annualized Return (%)", "Funding Rate (%)", "Mark Price",
        "Liquidity (USD)", "24h Volume (USD)", "Premium (%)", "Bucket",
    ])


def build_treemap(assets: Sequence[AssetRecord], background: str):
    df = build_assets_frame(assets)
    color_map = {bucket.value: color for bucket, color in BUCKET_COLORS.items()}
    color_map["(?)"] = background
    fig = px.treemap(
        df,
        path=[px.Constant("Hyperliquid"), "Asset"],
        values="Liquidity (USD)",
        color="Bucket",
        color_discrete_map=color_map,
        custom_data=["Annualized Return (%)", "Liquidity (USD)", "Funding Rate (%)"],
    )
    fig.update_traces(
        hovertemplate=(
            "<b>%{label}</b><br>"
            "Annualized: %{customdata[0]:+.2f}%<br>"
            "Liquidity: $%{customdata[1]:,.0f}<br>"
            "Funding: %{customdata[2]:.4f}%<extra></extra>"
        ),
        texttemplate="<b>%{label}</b><br>%{customdata[0]:+.2f}%",
        textfont=dict(color="#0F172A"),
    )
    fig.update_layout(
        height=620,
        template="plotly_dark",
        margin=dict(l=5, r=5, t=30, b=5),
        paper_bgcolor=background,
    )
    return fig


def _return_cell_style(value: float) -> str:
    return f"background-color:{return_color(value)}; color:#0F172A; font-weight:600;"


def _refresh(st, scheduler, timeout: float) -> None:
    if scheduler.refresh_now() is None:
        return
    with st.spinner("Refreshing funding data..."):
        scheduler.wait(timeout=timeout)


def _render_header(st, state: DashboardState, scheduler, timeout: float, TEXT_MUTED: str) -> None:
    title_col, action_col = st.columns([4, 1])
    with title_col:
        st.markdown("<h1 class='title'>Hyperliquid Funding Tracker</h1>", unsafe_allow_html=True)
        st.markdown(
            "<p class='subtitle'>Real-time funding rates with annualized returns "
            f"&bull; Tracking {len(state.catalog.assets)} perpetual assets</p>",
            unsafe_allow_html=True,
        )
    with action_col:
        label = "Refreshing..." if state.loading else "Refresh"
        if st.button(label, key="fh_refresh", use_container_width=True):
            _refresh(st, scheduler, timeout)
        updated = scheduler.state.catalog.last_updated_at
        if updated is not None:
            st.markdown(
                f"<div style='color:{TEXT_MUTED}; font-size:0.8rem; text-align:right;'>"
                f"Last update: {updated.strftime('%H:%M:%S')} UTC</div>",
                unsafe_allow_html=True,
            )


def _render_filter(st, scheduler, step: float, _tip) -> None:
    state = scheduler.state
    threshold = state.threshold
    current = threshold.min_liquidity_millions
    # The stored minimum is kept even above a smaller new bound; widen the widget to hold it.
    slider_max = max(threshold.max_liquidity_bound_millions, current, step)

    st.markdown(
        f"<div class='panel-box'><b>{_tip('Minimum Liquidity (USD)', 'Open interest in USD. Assets below this value are hidden.')}</b> "
        f"&nbsp;<span style='color:#93C5FD;'>{format_usd(current * USD_PER_MILLION)}+</span></div>",
        unsafe_allow_html=True,
    )
    chosen = st.slider(
        "Minimum liquidity (millions USD)",
        min_value=0.0,
        max_value=float(slider_max),
        value=float(current),
        step=float(step),
        label_visibility="collapsed",
    )
    if chosen != current:
        state = scheduler.dispatch(ThresholdChanged(chosen))

    low, high = st.columns(2)
    low.caption("$0")
    high.markdown(
        f"<div style='text-align:right; font-size:0.8rem; opacity:0.7;'>"
        f"{format_usd(state.threshold.max_liquidity_bound_millions * USD_PER_MILLION)}</div>",
        unsafe_allow_html=True,
    )
    st.caption(f"Showing {len(state.visible_assets)} of {len(state.catalog.assets)} assets")


def _render_tiles(st, scheduler, assets: Sequence[AssetRecord]) -> None:
    for start in range(0, len(assets), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, asset in zip(cols, assets[start:start + GRID_COLUMNS]):
            with col:
                st.markdown(tile_html(asset), unsafe_allow_html=True)
                if st.button("Details", key=f"fh_select_{asset.name}", use_container_width=True):
                    scheduler.dispatch(AssetSelected(asset.name))


def _stat(label: str, value: str, color: str | None = None) -> str:
    style = f" style='color:{color};'" if color else ""
    return (
        f"<div class='fh-stat'><div class='fh-stat-label'>{label}</div>"
        f"<div class='fh-stat-value'{style}>{value}</div></div>"
    )


def _render_detail(st, scheduler, POSITIVE: str, NEGATIVE: str) -> None:
    asset = scheduler.state.selected_asset
    if asset is None:
        return
    is_long = asset.annualized_return > 0
    badge_color = POSITIVE if is_long else NEGATIVE

    with st.container(border=True):
        head, close = st.columns([5, 1])
        head.markdown(detail_header_html(asset, badge_color), unsafe_allow_html=True)
        if close.button("Close", key="fh_clear_selection", use_container_width=True):
            scheduler.dispatch(SelectionCleared())
            st.rerun()

        left, right = st.columns(2)
        left.markdown(_stat("Annualized Return", format_percentage(asset.annualized_return), badge_color), unsafe_allow_html=True)
        right.markdown(_stat("Hourly Funding Rate", format_rate(asset.funding_rate)), unsafe_allow_html=True)
        left.markdown(_stat("Mark Price", format_price(asset.mark_price)), unsafe_allow_html=True)
        right.markdown(_stat("Liquidity (OI)", format_usd(asset.liquidity_usd)), unsafe_allow_html=True)
        left.markdown(_stat("24h Volume", format_usd(asset.day_volume)), unsafe_allow_html=True)
        right.markdown(_stat("Premium", format_rate(asset.premium)), unsafe_allow_html=True)

        st.markdown(
            f"<div class='fh-opportunity'><b>Opportunity:</b> {opportunity_text(asset)}<br>"
            f"<span style='font-size:0.75rem; opacity:0.8;'>Funding is paid hourly based on the "
            f"difference between perpetual and spot prices.</span></div>",
            unsafe_allow_html=True,
        )
        st.link_button("Trade on Hyperliquid ↗", trade_url(asset.name), use_container_width=True)


def render(ctx: dict) -> None:
    """Funding heatmap with liquidity filter, legend and per-asset detail."""
    st = get_ctx(ctx, "st")
    TEXT_MUTED = get_ctx(ctx, "TEXT_MUTED")
    POSITIVE = get_ctx(ctx, "POSITIVE")
    NEGATIVE = get_ctx(ctx, "NEGATIVE")
    PRIMARY_BG = get_ctx(ctx, "PRIMARY_BG")
    _tip = get_ctx(ctx, "_tip")
    timeout = float(get_ctx(ctx, "REQUEST_TIMEOUT"))
    step = float(get_ctx(ctx, "LIQUIDITY_STEP"))
    scheduler = get_ctx_callable(ctx, "get_scheduler")()

    scheduler.tick()
    if scheduler.state.show_first_load:
        with st.spinner("Loading Hyperliquid data..."):
            scheduler.wait(timeout=timeout)
    else:
        scheduler.pump()

    state = scheduler.state
    if state.show_first_load:
        st.info("Loading Hyperliquid data...")
        return

    if state.show_fullscreen_error:
        with st.container(border=True):
            st.error(state.catalog.error_message)
            if st.button("Retry", key="fh_retry"):
                _refresh(st, scheduler, timeout)
                st.rerun()
        return

    _render_header(st, state, scheduler, timeout, TEXT_MUTED)
    state = scheduler.state
    if state.catalog.error_message:
        st.warning(f"{state.catalog.error_message}. Showing the last successful snapshot.")

    _render_filter(st, scheduler, step, _tip)
    detail_slot = st.container()

    mode = st.radio("View", VIEW_MODES, horizontal=True, key="fh_view_mode", label_visibility="collapsed")
    assets = scheduler.state.visible_assets
    if not assets:
        st.markdown(
            f"<div style='text-align:center; padding:48px 0; color:{TEXT_MUTED}; font-size:1.1rem;'>"
            f"No assets match the current liquidity filter</div>",
            unsafe_allow_html=True,
        )
    elif mode == "Treemap":
        st.plotly_chart(build_treemap(assets, PRIMARY_BG), use_container_width=True)
        names = [a.name for a in assets]

        def _on_pick() -> None:
            picked = st.session_state.get("fh_treemap_pick")
            if picked in names:
                scheduler.dispatch(AssetSelected(picked))

        st.selectbox("Asset details", ["Select an asset"] + names, key="fh_treemap_pick", on_change=_on_pick)
    elif mode == "Table":
        df = build_assets_frame(assets).drop(columns=["Bucket"])
        st.dataframe(
            df.style.format({
                "Annualized Return (%)": "{:+.2f}%",
                "Funding Rate (%)": "{:.4f}%",
                "Mark Price": "${:.4f}",
                "Liquidity (USD)": "${:,.0f}",
                "24h Volume (USD)": "${:,.0f}",
                "Premium (%)": "{:.4f}%",
            }).map(_return_cell_style, subset=["Annualized Return (%)"]),
            use_container_width=True,
            hide_index=True,
        )
    else:
        _render_tiles(st, scheduler, assets)

    with detail_slot:
        _render_detail(st, scheduler, POSITIVE, NEGATIVE)

    st.markdown(legend_html(), unsafe_allow_html=True)
