"""Streamlit entry point for the Hyperliquid funding heatmap."""

from __future__ import annotations

import logging
from functools import partial

import streamlit as st

from core.logging_config import setup_logging
from core.services import build_scheduler
from core.settings import get_settings
from ui.app_shell import render_app
from ui.deps_factory import build_app_deps
from ui.session import mount_scheduler, unmount_scheduler
from ui.styles import app_css
from ui import theme

UI_POLL_MS = 5_000

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _settings():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Funding heatmap using %s", settings.api_base_url)
    return settings


def main() -> None:
    st.set_page_config(
        page_title="Hyperliquid Funding Tracker",
        page_icon="📊",
        layout="wide",
    )
    st.markdown(app_css(), unsafe_allow_html=True)

    settings = _settings()
    source = {
        "st": st,
        "ACCENT": theme.ACCENT,
        "POSITIVE": theme.POSITIVE,
        "NEGATIVE": theme.NEGATIVE,
        "TEXT_MUTED": theme.TEXT_MUTED,
        "PRIMARY_BG": theme.PRIMARY_BG,
        "_tip": theme.tip,
        "API_BASE_URL": settings.api_base_url,
        "UI_POLL_MS": min(UI_POLL_MS, int(settings.refresh_interval_sec * 1000)),
        "REQUEST_TIMEOUT": settings.request_timeout_sec,
        "LIQUIDITY_STEP": settings.liquidity_step_millions,
        "get_scheduler": partial(mount_scheduler, st, partial(build_scheduler, settings)),
        "stop_scheduler": partial(unmount_scheduler, st),
    }
    render_app(build_app_deps(source))


main()
