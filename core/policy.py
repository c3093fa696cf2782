"""Centralized runtime policy constants."""

from __future__ import annotations

DATA_PATH = "/api/hyperliquid/data"
TRADE_URL_TEMPLATE = "https://app.hyperliquid.xyz/trade/{name}"

# User-facing error strings.
TRANSPORT_ERROR_MESSAGE = "Failed to fetch data from server"
APPLICATION_ERROR_FALLBACK = "Failed to fetch data"

USD_PER_MILLION = 1_000_000
DEFAULT_REFRESH_INTERVAL_SEC = 30.0
DEFAULT_MAX_LIQUIDITY_MILLIONS = 1000.0
LIQUIDITY_STEP_MILLIONS = 0.1


def trade_url(name: str) -> str:
    return TRADE_URL_TEMPLATE.format(name=name)
