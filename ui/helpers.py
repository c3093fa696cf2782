"""UI formatting helpers for funding figures."""

from __future__ import annotations

import html

from core.classifier import is_highlighted, return_color, side
from core.models import AssetRecord


def format_usd(value: float, decimals: int = 2) -> str:
    """Compact dollar amount: ``$1.23M``, ``$4.50K`` or ``$12.00``."""
    v = float(value)
    if v >= 1_000_000:
        return f"${v / 1_000_000:.{decimals}f}M"
    if v >= 1_000:
        return f"${v / 1_000:.{decimals}f}K"
    return f"${v:.{decimals}f}"


def format_percentage(value: float) -> str:
    v = float(value)
    sign = "+" if v >= 0 else ""
    return f"{sign}{v:.2f}%"


def format_rate(fraction: float) -> str:
    """Funding rate or premium fraction as a percent with 4 decimals."""
    return f"{float(fraction) * 100:.4f}%"


def format_price(value: float) -> str:
    return f"${float(value):.4f}"


def trend_arrow(annualized_return: float) -> str:
    return "▲" if annualized_return > 0 else "▼"


def opportunity_text(asset: AssetRecord) -> str:
    if asset.annualized_return > 0:
        return (
            "Long positions earn funding at an annualized rate of "
            f"{format_percentage(asset.annualized_return)}."
        )
    return (
        "Short positions earn funding at an annualized rate of "
        f"{format_percentage(abs(asset.annualized_return))}."
    )


def tile_html(asset: AssetRecord) -> str:
    border = "white" if is_highlighted(asset.annualized_return) else "transparent"
    return (
        f"<div class='fh-tile' title='{side(asset.annualized_return)}' "
        f"style='background-color:{return_color(asset.annualized_return)}; border-color:{border};'>"
        f"<div class='fh-tile-name'>{html.escape(asset.name)}</div>"
        f"<div class='fh-tile-return'>{trend_arrow(asset.annualized_return)} "
        f"{format_percentage(asset.annualized_return)}</div>"
        f"<div class='fh-tile-liq'>{format_usd(asset.liquidity_usd)}</div>"
        f"</div>"
    )


def detail_header_html(asset: AssetRecord, badge_color: str) -> str:
    """Heading of the asset detail panel: escaped name plus a Long/Short badge."""
    return (
        f"<h3 style='margin:0;'>{html.escape(asset.name)} "
        f"<span style='font-size:0.8rem; padding:2px 10px; border-radius:999px; "
        f"background:{badge_color}; color:#0F172A;'>{side(asset.annualized_return)}</span></h3>"
        f"<div style='opacity:0.7;'>Perpetual futures funding details</div>"
    )
