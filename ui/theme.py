"""Theme constants and small HTML composition helpers."""

from __future__ import annotations

from core.classifier import legend_entries

PRIMARY_BG = "#0F172A"
CARD_BG = "#1E293B"
ACCENT = "#FFFFFF"
POSITIVE = "#22C55E"
NEGATIVE = "#EF4444"
TEXT_LIGHT = "#E5E7EB"
TEXT_MUTED = "#94A3B8"
TILE_TEXT = "#0F172A"
NEON_BLUE = "#60A5FA"
NEON_PURPLE = "#A855F7"


def tip(label: str, tooltip: str) -> str:
    """Return HTML for a label with a hover tooltip question mark."""
    return f"{label}<span class='tt'>?<span class='ttt'>{tooltip}</span></span>"


def legend_html() -> str:
    """Legend swatches, built from the same buckets the grid uses."""
    items = "".join(
        f"<div class='fh-legend-item'>"
        f"<div class='fh-swatch' style='background-color:{color};'></div>"
        f"<span>{label.replace('<', '&lt;').replace('>', '&gt;')}</span>"
        f"</div>"
        for color, label in legend_entries()
    )
    return (
        f"<div class='panel-box'>"
        f"<b style='color:{TEXT_LIGHT}; font-size:0.9rem;'>Color Legend (Annualized Return)</b>"
        f"<div class='fh-legend'>{items}</div>"
        f"</div>"
    )
