"""Global Streamlit CSS styles."""

from __future__ import annotations

from ui.theme import (
    ACCENT,
    CARD_BG,
    NEON_BLUE,
    NEON_PURPLE,
    PRIMARY_BG,
    TEXT_LIGHT,
    TEXT_MUTED,
    TILE_TEXT,
)


def app_css() -> str:
    return f"""
<style>
/* Global styles */
.stApp {{
    background: linear-gradient(135deg, {PRIMARY_BG}, {CARD_BG}, {PRIMARY_BG});
    color: {TEXT_LIGHT};
    font-family: 'Inter', 'Segoe UI', sans-serif;
}}

/* Gradient title */
h1.title {{
    font-size: 2.8rem;
    font-weight: 800;
    background: linear-gradient(90deg, {NEON_BLUE}, {NEON_PURPLE}, #EC4899);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
    margin-bottom: 0.4rem;
    letter-spacing: -0.5px;
}}
p.subtitle {{
    font-size: 1.05rem;
    color: {TEXT_MUTED};
    margin-top: 0;
    margin-bottom: 1.5rem;
}}

/* Panel boxes */
.panel-box {{
    background: rgba(30, 41, 59, 0.5);
    backdrop-filter: blur(16px);
    -webkit-backdrop-filter: blur(16px);
    border-radius: 14px;
    padding: 20px 24px;
    margin-bottom: 24px;
    border: 1px solid rgba(148, 163, 184, 0.2);
}}

/* Heatmap tiles */
.fh-tile {{
    border: 2px solid transparent;
    border-radius: 10px;
    padding: 14px 8px;
    text-align: center;
    color: {TILE_TEXT};
    transition: transform 0.2s, box-shadow 0.2s;
    margin-bottom: 4px;
}}
.fh-tile:hover {{
    transform: scale(1.05);
    box-shadow: 0 10px 24px rgba(0, 0, 0, 0.4);
}}
.fh-tile-name {{ font-weight: 700; font-size: 1.1rem; }}
.fh-tile-return {{ font-weight: 600; font-size: 0.85rem; margin-top: 4px; }}
.fh-tile-liq {{ font-size: 0.72rem; color: #334155; margin-top: 4px; }}

/* Legend */
.fh-legend {{
    display: flex;
    flex-wrap: wrap;
    gap: 16px;
    margin-top: 12px;
}}
.fh-legend-item {{
    display: flex;
    align-items: center;
    gap: 8px;
    color: {TEXT_MUTED};
    font-size: 0.85rem;
}}
.fh-swatch {{ width: 24px; height: 24px; border-radius: 4px; }}

/* Detail stat cards */
.fh-stat {{
    background: rgba(15, 23, 42, 0.5);
    border-radius: 10px;
    padding: 14px;
    margin-bottom: 10px;
}}
.fh-stat-label {{ color: {TEXT_MUTED}; font-size: 0.8rem; }}
.fh-stat-value {{ color: {ACCENT}; font-size: 1.4rem; font-weight: 700; margin-top: 4px; }}
.fh-opportunity {{
    background: rgba(23, 37, 84, 0.3);
    border: 1px solid #1E40AF;
    border-radius: 10px;
    padding: 14px;
    color: #93C5FD;
    font-size: 0.88rem;
    margin: 8px 0 12px 0;
}}

/* Pulse animation for live data */
.pulse {{
    animation: pulse 2s ease infinite;
}}
@keyframes pulse {{
    0%, 100% {{ opacity: 1; }}
    50% {{ opacity: 0.6; }}
}}

/* Tooltip question mark */
.tt {{
    display: inline-flex;
    align-items: center;
    justify-content: center;
    width: 16px; height: 16px;
    border-radius: 50%;
    background: rgba(96, 165, 250, 0.15);
    color: {NEON_BLUE};
    font-size: 0.65rem;
    font-weight: 700;
    cursor: help;
    position: relative;
    vertical-align: middle;
    margin-left: 4px;
}}
.tt .ttt {{
    visibility: hidden;
    opacity: 0;
    position: absolute;
    bottom: 125%;
    left: 50%;
    transform: translateX(-50%);
    background: {PRIMARY_BG};
    color: {TEXT_LIGHT};
    padding: 8px 12px;
    border-radius: 8px;
    font-size: 0.78rem;
    width: max-content;
    max-width: 280px;
    z-index: 999;
    pointer-events: none;
}}
.tt:hover .ttt {{
    visibility: visible;
    opacity: 1;
}}

@media (max-width: 900px) {{
    h1.title {{
        font-size: 2rem;
        line-height: 1.15;
    }}
    .panel-box {{
        padding: 16px;
        margin-bottom: 18px;
    }}
}}
</style>
"""
