"""Beginner-friendly guide to reading the funding heatmap."""

from __future__ import annotations

from typing import Iterable

from ui.ctx import get_ctx


SECTION_STYLE = {
    "core": "border-left:4px solid #22C55E; background:rgba(34,197,94,0.06);",
    "risk": "border-left:4px solid #FFD166; background:rgba(255,209,102,0.08);",
    "info": "border-left:4px solid #60A5FA; background:rgba(96,165,250,0.08);",
}


def _panel(st, title: str, body: str, tone: str = "core") -> None:
    style = SECTION_STYLE.get(tone, SECTION_STYLE["core"])
    st.markdown(
        f"""
        <div class='panel-box' style='{style}'>
          <b style='color:#E5E7EB; font-size:1.15rem;'>{title}</b>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(body)


def _render_sections(st, sections: Iterable[tuple[str, str, str]]) -> None:
    for title, body, tone in sections:
        _panel(st, title, body, tone)


def guide_sections() -> list[tuple[str, str, str]]:
    return [
        (
            "1) What this dashboard shows",
            """
Every tile is one Hyperliquid perpetual. The number on the tile is the current
funding rate **extrapolated to a year** (annualized return).
- Positive: longs are paid, so the opportunity is on the **Long** side
- Negative: shorts are paid, so the opportunity is on the **Short** side

Data refreshes automatically every 30 seconds; use **Refresh** for an immediate update.
            """,
            "info",
        ),
        (
            "2) Colors",
            """
Tiles are colored by the size of the annualized return:
- Above 50%: strongest green (long) or red (short)
- 20-50%: medium shade, with a white border
- 10-20% and 5-10%: lighter shades
- 5% or less: grey, regardless of side

An exact 50% is in the 20-50% band; each band starts just above its lower edge.
            """,
            "core",
        ),
        (
            "3) Liquidity filter",
            """
The slider sets a minimum open interest in millions of USD. Assets below it are hidden.
The slider's range follows the largest asset in the latest snapshot, but your chosen
value is kept across refreshes, so a high setting can hide every asset.
            """,
            "core",
        ),
        (
            "4) Risks",
            """
Funding changes every hour and can flip sign. A high annualized figure reflects the
current rate only; it is not a forecast. Thin markets can move sharply against a position.
            """,
            "risk",
        ),
    ]


def render(ctx: dict) -> None:
    st = get_ctx(ctx, "st")

    st.markdown("## Funding Guide")
    st.caption("How to read the heatmap, the colors and the liquidity filter.")
    _render_sections(st, guide_sections())
