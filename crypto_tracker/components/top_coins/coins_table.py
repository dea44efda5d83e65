"""
Top 100 Coins Table Component.

Displays:
- Summary metrics
- Market overview chart
- Searchable coins table
"""

import streamlit as st
import streamlit.components.v1 as components

from ...charts import assets_to_frame, create_market_overview_chart
from ...config import SEARCH_PLACEHOLDER
from ...core.session import DashboardSession, ViewSnapshot
from ...utils import format_compact_usd, format_datetime_local

from .styles import render_crypto_table_html

SEARCH_KEY = "search_query"

ROW_HEIGHT = 57
MAX_TABLE_HEIGHT = 650


def render_search_box(session: DashboardSession):
    """Search input wired to the session's query"""
    def _on_change():
        session.on_search_query_changed(st.session_state[SEARCH_KEY])

    st.text_input(
        "Search cryptocurrencies",
        key=SEARCH_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
        on_change=_on_change,
    )


def render_coins_section(snapshot: ViewSnapshot):
    """Render metrics, chart and table for a READY snapshot."""
    visible = snapshot.visible_assets
    df_display = assets_to_frame(visible)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("🪙 Coins", f"{len(visible)} / {len(snapshot.assets)}")
    col2.metric("💰 Market Cap", format_compact_usd(df_display['market_cap'].sum()))
    col3.metric("📊 Volume 24h", format_compact_usd(df_display['volume_24h'].sum()))
    col4.metric("🥇 #1", visible[0].display_symbol if visible else "N/A")

    fig_overview = create_market_overview_chart(visible, snapshot.theme)
    if fig_overview:
        st.plotly_chart(fig_overview, use_container_width=True)

    table_html = render_crypto_table_html(df_display, snapshot.theme)
    height = min(MAX_TABLE_HEIGHT, ROW_HEIGHT * (max(len(visible), 1) + 1) + 20)
    components.html(table_html, height=height, scrolling=True)

    if snapshot.fetched_at:
        st.caption(f"📅 Data updated: {format_datetime_local(snapshot.fetched_at)}")


__all__ = ['render_search_box', 'render_coins_section']
