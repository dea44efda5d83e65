"""
Header Component - title and light/dark toggle
"""

import streamlit as st

from ..config import PAGE_TITLE
from ..core.session import DashboardSession
from ..core.theme import ThemeMode

TOGGLE_ICONS = {
    ThemeMode.LIGHT: "🌙",
    ThemeMode.DARK: "☀️",
}


def render_header(session: DashboardSession):
    """Render the title bar with the theme toggle button"""
    col_title, col_toggle = st.columns([8, 1])

    with col_title:
        st.markdown(
            f'<div class="app-header"><h1>{PAGE_TITLE}</h1></div>',
            unsafe_allow_html=True
        )

    with col_toggle:
        st.button(
            TOGGLE_ICONS[session.theme.current()],
            key="theme_toggle",
            help=session.theme.toggle_label(),
            on_click=session.on_theme_toggle_requested,
        )


__all__ = ['render_header']
