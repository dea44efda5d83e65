"""
Light / Dark CSS for the Crypto Currency App
"""

import streamlit as st

from ..core.theme import PresentationScope, ThemeMode
from .colors import get_palette


def build_theme_css(mode: ThemeMode) -> str:
    """Return the page CSS for a theme mode"""
    p = get_palette(mode)
    return f"""
<style>
    .stApp {{
        background: {p['bg_gradient']};
        color: {p['text_primary']};
    }}

    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
        color: {p['text_primary']};
    }}

    /* Header bar */
    .app-header {{
        background: {p['bg_header']};
        padding: 24px 16px;
        border-radius: 12px;
        margin-bottom: 24px;
        text-align: center;
    }}
    .app-header h1 {{
        color: #ffffff !important;
        font-weight: 800;
        margin: 0;
    }}

    /* Theme toggle */
    .stButton > button {{
        background: {p['toggle_bg']};
        color: {p['toggle_fg']};
        border-radius: 9999px;
        border: none;
    }}

    /* Search box */
    .stTextInput input {{
        background: {p['bg_input']};
        color: {p['text_primary']};
        border: 1px solid {p['border_input']};
        border-radius: 6px;
    }}
    .stTextInput input:focus {{
        border-color: {p['accent_focus']};
        box-shadow: 0 0 0 3px {p['accent_focus']}55;
    }}

    /* Status messages */
    .status-loading {{
        color: {p['text_loading']};
        font-size: 1.25rem;
        text-align: center;
    }}
    .status-error {{
        color: {p['text_error']};
        font-size: 1.25rem;
        text-align: center;
    }}

    /* Metrics */
    [data-testid="stMetricValue"], [data-testid="stMetricLabel"] {{
        color: {p['text_primary']} !important;
    }}
</style>
"""


def active_mode(scope: PresentationScope) -> ThemeMode:
    """Read the theme flag from the presentation scope"""
    if scope.has_class(ThemeMode.DARK.css_class):
        return ThemeMode.DARK
    return ThemeMode.LIGHT


def inject_theme(scope: PresentationScope):
    """Inject the CSS matching the scope's theme flag into the Streamlit app"""
    st.markdown(build_theme_css(active_mode(scope)), unsafe_allow_html=True)
