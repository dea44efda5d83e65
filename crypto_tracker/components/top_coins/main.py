"""
Top 100 Coins - Main Entry Point.

Branches on the lifecycle state only: an empty READY list is still READY.
"""

from html import escape
from typing import Callable, Optional

import streamlit as st

from ...core.lifecycle import LifecycleState
from ...core.session import DashboardSession

from .coins_table import render_coins_section, render_search_box

LOADING_HTML = '<p class="status-loading">Loading...</p>'


def render_top_coins_tab(session: DashboardSession, mount: Optional[Callable[[], object]] = None):
    """
    Main render function for the coins view.

    Args:
        session: Dashboard session of this browser tab
        mount: First run only. Called while "Loading..." is on screen.
    """
    render_search_box(session)

    if mount is not None:
        placeholder = st.empty()
        placeholder.markdown(LOADING_HTML, unsafe_allow_html=True)
        mount()
        placeholder.empty()

    snapshot = session.snapshot()

    if snapshot.lifecycle_state is LifecycleState.LOADING:
        st.markdown(LOADING_HTML, unsafe_allow_html=True)
    elif snapshot.lifecycle_state is LifecycleState.FAILED:
        st.markdown(f'<p class="status-error">{escape(snapshot.error_message or "")}</p>', unsafe_allow_html=True)
    else:
        render_coins_section(snapshot)


__all__ = ['render_top_coins_tab']
