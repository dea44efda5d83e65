"""
📈 Crypto Currency App

Top 100 cryptocurrencies by market cap from CoinGecko,
with a name search and a light/dark toggle.

Run: streamlit run crypto_tracker/app.py
"""

import asyncio
import logging

import streamlit as st

from crypto_tracker.config import LOG_VERBOSITY, PAGE_ICON, PAGE_TITLE, PAGE_DESCRIPTION
from crypto_tracker.logging_config import setup_logging
from crypto_tracker.core.session import DashboardSession
from crypto_tracker.styles import inject_theme
from crypto_tracker.components import render_header, render_top_coins_tab

SESSION_KEY = "dashboard_session"

logger = logging.getLogger(__name__)


def get_session() -> DashboardSession:
    """Return the dashboard session of this browser tab, creating it on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = DashboardSession()
        logger.info("🚀 Dashboard session created")
    return st.session_state[SESSION_KEY]


def main():
    setup_logging(LOG_VERBOSITY)

    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon=PAGE_ICON,
        layout="wide",
        menu_items={'About': PAGE_DESCRIPTION},
    )

    session = get_session()

    inject_theme(session.theme.scope)
    render_header(session)

    # Mount on the first run that gets this far; an interrupted run retries
    mount = None if session.mounted else (lambda: asyncio.run(session.mount()))
    render_top_coins_tab(session, mount=mount)


if __name__ == "__main__":
    main()
