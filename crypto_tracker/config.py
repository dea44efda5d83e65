"""
Configuration settings for the Crypto Currency App
"""

import os

import pytz

# ----------------------------------------------------------------------
# Load .env if present
# ----------------------------------------------------------------------
try:
    from dotenv import load_dotenv, find_dotenv

    _env_file = find_dotenv(usecwd=True)
    if _env_file:
        load_dotenv(_env_file, override=False)
except ModuleNotFoundError:
    pass

# ----------------------------------------------------------------------
# Market data provider (fixed, not configurable)
# ----------------------------------------------------------------------
MARKETS_URL = "https://api.coingecko.com/api/v3/coins/markets"
MARKETS_PARAMS = {
    "vs_currency": "usd",
    "order": "market_cap_desc",
    "per_page": 100,
    "page": 1,
    "sparkline": "false",
}

# Shown to the user for every fetch failure
FETCH_ERROR_MESSAGE = "An error occurred while fetching data. Please try again later."

# ----------------------------------------------------------------------
# Logging
# ----------------------------------------------------------------------
# MINIMAL / NORMAL / DETAILED
LOG_VERBOSITY = os.getenv("LOG_VERBOSITY", "NORMAL").upper()

# ----------------------------------------------------------------------
# Display
# ----------------------------------------------------------------------
DISPLAY_TZ = pytz.timezone(os.getenv("DISPLAY_TIMEZONE", "Europe/Rome"))

# Page config
PAGE_TITLE = "Crypto Currency App"
PAGE_ICON = "📈"
PAGE_DESCRIPTION = "Track cryptocurrency prices and market data"
SEARCH_PLACEHOLDER = "Search cryptocurrencies..."

# Market overview chart sizes
OVERVIEW_BAR_COUNT = 20
OVERVIEW_PIE_COUNT = 10
