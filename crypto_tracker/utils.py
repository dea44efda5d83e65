"""
Utility functions for the Crypto Currency App
"""

from datetime import datetime
from typing import Optional

import pytz

from .config import DISPLAY_TZ


def format_usd(value: float, decimals: int = 0) -> str:
    """Format a USD amount with thousands separators: $1,234,567"""
    return f"${value:,.{decimals}f}"


def format_price(value: float) -> str:
    """Prices always show two decimals"""
    return format_usd(value, decimals=2)


def format_supply(value: Optional[float]) -> str:
    """Total supply, or N/A when the provider does not know it"""
    if value is None:
        return "N/A"
    return f"{value:,.0f}"


def format_compact_usd(value: float) -> str:
    """Format large USD amounts in readable form"""
    if value >= 1e12:
        return f"${value/1e12:.2f}T"
    elif value >= 1e9:
        return f"${value/1e9:.2f}B"
    elif value >= 1e6:
        return f"${value/1e6:.1f}M"
    elif value >= 1e3:
        return f"${value/1e3:.1f}K"
    else:
        return f"${value:.0f}"


def format_datetime_local(dt: Optional[datetime]) -> str:
    """Convert a datetime to the display timezone"""
    if dt is None:
        return "N/A"
    if dt.tzinfo is None:
        dt = pytz.UTC.localize(dt)
    return dt.astimezone(DISPLAY_TZ).strftime('%d/%m/%Y %H:%M')
