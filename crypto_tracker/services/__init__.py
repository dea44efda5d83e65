"""
📦 Services Package

External API integrations for the dashboard:
- CoinGeckoService: Top 100 coins market snapshot
"""

from .coingecko import (
    CoinGeckoService,
    get_coingecko_service,
    reset_coingecko_service,
)

__all__ = [
    'CoinGeckoService',
    'get_coingecko_service',
    'reset_coingecko_service',
]
