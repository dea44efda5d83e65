"""
CoinGecko Service Module

Fetches the top 100 coins by market cap from the CoinGecko markets endpoint.

Usage:
    from crypto_tracker.services.coingecko import get_coingecko_service
    assets = get_coingecko_service().fetch_top_assets()
"""

# Models
from .models import Asset

# Errors
from .errors import FetchError, RequestFailed, DecodeFailed

# Service class
from .service import CoinGeckoService, decode_asset, decode_assets

# Singleton management
from .singleton import (
    get_coingecko_service,
    reset_coingecko_service,
)


__all__ = [
    # Models
    'Asset',

    # Errors
    'FetchError',
    'RequestFailed',
    'DecodeFailed',

    # Service
    'CoinGeckoService',
    'decode_asset',
    'decode_assets',

    # Singleton
    'get_coingecko_service',
    'reset_coingecko_service',
]
