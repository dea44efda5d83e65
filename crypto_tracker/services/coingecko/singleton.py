"""
CoinGecko Service - Singleton management
"""

import threading
import logging
from typing import Optional

from .service import CoinGeckoService

logger = logging.getLogger(__name__)

# Module-level singleton
_coingecko_service_instance: Optional[CoinGeckoService] = None
_singleton_lock = threading.Lock()


def get_coingecko_service() -> CoinGeckoService:
    """
    Get singleton instance of CoinGeckoService.

    Thread-safe lazy initialization.
    """
    global _coingecko_service_instance

    if _coingecko_service_instance is None:
        with _singleton_lock:
            if _coingecko_service_instance is None:
                logger.info("🚀 Creating CoinGeckoService singleton...")
                _coingecko_service_instance = CoinGeckoService()

    return _coingecko_service_instance


def reset_coingecko_service():
    """Drop the singleton instance. Used by tests."""
    global _coingecko_service_instance

    with _singleton_lock:
        if _coingecko_service_instance is not None:
            logger.info("🔄 Resetting CoinGeckoService singleton...")
            _coingecko_service_instance = None
