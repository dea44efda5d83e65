"""
CoinGecko Service - Main Service Class
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, List, Optional

import requests

from ...config import MARKETS_URL, MARKETS_PARAMS
from .errors import DecodeFailed, RequestFailed
from .models import Asset, REQUIRED_FIELDS

logger = logging.getLogger(__name__)


def _require(record: Dict[str, Any], key: str) -> Any:
    value = record.get(key)
    if value is None:
        raise DecodeFailed(f"Market record is missing '{key}'")
    return value


def _as_text(record: Dict[str, Any], key: str) -> str:
    value = _require(record, key)
    if not isinstance(value, str):
        raise DecodeFailed(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _as_quantity(value: Any, key: str) -> float:
    # bool is an int subclass; a flag is never a quantity
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DecodeFailed(f"'{key}' must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise DecodeFailed(f"'{key}' must be finite, got {value!r}")
    if value < 0:
        raise DecodeFailed(f"'{key}' must not be negative")
    return float(value)


def _as_rank(value: Any) -> int:
    quantity = _as_quantity(value, 'market_cap_rank')
    if not quantity.is_integer() or quantity < 1:
        raise DecodeFailed(f"'market_cap_rank' must be a positive integer, got {value!r}")
    return int(quantity)


def decode_asset(record: Any) -> Asset:
    """
    Decode one markets record into an Asset.

    Raises:
        DecodeFailed: record is not an object or a required field is
            missing, null or of the wrong type.
    """
    if not isinstance(record, dict):
        raise DecodeFailed(f"Market record must be an object, got {type(record).__name__}")

    for key in REQUIRED_FIELDS:
        _require(record, key)

    raw_supply = record.get('total_supply')
    total_supply = None if raw_supply is None else _as_quantity(raw_supply, 'total_supply')

    return Asset(
        id=_as_text(record, 'id'),
        market_cap_rank=_as_rank(record['market_cap_rank']),
        name=_as_text(record, 'name'),
        symbol=_as_text(record, 'symbol'),
        market_cap=_as_quantity(record['market_cap'], 'market_cap'),
        current_price=_as_quantity(record['current_price'], 'current_price'),
        total_volume=_as_quantity(record['total_volume'], 'total_volume'),
        image_url=_as_text(record, 'image'),
        total_supply=total_supply,
    )


def decode_assets(payload: Any) -> List[Asset]:
    """Decode the whole response body, keeping provider order."""
    if not isinstance(payload, list):
        raise DecodeFailed(f"Markets response must be a list, got {type(payload).__name__}")
    return [decode_asset(record) for record in payload]


class CoinGeckoService:
    """
    Client for the CoinGecko markets endpoint.

    Exactly one GET per call: no retry, no cache, no timeout override.

    Usage:
        service = CoinGeckoService()
        assets = service.fetch_top_assets()
    """

    def __init__(self, markets_url: str = MARKETS_URL, params: Optional[Dict[str, Any]] = None):
        self.markets_url = markets_url
        self.params = dict(MARKETS_PARAMS if params is None else params)

    def fetch_top_assets(self) -> List[Asset]:
        """
        Fetch the top coins by market cap.

        Returns:
            Assets in provider order (market cap descending)

        Raises:
            RequestFailed: transport error or non-success status
            DecodeFailed: body is not a valid list of market records
        """
        logger.info("🌐 Fetching top %s coins from CoinGecko...", self.params.get('per_page'))

        try:
            response = requests.get(
                self.markets_url,
                params=self.params,
                headers={'Accept': 'application/json'},
            )
        except requests.RequestException as e:
            raise RequestFailed(f"Markets request failed: {e}") from e

        if not response.ok:
            raise RequestFailed(
                f"Markets request returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeFailed(f"Markets response is not valid JSON: {e}") from e

        assets = decode_assets(payload)
        logger.info(f"📊 Fetched {len(assets)} coins")
        return assets
