"""
CoinGecko Service - Data Models
"""

from dataclasses import dataclass
from typing import Optional


# Fields every market record must carry
REQUIRED_FIELDS = (
    'id',
    'market_cap_rank',
    'name',
    'symbol',
    'market_cap',
    'current_price',
    'total_volume',
    'image',
)


@dataclass(frozen=True)
class Asset:
    """One coin from the markets endpoint"""
    id: str
    market_cap_rank: int
    name: str
    symbol: str
    market_cap: float
    current_price: float
    total_volume: float
    image_url: str
    total_supply: Optional[float] = None  # None = unknown / uncapped

    @property
    def display_symbol(self) -> str:
        return self.symbol.upper()
