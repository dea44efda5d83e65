import pytest

from crypto_tracker.services.coingecko import decode_assets


def make_record(coin_id="bitcoin", rank=1, name="Bitcoin", symbol="btc", **overrides):
    record = {
        "id": coin_id,
        "symbol": symbol,
        "name": name,
        "image": f"https://assets.coingecko.com/coins/images/1/large/{coin_id}.png",
        "current_price": 43250.5,
        "market_cap": 846000000000,
        "market_cap_rank": rank,
        "total_volume": 21500000000,
        "total_supply": 21000000.0,
        "circulating_supply": 19600000.0,
        "price_change_percentage_24h": 1.25,
    }
    record.update(overrides)
    return record


class FakeClient:
    """Stands in for CoinGeckoService"""

    def __init__(self, assets=None, error=None):
        self.assets = assets or []
        self.error = error
        self.calls = 0

    def fetch_top_assets(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.assets)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def sample_records():
    return [
        make_record("bitcoin", 1, "Bitcoin", "btc"),
        make_record("ethereum", 2, "Ethereum", "eth", current_price=2280.12,
                    market_cap=274000000000, total_supply=120180000.0),
        make_record("bitcoin-cash", 18, "Bitcoin Cash", "bch", current_price=245.3,
                    market_cap=4800000000, total_volume=190000000),
    ]


@pytest.fixture
def sample_assets(sample_records):
    return decode_assets(sample_records)


@pytest.fixture
def hundred_records():
    return [
        make_record(f"coin-{i}", i, f"Coin {i}", f"c{i}",
                    market_cap=1e12 / i, total_supply=None if i % 10 == 0 else 1e6 * i)
        for i in range(1, 101)
    ]


@pytest.fixture
def hundred_assets(hundred_records):
    return decode_assets(hundred_records)


@pytest.fixture
def fake_client_factory():
    return FakeClient
