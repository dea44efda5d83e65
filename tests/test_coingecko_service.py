from unittest.mock import MagicMock, patch

import pytest
import requests

from crypto_tracker.config import MARKETS_PARAMS, MARKETS_URL
from crypto_tracker.services.coingecko import (
    Asset,
    CoinGeckoService,
    DecodeFailed,
    FetchError,
    RequestFailed,
    decode_asset,
    decode_assets,
    get_coingecko_service,
    reset_coingecko_service,
)
from crypto_tracker.services.coingecko.models import REQUIRED_FIELDS

GET_TARGET = "crypto_tracker.services.coingecko.service.requests.get"


def _response(payload=None, status=200, json_error=None):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def test_decode_asset_maps_provider_fields(record_factory):
    asset = decode_asset(record_factory())

    assert asset == Asset(
        id="bitcoin",
        market_cap_rank=1,
        name="Bitcoin",
        symbol="btc",
        market_cap=846000000000.0,
        current_price=43250.5,
        total_volume=21500000000.0,
        image_url="https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
        total_supply=21000000.0,
    )
    assert asset.display_symbol == "BTC"


def test_missing_total_supply_is_unknown_not_zero(record_factory):
    record = record_factory()
    del record["total_supply"]

    asset = decode_asset(record)

    assert asset.total_supply is None


def test_null_total_supply_is_unknown(record_factory):
    asset = decode_asset(record_factory(total_supply=None))
    assert asset.total_supply is None


def test_zero_total_supply_is_kept(record_factory):
    asset = decode_asset(record_factory(total_supply=0))
    assert asset.total_supply == 0.0


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_fails(record_factory, field):
    record = record_factory()
    del record[field]

    with pytest.raises(DecodeFailed):
        decode_asset(record)


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_null_required_field_fails(record_factory, field):
    with pytest.raises(DecodeFailed):
        decode_asset(record_factory(**{field: None}))


@pytest.mark.parametrize("overrides", [
    {"name": 42},
    {"market_cap": "lots"},
    {"current_price": True},
    {"market_cap_rank": 0},
    {"market_cap_rank": 1.5},
    {"total_volume": -1},
    {"total_supply": "unknown"},
    {"market_cap": float("nan")},
    {"current_price": float("inf")},
    {"total_supply": float("nan")},
])
def test_malformed_field_fails(record_factory, overrides):
    with pytest.raises(DecodeFailed):
        decode_asset(record_factory(**overrides))


def test_integral_float_rank_is_accepted(record_factory):
    assert decode_asset(record_factory(market_cap_rank=3.0)).market_cap_rank == 3


def test_decode_assets_keeps_provider_order(sample_records):
    assets = decode_assets(sample_records)
    assert [a.id for a in assets] == ["bitcoin", "ethereum", "bitcoin-cash"]


@pytest.mark.parametrize("payload", [{"error": "rate limited"}, "text", None, ["not-an-object"]])
def test_decode_assets_rejects_non_list_payloads(payload):
    with pytest.raises(DecodeFailed):
        decode_assets(payload)


def test_decode_assets_accepts_empty_list():
    assert decode_assets([]) == []


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

def test_fetch_top_assets_issues_single_fixed_request(sample_records):
    with patch(GET_TARGET, return_value=_response(sample_records)) as mock_get:
        assets = CoinGeckoService().fetch_top_assets()

    mock_get.assert_called_once()
    args, kwargs = mock_get.call_args
    assert args[0] == MARKETS_URL
    assert kwargs["params"] == MARKETS_PARAMS
    assert "timeout" not in kwargs
    assert [a.name for a in assets] == ["Bitcoin", "Ethereum", "Bitcoin Cash"]


def test_markets_params_ask_for_top_100_by_market_cap():
    assert MARKETS_PARAMS == {
        "vs_currency": "usd",
        "order": "market_cap_desc",
        "per_page": 100,
        "page": 1,
        "sparkline": "false",
    }


def test_error_status_raises_request_failed():
    with patch(GET_TARGET, return_value=_response(status=429)) as mock_get:
        with pytest.raises(RequestFailed) as exc_info:
            CoinGeckoService().fetch_top_assets()

    assert exc_info.value.status_code == 429
    mock_get.assert_called_once()


def test_transport_error_raises_request_failed():
    error = requests.ConnectionError("connection refused")
    with patch(GET_TARGET, side_effect=error) as mock_get:
        with pytest.raises(RequestFailed) as exc_info:
            CoinGeckoService().fetch_top_assets()

    assert exc_info.value.__cause__ is error
    assert exc_info.value.status_code is None
    mock_get.assert_called_once()


def test_invalid_json_raises_decode_failed():
    response = _response(json_error=ValueError("Expecting value"))
    with patch(GET_TARGET, return_value=response):
        with pytest.raises(DecodeFailed):
            CoinGeckoService().fetch_top_assets()


def test_incomplete_record_raises_decode_failed(sample_records):
    del sample_records[1]["name"]
    with patch(GET_TARGET, return_value=_response(sample_records)):
        with pytest.raises(DecodeFailed):
            CoinGeckoService().fetch_top_assets()


def test_both_failures_share_a_base_class():
    assert issubclass(RequestFailed, FetchError)
    assert issubclass(DecodeFailed, FetchError)


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

def test_singleton_is_shared_until_reset():
    reset_coingecko_service()
    first = get_coingecko_service()

    assert get_coingecko_service() is first

    reset_coingecko_service()
    assert get_coingecko_service() is not first
    reset_coingecko_service()
