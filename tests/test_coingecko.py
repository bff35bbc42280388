import httpx
import pytest

from explorer.coingecko import CoinGeckoService
from tests.conftest import price_payload

PRICE_PATH = "/api/v3/simple/price"


@pytest.mark.asyncio
async def test_price_is_read_from_simple_price(upstream):
    upstream.add("api.coingecko.com", PRICE_PATH, price_payload("bitcoin", 65000.5))
    async with upstream.client() as client:
        price = await CoinGeckoService.get_usd_price("bitcoin", client=client)
    assert price == 65000.5
    request = upstream.requests[0]
    assert request.url.params["ids"] == "bitcoin"
    assert request.url.params["vs_currencies"] == "usd"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload,status", [
    ({"error": "rate limited"}, 429),
    ({"bitcoin": {}}, 200),
    ({"bitcoin": {"usd": "n/a"}}, 200),
    ({"bitcoin": {"usd": True}}, 200),
    ({"ethereum": {"usd": 1.0}}, 200),
    ([], 200),
])
async def test_unusable_responses_mean_unknown_price(upstream, payload, status):
    upstream.add("api.coingecko.com", PRICE_PATH, payload, status=status)
    async with upstream.client() as client:
        assert await CoinGeckoService.get_usd_price("bitcoin", client=client) is None


@pytest.mark.asyncio
async def test_connection_error_means_unknown_price(upstream):
    upstream.add("api.coingecko.com", PRICE_PATH, "fail")
    async with upstream.client() as client:
        assert await CoinGeckoService.get_usd_price("bitcoin", client=client) is None


@pytest.mark.asyncio
async def test_invalid_json_means_unknown_price():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
    async with httpx.AsyncClient(transport=transport) as client:
        assert await CoinGeckoService.get_usd_price("bitcoin", client=client) is None


@pytest.mark.asyncio
async def test_empty_coin_id_skips_request(upstream):
    async with upstream.client() as client:
        assert await CoinGeckoService.get_usd_price("", client=client) is None
    assert upstream.requests == []
