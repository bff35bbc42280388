import pytest

from explorer.models import Kind, Network
from src.services import ton_address
from src.services.errors import UnsupportedInput, ValidationFailed
from src.services.lookup_service import lookup, normalize_address
from tests.conftest import price_payload

TON_RAW = "0:" + "83dfd552e63729b472fcbcc8c45ebcc6691702558b68ec7527e1ba403a0f31a8"
ETH_ADDRESS = "0x" + "ab" * 20


def test_normalize_address():
    friendly = ton_address.to_friendly(TON_RAW, bounceable=False)
    assert normalize_address(Network.TON, friendly) == TON_RAW
    assert normalize_address(Network.ETH, f" {ETH_ADDRESS} ") == ETH_ADDRESS


@pytest.mark.asyncio
@pytest.mark.parametrize("query", [None, "", "   "])
async def test_empty_query(upstream, query):
    async with upstream.client() as client:
        with pytest.raises(ValidationFailed) as exc:
            await lookup(query, client=client)
    assert exc.value.status_code == 400
    assert exc.value.message == "Empty query"


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["hello", "0x" + "cd" * 32, "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"])
async def test_unsupported_input(upstream, query):
    async with upstream.client() as client:
        with pytest.raises(UnsupportedInput):
            await lookup(query, client=client)
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_address_lookup(upstream):
    upstream.add("api.blockcypher.com", f"/v1/eth/main/addrs/{ETH_ADDRESS}", {"balance": 10**18, "n_tx": 2})
    upstream.add("api.coingecko.com", "/api/v3/simple/price", price_payload("ethereum", 3000.0))
    async with upstream.client() as client:
        result = await lookup(ETH_ADDRESS, client=client)
    assert result.ok
    assert result.network == Network.ETH
    assert result.summary.usd == "$3000"
    assert result.summary.tx_count == "2"


@pytest.mark.asyncio
async def test_upstream_failure_returns_mock(upstream):
    async with upstream.client() as client:
        result = await lookup(ETH_ADDRESS, client=client)
    assert result.ok
    assert result.kind == Kind.ADDRESS
    assert result.summary.status == "mock"
    assert result.txs == []


@pytest.mark.asyncio
async def test_forced_network_and_ton_normalization(upstream):
    friendly = ton_address.to_friendly(TON_RAW)
    upstream.add("tonapi.io", f"/v2/accounts/{TON_RAW}", {"balance": 10**9, "status": "active"})
    async with upstream.client() as client:
        result = await lookup(friendly, network="ton", client=client)
    assert result.network == Network.TON
    assert result.normalized == TON_RAW
    assert result.summary.balance == "1 TON"
    assert result.summary.title == "Account"
    assert result.summary.tx_count == "—"
