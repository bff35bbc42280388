from explorer.models import SENTINEL, ClassificationResult, Direction, Kind, Network, UnifiedTransaction
from src.services.adapters.base import AccountSnapshot
from src.services.response_assembler import assemble, build_error, build_fallback, build_summary

ETH_ADDRESS = "0x" + "ab" * 20


def make_snapshot(**overrides):
    values = dict(
        symbol="ETH",
        decimals=6,
        balance=1.5,
        total_received=2.0,
        total_sent=0.5,
        tx_count=3,
        price_usd=2000.0,
        txs=[UnifiedTransaction(id="0x1", kind=Direction.IN, amount=0.25, symbol="ETH")],
        raw={"balance": "1500000000000000000"},
    )
    values.update(overrides)
    return AccountSnapshot(**values)


def test_summary_applies_price():
    summary = build_summary(make_snapshot(), ETH_ADDRESS)
    assert summary.balance == "1.5 ETH"
    assert summary.usd == "$3000"
    assert summary.usd_balance == summary.usd
    assert summary.total_received == "2 ETH"
    assert summary.usd_total_sent == "$1000"
    assert summary.tx_count == "3"
    assert summary.subtitle == ETH_ADDRESS


def test_unknown_values_render_as_sentinel_not_zero():
    summary = build_summary(make_snapshot(price_usd=None, tx_count=None, total_received=None), ETH_ADDRESS)
    assert summary.balance == "1.5 ETH"
    assert summary.usd == SENTINEL
    assert summary.usd_total_received == SENTINEL
    assert summary.total_received == SENTINEL
    assert summary.tx_count == SENTINEL


def test_assemble_envelope():
    classification = ClassificationResult(kind=Kind.ADDRESS, network=Network.ETH)
    result = assemble(classification, ETH_ADDRESS, ETH_ADDRESS, make_snapshot())
    body = result.to_response()
    assert body["ok"] is True
    assert body["kind"] == "address"
    assert body["network"] == "ETH"
    assert body["explorerUrl"] == f"https://etherscan.io/address/{ETH_ADDRESS}"
    assert body["summary"]["usdTotalReceived"] == "$4000"
    assert body["txs"][0]["amountUsd"] == 500.0
    assert body["txs"][0]["kind"] == "in"
    assert body["nfts"] == []
    assert body["raw"] == {"balance": "1500000000000000000"}


def test_assemble_leaves_snapshot_transactions_untouched():
    snapshot = make_snapshot()
    classification = ClassificationResult(kind=Kind.ADDRESS, network=Network.ETH)
    assemble(classification, ETH_ADDRESS, ETH_ADDRESS, snapshot)
    assert snapshot.txs[0].amount_usd is None


def test_fallback_is_deterministic():
    first = build_fallback(Kind.ADDRESS, Network.BTC, "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
    second = build_fallback(Kind.ADDRESS, Network.BTC, "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
    assert first == second
    body = first.to_response()
    assert body["summary"]["status"] == "mock"
    assert body["summary"]["title"] == "Wallet"
    assert body["summary"]["balance"] == SENTINEL
    assert body["txs"] == []
    assert body["raw"] is None
    assert body["explorerUrl"].startswith("https://www.blockchain.com/btc/address/")


def test_fallback_title_for_transactions():
    result = build_fallback(Kind.TX, Network.ETH, "0x" + "cd" * 32)
    assert result.summary.title == "Transaction"
    assert result.explorer_url.startswith("https://etherscan.io/tx/")


def test_error_envelope():
    assert build_error("Empty query").to_response() == {"ok": False, "error": "Empty query"}
