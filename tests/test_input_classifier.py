import pytest

from explorer.models import Kind, Network
from src.services.input_classifier import classify, detect_input

ETH_ADDRESS = "0x" + "ab12" * 10
ETH_TX = "0x" + "cd34" * 16
HEX64 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
BTC_LEGACY = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
BTC_P2SH = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"
BTC_BECH32 = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"
BTC_TAPROOT = "bc1p5d7rjq7g6rdk2yhzks9smlaqtedr4dekq08ge8ztwac72sfr9rusxg3297"
LTC_LEGACY = "LVg2kJoFNg45Nbpy53h7Fe1wKyeXVRhMH9"
LTC_BECH32 = "ltc1qg42tkwuuxefutzxezdkdel39gfstuap288mfea"
TRON_ADDRESS = "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"
TON_FRIENDLY = "EQ" + "A" * 46
TON_RAW = "0:" + "83dfd552e63729b472fcbcc8c45ebcc6691702558b68ec7527e1ba403a0f31a8"


@pytest.mark.parametrize("value,kind,network", [
    (ETH_ADDRESS, Kind.ADDRESS, Network.ETH),
    (ETH_TX, Kind.TX, Network.ETH),
    (HEX64, Kind.TX, Network.UNKNOWN),
    (BTC_LEGACY, Kind.ADDRESS, Network.BTC),
    (BTC_P2SH, Kind.ADDRESS, Network.BTC),
    (BTC_BECH32, Kind.ADDRESS, Network.BTC),
    (BTC_TAPROOT, Kind.ADDRESS, Network.BTC),
    (LTC_LEGACY, Kind.ADDRESS, Network.LTC),
    (LTC_BECH32, Kind.ADDRESS, Network.LTC),
    (TRON_ADDRESS, Kind.ADDRESS, Network.TRON),
    (TON_FRIENDLY, Kind.ADDRESS, Network.TON),
    ("UQ" + "b_-9" * 11 + "xy", Kind.ADDRESS, Network.TON),
    (TON_RAW, Kind.ADDRESS, Network.TON),
    ("-1:" + "f" * 64, Kind.ADDRESS, Network.TON),
])
def test_detects_documented_patterns(value, kind, network):
    result = classify(value)
    assert result.kind == kind
    assert result.network == network


@pytest.mark.parametrize("value", ["", "   ", "hello world", "0x123", "T123", "EQshort", "bc1"])
def test_unrecognized_input_is_unknown(value):
    result = detect_input(value)
    assert result.kind == Kind.UNKNOWN
    assert result.network == Network.UNKNOWN


def test_input_is_trimmed():
    assert classify(f"  {ETH_ADDRESS}\n").network == Network.ETH


def test_classification_is_order_independent():
    values = [TRON_ADDRESS, ETH_ADDRESS, TON_RAW, BTC_LEGACY, HEX64]
    first = [classify(v) for v in values]
    second = [classify(v) for v in reversed(values)]
    assert first == list(reversed(second))


def test_prefixed_hex_wins_over_bare_hex():
    # 0x + 64 hex 는 bare 64 hex 규칙보다 먼저 ETH tx 로 판정
    assert classify("0x" + HEX64).network == Network.ETH


class TestForcedNetwork:
    def test_forced_eth_infers_tx_from_prefixed_hash(self):
        assert classify(ETH_TX, "ETH").kind == Kind.TX
        assert classify(ETH_ADDRESS, "ETH").kind == Kind.ADDRESS

    @pytest.mark.parametrize("network", ["BTC", "LTC", "TRON"])
    def test_forced_utxo_and_tron_treat_bare_hex_as_tx(self, network):
        result = classify(HEX64, network)
        assert result.kind == Kind.TX
        assert result.network == network

    def test_forced_ton_is_always_address(self):
        assert classify(HEX64, "TON") == classify("anything", "TON")
        assert classify(HEX64, "TON").kind == Kind.ADDRESS

    def test_forced_network_does_not_revalidate_syntax(self):
        result = classify(ETH_ADDRESS, "TRON")
        assert result.kind == Kind.ADDRESS
        assert result.network == Network.TRON

    def test_forced_network_is_case_insensitive(self):
        assert classify(TRON_ADDRESS, "tron").network == Network.TRON

    @pytest.mark.parametrize("forced", [None, "", "AUTO", "auto", "DOGE"])
    def test_auto_or_unknown_forced_value_falls_back_to_detection(self, forced):
        assert classify(TRON_ADDRESS, forced).network == Network.TRON
