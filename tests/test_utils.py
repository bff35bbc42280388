import math

import pytest

from explorer.models import SENTINEL
from explorer.utils import fmt, fmt_amount, iso_to_epoch, pick, pick_dict, pick_list, to_number, usd_str


class TestPick:
    def test_first_present_path_wins(self):
        obj = {"tonTransfer": {"amount": 5}, "ton_transfer": None}
        assert pick(obj, ("ton_transfer.amount", "tonTransfer.amount")) == 5

    def test_skips_empty_strings_and_containers(self):
        obj = {"from": {"address": ""}, "sender": {"address": "0:abc"}}
        assert pick(obj, ("from.address", "from", "sender.address")) == "0:abc"

    def test_list_index_segments(self):
        obj = {"previews": [{"url": "https://img/1.png"}]}
        assert pick(obj, ("previews.0.url",)) == "https://img/1.png"
        assert pick(obj, ("previews.3.url",), default="none") == "none"

    def test_zero_is_a_value(self):
        assert pick({"balance": 0}, ("balance",), default=7) == 0

    def test_non_dict_input(self):
        assert pick(None, ("a",)) is None
        assert pick_list("text", ("a",)) == []
        assert pick_dict([], ("a",)) is None

    def test_pick_list_and_dict(self):
        obj = {"items": [1], "nft_items": None, "ton_transfer": {"amount": 1}}
        assert pick_list(obj, ("nft_items", "items")) == [1]
        assert pick_dict(obj, ("tonTransfer", "ton_transfer")) == {"amount": 1}


@pytest.mark.parametrize("value,expected", [
    (1.5, "1.5"),
    (2, "2"),
    (0, "0"),
    (0.1234567, "0.123457"),
    (-0.0000001, "0"),
    (100, "100"),
    (None, SENTINEL),
    (math.inf, SENTINEL),
    (math.nan, SENTINEL),
])
def test_fmt_strips_trailing_zeros(value, expected):
    assert fmt(value) == expected


def test_fmt_amount_and_usd():
    assert fmt_amount(0.5, "BTC", 8) == "0.5 BTC"
    assert fmt_amount(None, "BTC", 8) == SENTINEL
    assert usd_str(1234.5) == "$1234.5"
    assert usd_str(0) == "$0"
    assert usd_str(None) == SENTINEL


def test_to_number_tolerates_garbage():
    assert to_number("12.5") == 12.5
    assert to_number("abc") == 0.0
    assert to_number(None, default=None) is None
    assert to_number(True) == 0.0
    assert to_number("inf", default=None) is None


def test_iso_to_epoch():
    assert iso_to_epoch("2024-01-01T00:00:00Z") == 1704067200
    assert iso_to_epoch("2024-01-01T00:00:00.123456789Z") == 1704067200
    assert iso_to_epoch("nope") is None
    assert iso_to_epoch(None) is None
