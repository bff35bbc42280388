"""
BTC/LTC/ETH 어댑터 (BlockCypher)
"""
import logging

import httpx

from explorer import config
from explorer.models import Direction, Network, UnifiedTransaction
from explorer.utils import iso_to_epoch, pick, pick_list, to_int, to_number

from ..chain_configs import explorer_url
from ..http_client import fetch_json
from .base import AccountSnapshot, price_job, settle, sum_direction

logger = logging.getLogger(__name__)

TXREF_LIST_FIELDS = ("txrefs",)
TXREF_ID_FIELDS = ("tx_hash", "hash")
TXREF_CONFIRMED_FIELDS = ("confirmed", "received")
TXREF_VALUE_FIELDS = ("value",)
BALANCE_FIELDS = ("balance", "final_balance")
TOTAL_RECEIVED_FIELDS = ("total_received",)
TOTAL_SENT_FIELDS = ("total_sent",)
TX_COUNT_FIELDS = ("n_tx", "final_n_tx")


def txref_direction(txref: dict) -> Direction:
    """BlockCypher txref 인덱스 규칙

    tx_input_n == -1  → 주소가 출력에만 있음 → 입금
    tx_output_n == -1 → 주소가 입력에만 있음 → 출금
    """
    input_n = to_int(txref.get("tx_input_n"))
    output_n = to_int(txref.get("tx_output_n"))
    if input_n == -1:
        return Direction.IN
    if output_n == -1:
        return Direction.OUT
    return Direction.OTHER


def map_txrefs(txrefs: list, address: str, network: Network, symbol: str, divisor: float) -> list[UnifiedTransaction]:
    txs = []
    for t in txrefs[:config.TX_HISTORY_LIMIT]:
        if not isinstance(t, dict):
            continue
        tx_id = str(pick(t, TXREF_ID_FIELDS, ""))
        kind = txref_direction(t)
        txs.append(UnifiedTransaction(
            id=tx_id,
            timestamp=iso_to_epoch(pick(t, TXREF_CONFIRMED_FIELDS)),
            kind=kind,
            amount=to_number(pick(t, TXREF_VALUE_FIELDS)) / divisor,
            symbol=symbol,
            from_=None if kind == Direction.IN else address,
            to=None if kind == Direction.OUT else address,
            type="transfer",
            explorer_url=explorer_url(network, "tx", tx_id),
        ))
    return txs


async def fetch(client: httpx.AsyncClient, address: str, network: Network, cfg: dict) -> AccountSnapshot:
    key = network.value
    divisor = cfg["divisor"]
    raw = await fetch_json(client, cfg["api"](address), key, params={"limit": config.TX_HISTORY_LIMIT})
    if not isinstance(raw, dict):
        raw = {}

    settled = await settle(key, price=price_job(client, cfg["coin_id"]))

    txs = map_txrefs(pick_list(raw, TXREF_LIST_FIELDS), address, network, cfg["symbol"], divisor)

    # 누적 합계는 제공자 값을 우선, 없으면 최근 목록에서 방향별로 합산
    total_received = to_number(pick(raw, TOTAL_RECEIVED_FIELDS), default=None)
    total_sent = to_number(pick(raw, TOTAL_SENT_FIELDS), default=None)

    return AccountSnapshot(
        symbol=cfg["symbol"],
        decimals=cfg["decimals"],
        title="Wallet",
        status="ok",
        balance=to_number(pick(raw, BALANCE_FIELDS)) / divisor,
        total_received=total_received / divisor if total_received is not None else sum_direction(txs, Direction.IN),
        total_sent=total_sent / divisor if total_sent is not None else sum_direction(txs, Direction.OUT),
        tx_count=to_int(pick(raw, TX_COUNT_FIELDS)),
        txs=txs,
        price_usd=settled["price"],
        raw=raw,
    )
