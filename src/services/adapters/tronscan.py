"""
TRON 어댑터 (Tronscan)

TRON 주소는 표기가 하나뿐이므로 방향 판정은 문자열 완전 일치로 한다.
"""
import logging

import httpx

from explorer import config
from explorer.models import Direction, Network, UnifiedTransaction
from explorer.utils import pick, pick_list, to_int, to_number

from ..chain_configs import explorer_url
from ..http_client import fetch_json
from .base import AccountSnapshot, price_job, settle, sum_direction

logger = logging.getLogger(__name__)

ACCOUNT_BALANCE_FIELDS = ("balance", "data.0.balance")
TX_LIST_FIELDS = ("data",)
TX_TOTAL_FIELDS = ("total", "rangeTotal")
TX_ID_FIELDS = ("hash", "transactionHash")
TX_TIMESTAMP_FIELDS = ("timestamp",)
TX_FROM_FIELDS = ("ownerAddress", "fromAddress", "from")
TX_TO_FIELDS = ("toAddress", "to")
TX_TYPE_FIELDS = ("contractType", "type")
TX_AMOUNT_FIELDS = ("amount", "contractData.amount")


def map_transactions(items: list, address: str, symbol: str, divisor: float) -> list[UnifiedTransaction]:
    txs = []
    for t in items[:config.TX_HISTORY_LIMIT]:
        if not isinstance(t, dict):
            continue
        tx_id = str(pick(t, TX_ID_FIELDS, ""))
        timestamp_ms = to_int(pick(t, TX_TIMESTAMP_FIELDS))
        sender = str(pick(t, TX_FROM_FIELDS, ""))
        recipient = str(pick(t, TX_TO_FIELDS, ""))

        kind = Direction.OTHER
        if recipient and recipient == address:
            kind = Direction.IN
        elif sender and sender == address:
            kind = Direction.OUT

        txs.append(UnifiedTransaction(
            id=tx_id,
            timestamp=timestamp_ms // 1000 if timestamp_ms else None,
            kind=kind,
            amount=to_number(pick(t, TX_AMOUNT_FIELDS)) / divisor,
            symbol=symbol,
            from_=sender or None,
            to=recipient or None,
            type=str(pick(t, TX_TYPE_FIELDS, "transfer")),
            explorer_url=explorer_url(Network.TRON, "tx", tx_id),
        ))
    return txs


async def fetch(client: httpx.AsyncClient, address: str, network: Network, cfg: dict) -> AccountSnapshot:
    key = network.value
    divisor = cfg["divisor"]
    account = await fetch_json(client, cfg["api"](address), key, params={"address": address})
    if not isinstance(account, dict):
        account = {}

    settled = await settle(
        key,
        tx_list=fetch_json(
            client, cfg["txs_api"](address), key,
            params={
                "sort": "-timestamp",
                "count": "true",
                "limit": config.TX_HISTORY_LIMIT,
                "start": 0,
                "address": address,
            },
        ),
        price=price_job(client, cfg["coin_id"]),
    )

    snapshot = AccountSnapshot(
        symbol=cfg["symbol"],
        decimals=cfg["decimals"],
        title="Wallet",
        status="ok",
        balance=to_number(pick(account, ACCOUNT_BALANCE_FIELDS)) / divisor,
        price_usd=settled["price"],
        raw={"acct": account, "txList": settled["tx_list"]},
    )

    tx_list = settled["tx_list"]
    if tx_list is not None:
        snapshot.txs = map_transactions(pick_list(tx_list, TX_LIST_FIELDS), address, cfg["symbol"], divisor)
        # 누적 합계는 제공되지 않으므로 최근 목록 기준으로 합산
        snapshot.total_received = sum_direction(snapshot.txs, Direction.IN)
        snapshot.total_sent = sum_direction(snapshot.txs, Direction.OUT)
        total = to_int(pick(tx_list, TX_TOTAL_FIELDS))
        snapshot.tx_count = total if total is not None else len(snapshot.txs)

    return snapshot
