"""
TON 어댑터 (TonAPI)

계정 정보 → (이벤트 기록, NFT, 시세) 순서로 조회한다. 방향 판정은
이벤트 상대방 주소와 조회 주소의 raw 정규형을 비교한다.
"""
import logging
from typing import Optional

import httpx

from explorer import config
from explorer.models import Direction, NftItem, Network, UnifiedTransaction
from explorer.utils import pick, pick_dict, pick_list, to_int, to_number

from .. import ton_address
from ..chain_configs import explorer_url
from ..http_client import fetch_json
from .base import AccountSnapshot, price_job, settle, sum_direction

logger = logging.getLogger(__name__)

# ========== 필드 폴백 체인 ==========
EVENT_ID_FIELDS = ("event_id", "id", "hash")
EVENT_TIMESTAMP_FIELDS = ("timestamp", "time", "utime")
EVENT_LIST_FIELDS = ("events",)
ACTION_LIST_FIELDS = ("actions",)
ACTION_PAYLOAD_FIELDS = (
    "ton_transfer", "tonTransfer", "TonTransfer",
    "jetton_transfer", "jettonTransfer", "JettonTransfer",
)
SENDER_FIELDS = ("sender.address", "from.address", "from")
RECIPIENT_FIELDS = ("recipient.address", "to.address", "to")
AMOUNT_FIELDS = ("amount",)

NFT_LIST_FIELDS = ("nft_items", "items")
NFT_ADDRESS_FIELDS = ("address", "nft_address")
NFT_NAME_FIELDS = ("metadata.name", "name")
NFT_COLLECTION_FIELDS = ("collection.name", "collection_name")
NFT_IMAGE_FIELDS = (
    "metadata.image", "metadata.image_url", "metadata.imageUrl",
    "previews.0.url", "previews.0.src",
    "image.original", "image.url",
)

ACCOUNT_BALANCE_FIELDS = ("balance",)
ACCOUNT_CONTRACT_FIELDS = ("contract_type", "interfaces.0")


def _primary_action(actions: list) -> Optional[dict]:
    """transfer 계열 액션을 우선, 없으면 첫 액션"""
    dict_actions = [a for a in actions if isinstance(a, dict)]
    for action in dict_actions:
        if "transfer" in str(action.get("type", "")).lower():
            return action
    return dict_actions[0] if dict_actions else None


def parse_events(events: list, address_raw: str, symbol: str = "TON", divisor: float = 1e9) -> list[UnifiedTransaction]:
    """TonAPI 이벤트 목록을 통합 트랜잭션 목록으로 변환"""
    address_key = ton_address.to_raw(address_raw)
    txs = []

    for ev in events:
        if not isinstance(ev, dict):
            continue
        event_id = str(pick(ev, EVENT_ID_FIELDS, ""))
        timestamp = to_int(pick(ev, EVENT_TIMESTAMP_FIELDS)) or None
        primary = _primary_action(pick_list(ev, ACTION_LIST_FIELDS)) or {}
        payload = pick_dict(primary, ACTION_PAYLOAD_FIELDS) or primary

        sender = str(pick(payload, SENDER_FIELDS) or pick(primary, SENDER_FIELDS) or "")
        recipient = str(pick(payload, RECIPIENT_FIELDS) or pick(primary, RECIPIENT_FIELDS) or "")
        sender_key = ton_address.to_raw(sender) if sender else ""
        recipient_key = ton_address.to_raw(recipient) if recipient else ""

        amount_nano = to_number(pick(payload, AMOUNT_FIELDS) or pick(primary, AMOUNT_FIELDS))
        amount = amount_nano / divisor if amount_nano and amount_nano > 0 else None

        kind = Direction.OTHER
        if recipient_key and recipient_key == address_key:
            kind = Direction.IN
        elif sender_key and sender_key == address_key:
            kind = Direction.OUT

        txs.append(UnifiedTransaction(
            id=event_id,
            timestamp=timestamp,
            kind=kind,
            amount=amount,
            symbol=symbol,
            from_=ton_address.to_friendly(sender) if sender else None,
            to=ton_address.to_friendly(recipient) if recipient else None,
            type=str(primary.get("type") or "event"),
            explorer_url=explorer_url(Network.TON, "tx", event_id),
        ))

    return txs


def parse_nfts(payload, limit: int) -> list[NftItem]:
    items = pick_list(payload, NFT_LIST_FIELDS)
    nfts = []
    for it in items[:limit]:
        if not isinstance(it, dict):
            continue
        image = pick(it, NFT_IMAGE_FIELDS)
        nfts.append(NftItem(
            address=str(pick(it, NFT_ADDRESS_FIELDS, "")),
            name=str(pick(it, NFT_NAME_FIELDS, "NFT")),
            image=str(image) if image is not None else None,
            collection=str(pick(it, NFT_COLLECTION_FIELDS, "")),
        ))
    return nfts


async def fetch(client: httpx.AsyncClient, address: str, network: Network, cfg: dict) -> AccountSnapshot:
    key = network.value
    account = await fetch_json(client, cfg["api"](address), key)
    if not isinstance(account, dict):
        account = {}

    settled = await settle(
        key,
        events=fetch_json(client, cfg["events_api"](address), key, params={"limit": config.TX_HISTORY_LIMIT}),
        nfts=fetch_json(client, cfg["nfts_api"](address), key, params={"limit": config.NFT_LIMIT}),
        price=price_job(client, cfg["coin_id"]),
    )

    snapshot = AccountSnapshot(
        symbol=cfg["symbol"],
        decimals=cfg["decimals"],
        title="Wallet" if account.get("is_wallet") else "Account",
        status=str(account.get("status") or "unknown"),
        contract_type=str(pick(account, ACCOUNT_CONTRACT_FIELDS, "")),
        balance=to_number(pick(account, ACCOUNT_BALANCE_FIELDS)) / cfg["divisor"],
        price_usd=settled["price"],
        raw={"account": account, "events": settled["events"], "nfts": settled["nfts"]},
    )

    if settled["events"] is not None:
        events = pick_list(settled["events"], EVENT_LIST_FIELDS)[:config.TX_HISTORY_LIMIT]
        snapshot.txs = parse_events(events, address, cfg["symbol"], cfg["divisor"])
        snapshot.tx_count = len(events)
        snapshot.total_received = sum_direction(snapshot.txs, Direction.IN)
        snapshot.total_sent = sum_direction(snapshot.txs, Direction.OUT)

    snapshot.nfts = parse_nfts(settled["nfts"], config.NFT_LIMIT)
    logger.debug(f"[{key}] 계정 조회 완료: txs={len(snapshot.txs)}, nfts={len(snapshot.nfts)}")
    return snapshot
