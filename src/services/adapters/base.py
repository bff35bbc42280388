"""
업스트림 어댑터 공통 타입
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Optional

import httpx

from explorer.coingecko import CoinGeckoService
from explorer.models import Direction, NftItem, UnifiedTransaction

logger = logging.getLogger(__name__)


@dataclass
class AccountSnapshot:
    """어댑터가 반환하는 원시 수치 묶음 (USD 미적용)

    None 인 수치는 "알 수 없음"이며 응답에서 SENTINEL 로 표시된다.
    """
    symbol: str
    decimals: int
    title: str = "Wallet"
    status: str = "ok"
    contract_type: Optional[str] = None
    balance: Optional[float] = None
    total_received: Optional[float] = None
    total_sent: Optional[float] = None
    tx_count: Optional[int] = None
    txs: list[UnifiedTransaction] = field(default_factory=list)
    nfts: list[NftItem] = field(default_factory=list)
    price_usd: Optional[float] = None
    raw: Any = None


def sum_direction(txs: list[UnifiedTransaction], direction: Direction) -> float:
    """해당 방향 트랜잭션 금액 합계. other 는 어느 쪽에도 포함되지 않는다"""
    return sum(t.amount for t in txs if t.kind == direction and t.amount)


async def settle(key: str, **jobs: Awaitable) -> dict:
    """보조 조회들을 동시에 실행하고 각각 독립적으로 정리한다

    실패한 작업은 None 으로 남기고 나머지에는 영향을 주지 않는다.
    """
    names = list(jobs)
    results = await asyncio.gather(*jobs.values(), return_exceptions=True)
    settled = {}
    for name, res_or_err in zip(names, results):
        if isinstance(res_or_err, Exception):
            logger.debug(f"[{key}] {name} 조회 실패: {res_or_err}")
            settled[name] = None
        else:
            settled[name] = res_or_err
    return settled


def price_job(client: httpx.AsyncClient, coin_id: str) -> Awaitable:
    return CoinGeckoService.get_usd_price(coin_id, client=client)
