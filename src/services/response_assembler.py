"""
응답 조립 (I/O 없음)

어댑터 결과에 USD 시세를 곱하고, 표시 문자열과 익스플로러 링크를 붙여
LookupResult 봉투를 만든다.
"""
from typing import Optional

from explorer import config
from explorer.models import SENTINEL, ClassificationResult, Kind, LookupResult, Summary
from explorer.utils import fmt_amount, usd_str

from .adapters.base import AccountSnapshot
from .chain_configs import explorer_url


def _usd(value: Optional[float], price: Optional[float]) -> Optional[float]:
    if value is None or price is None:
        return None
    return value * price


def build_summary(snapshot: AccountSnapshot, subtitle: str) -> Summary:
    price = snapshot.price_usd
    usd_balance = usd_str(_usd(snapshot.balance, price))
    return Summary(
        title=snapshot.title,
        subtitle=subtitle,
        status=snapshot.status,
        contract_type=snapshot.contract_type,
        balance=fmt_amount(snapshot.balance, snapshot.symbol, snapshot.decimals),
        usd=usd_balance,
        usd_balance=usd_balance,
        tx_count=str(snapshot.tx_count) if snapshot.tx_count is not None else SENTINEL,
        total_received=fmt_amount(snapshot.total_received, snapshot.symbol, snapshot.decimals),
        total_sent=fmt_amount(snapshot.total_sent, snapshot.symbol, snapshot.decimals),
        usd_total_received=usd_str(_usd(snapshot.total_received, price)),
        usd_total_sent=usd_str(_usd(snapshot.total_sent, price)),
    )


def assemble(classification: ClassificationResult, normalized: str, query: str, snapshot: AccountSnapshot) -> LookupResult:
    price = snapshot.price_usd
    txs = [
        t.model_copy(update={"amount_usd": _usd(t.amount, price)})
        for t in snapshot.txs
    ]
    return LookupResult(
        ok=True,
        kind=classification.kind,
        network=classification.network,
        normalized=normalized,
        explorer_url=explorer_url(classification.network, classification.kind, normalized),
        summary=build_summary(snapshot, query),
        txs=txs,
        nfts=snapshot.nfts,
        raw=snapshot.raw if config.INCLUDE_RAW else None,
    )


def build_fallback(kind, network, query: str) -> LookupResult:
    """업스트림 실패 시의 결정적 폴백 결과 (status: mock)"""
    return LookupResult(
        ok=True,
        kind=kind,
        network=network,
        normalized=query,
        explorer_url=explorer_url(network, kind, query),
        summary=Summary(
            title="Transaction" if kind == Kind.TX else "Wallet",
            subtitle=query,
            status="mock",
        ),
        txs=[],
        nfts=[],
        raw=None,
    )


def build_error(message: str) -> LookupResult:
    return LookupResult(ok=False, error=message)
