"""
조회/댓글 API에서 사용하는 타입 정의
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 값을 알 수 없을 때 0 대신 표시하는 값
SENTINEL = "—"


class Network(str, Enum):
    """지원 네트워크"""
    BTC = "BTC"
    ETH = "ETH"
    LTC = "LTC"
    TON = "TON"
    TRON = "TRON"
    UNKNOWN = "UNKNOWN"


# 요청에서만 쓰이는 자동 감지 값
AUTO = "AUTO"


class Kind(str, Enum):
    """입력 종류"""
    ADDRESS = "address"
    TX = "tx"
    UNKNOWN = "unknown"


class Direction(str, Enum):
    """조회 주소 기준 트랜잭션 방향"""
    IN = "in"
    OUT = "out"
    OTHER = "other"


class ApiModel(BaseModel):
    """camelCase 로 직렬화되는 공통 베이스"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ClassificationResult(ApiModel):
    kind: Kind = Kind.UNKNOWN
    network: Network = Network.UNKNOWN

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class UnifiedTransaction(ApiModel):
    """네트워크와 무관한 트랜잭션 표현"""
    id: str
    timestamp: Optional[int] = None
    kind: Direction = Direction.OTHER
    amount: Optional[float] = None
    symbol: Optional[str] = None
    amount_usd: Optional[float] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    type: Optional[str] = None
    explorer_url: Optional[str] = None


class NftItem(ApiModel):
    address: str
    name: str
    image: Optional[str] = None
    collection: Optional[str] = None


class Summary(ApiModel):
    """화면 표시용 요약. 숫자를 알 수 없으면 SENTINEL"""
    title: str
    subtitle: str
    balance: str = SENTINEL
    usd: str = SENTINEL
    usd_balance: str = SENTINEL
    total_received: str = SENTINEL
    total_sent: str = SENTINEL
    usd_total_received: str = SENTINEL
    usd_total_sent: str = SENTINEL
    tx_count: str = SENTINEL
    status: str = "unknown"
    contract_type: Optional[str] = None


class LookupResult(ApiModel):
    """조회 응답 봉투"""
    ok: bool = True
    kind: Optional[Kind] = None
    network: Optional[Network] = None
    normalized: Optional[str] = None
    explorer_url: Optional[str] = None
    summary: Optional[Summary] = None
    txs: list[UnifiedTransaction] = Field(default_factory=list)
    nfts: list[NftItem] = Field(default_factory=list)
    raw: Optional[Any] = None
    error: Optional[str] = None

    def to_response(self) -> dict:
        if not self.ok:
            return {"ok": False, "error": self.error or "Unknown error"}
        data = self.model_dump(by_alias=True, exclude_none=True)
        # raw 는 없을 때도 null 로 내려준다
        data["raw"] = self.raw
        return data


class Comment(ApiModel):
    """생성 후 변경되지 않는 댓글"""
    id: str
    created_at: int
    text: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
