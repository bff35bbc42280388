import logging
from typing import Optional

import httpx

from explorer.models import AUTO, Kind, LookupResult, Network

from . import ton_address
from .adapters import get_adapter
from .chain_configs import get_chain_configs
from .errors import UnsupportedInput, UpstreamUnavailable, ValidationFailed
from .http_client import create_http_client
from .input_classifier import classify
from .response_assembler import assemble, build_fallback

CHAIN_CONFIGS = get_chain_configs()

# 로거 설정
logger = logging.getLogger(__name__)


def normalize_address(network: Network, address: str) -> str:
    """네트워크별 주소 정규형. 현재는 TON 만 여러 표기를 가진다"""
    if network == Network.TON:
        return ton_address.to_raw(address)
    return address.strip()


async def lookup(query: Optional[str], network: Optional[str] = AUTO, client: Optional[httpx.AsyncClient] = None) -> LookupResult:
    """입력 문자열 조회

    Raises:
        ValidationFailed: 빈 입력
        UnsupportedInput: 처리할 어댑터가 없는 분류 결과
    """
    query = (query or "").strip()
    if not query:
        raise ValidationFailed("Empty query")

    guess = classify(query, network)
    logger.debug(f"입력 분류: kind={guess.kind}, network={guess.network}")

    cfg = CHAIN_CONFIGS.get(guess.network) if guess.network != Network.UNKNOWN else None
    adapter = get_adapter(cfg["adapter"]) if cfg else None
    if guess.kind != Kind.ADDRESS or adapter is None:
        raise UnsupportedInput("Unsupported or unknown input")

    chain = Network(guess.network)
    normalized = normalize_address(chain, query)

    if client is None:
        async with create_http_client() as own_client:
            return await _run_adapter(own_client, adapter, guess, chain, cfg, normalized, query)
    return await _run_adapter(client, adapter, guess, chain, cfg, normalized, query)


async def _run_adapter(client, adapter, guess, chain: Network, cfg: dict, normalized: str, query: str) -> LookupResult:
    try:
        snapshot = await adapter(client, normalized, chain, cfg)
    except UpstreamUnavailable as e:
        # 업스트림 장애는 에러로 노출하지 않고 폴백 결과로 응답
        logger.info(f"[{chain.value}] 계정 조회 실패, 폴백 결과 반환: {e.message}")
        return build_fallback(guess.kind, chain, query)
    except Exception as e:
        logger.error(f"[{chain.value}] 알 수 없는 오류 발생, 폴백 결과 반환 → {e}", exc_info=True)
        return build_fallback(guess.kind, chain, query)

    return assemble(guess, normalized, query, snapshot)
