"""
업스트림 HTTP 호출 헬퍼
"""
import logging
from typing import Any, Optional

import certifi
import httpx

from explorer import config

from .errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


def create_http_client(**kwargs) -> httpx.AsyncClient:
    """요청 단위로 사용할 AsyncClient. 모든 호출에 타임아웃이 걸린다"""
    kwargs.setdefault("verify", certifi.where())
    kwargs.setdefault("timeout", config.HTTP_TIMEOUT)
    kwargs.setdefault("headers", {"User-Agent": config.USER_AGENT})
    return httpx.AsyncClient(**kwargs)


async def fetch_json(client: httpx.AsyncClient, url: str, key: str, params: Optional[dict] = None) -> Any:
    """GET 후 JSON 반환. 어떤 실패든 UpstreamUnavailable 로 바꿔 올린다 (재시도 없음)"""
    try:
        res = await client.get(url, params=params, headers={"User-Agent": config.USER_AGENT})
        logger.debug(f"[{key}] 응답 상태코드: {res.status_code}")
        res.raise_for_status()
        return res.json()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        if status_code in [404, 400]:
            logger.debug(f"[{key}] HTTP {status_code} (데이터 없음): {url}")
        else:
            logger.warning(f"[{key}] HTTP 오류 (상태코드: {status_code}) → {e}. API: {url}")
        raise UpstreamUnavailable(f"HTTP {status_code}", e) from e
    except httpx.RequestError as e:
        logger.warning(f"[{key}] 요청 오류 → {e}. API: {url}")
        raise UpstreamUnavailable("Upstream request failed", e) from e
    except ValueError as e:
        logger.warning(f"[{key}] JSON 파싱 실패 → {e}. API: {url}")
        raise UpstreamUnavailable("Upstream returned invalid JSON", e) from e
