"""
코인게코(CoinGecko) API 서비스
USD 현물 시세 조회 (무료)
"""
import logging
import math
from typing import Optional

import httpx

from .configuration import config

logger = logging.getLogger(__name__)


class CoinGeckoService:
    """코인게코 현물 시세 조회

    한 번만 호출하고 재시도하지 않는다. 어떤 실패든 None 을 반환하며,
    호출 측은 None 을 "시세 모름"으로 취급한다.
    """

    BASE_URL: str = config.COINGECKO_API_URL
    # API 키는 선택사항 (무료 플랜도 사용 가능)
    API_KEY: Optional[str] = config.COINGECKO_API_KEY

    @classmethod
    async def get_usd_price(cls, coin_id: str, client: Optional[httpx.AsyncClient] = None) -> Optional[float]:
        """
        코인 USD 가격 조회

        Args:
            coin_id: 코인게코 ID (예: bitcoin, the-open-network)
            client: 재사용할 httpx 클라이언트. 없으면 새로 만든다.

        Returns:
            가격(float) 또는 None
        """
        if not coin_id:
            return None

        headers = {"Accept": "application/json"}
        if cls.API_KEY:
            headers["x-cg-demo-api-key"] = cls.API_KEY
        url = f"{cls.BASE_URL}/simple/price"
        params = {"ids": coin_id, "vs_currencies": "usd"}

        try:
            if client is None:
                async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as own_client:
                    response = await own_client.get(url, headers=headers, params=params)
            else:
                response = await client.get(url, headers=headers, params=params)

            if response.status_code != 200:
                logger.warning(f"⚠️ 코인게코 API 오류: {response.status_code} - {response.text[:200]}")
                return None

            data = response.json()
            raw_price = data.get(coin_id, {}).get("usd") if isinstance(data, dict) else None
            if raw_price is None or isinstance(raw_price, bool):
                logger.warning(f"⚠️ 코인게코 API 응답에 '{coin_id}' 가격이 없습니다.")
                return None

            price = float(raw_price)
            if not math.isfinite(price):
                logger.warning(f"⚠️ 코인게코 가격이 유한한 숫자가 아닙니다: {raw_price}")
                return None

            logger.debug(f"✅ 코인게코 API 조회 성공: {coin_id} = {price:,.2f} USD")
            return price

        except httpx.RequestError as e:
            logger.warning(f"⚠️ 코인게코 요청 오류 → {e}")
            return None
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"⚠️ 코인게코 응답 파싱 실패 → {e}")
            return None


# 전역 인스턴스
coingecko_service = CoinGeckoService()
