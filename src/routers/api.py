"""
API 라우터 (주소 조회, 지원 네트워크)
"""
import json
import logging

import httpx
from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from explorer.models import AUTO
from src.services.chain_configs import get_chain_configs
from src.services.errors import ExplorerError
from src.services.http_client import create_http_client
from src.services.lookup_service import lookup

logger = logging.getLogger(__name__)


async def get_http_client():
    """요청 단위 업스트림 클라이언트"""
    async with create_http_client() as client:
        yield client


def register_api_routes(app):
    """API 라우트를 FastAPI 앱에 등록"""

    @app.post("/api/lookup")
    async def lookup_address(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
        """주소 조회 API"""
        try:
            data = await request.json()
            if not isinstance(data, dict):
                data = {}
            result = await lookup(str(data.get("query") or ""), data.get("network") or AUTO, client=client)
            return JSONResponse(content=result.to_response())
        except ExplorerError as e:
            logger.debug(f"조회 요청 거부 ({e.status_code}): {e.message}")
            return JSONResponse(status_code=e.status_code, content={"ok": False, "error": e.message})
        except json.JSONDecodeError as e:
            logger.warning(f"조회 요청 본문 파싱 실패: {e}")
            return JSONResponse(status_code=500, content={"ok": False, "error": "Server error"})
        except Exception as e:
            logger.error(f"조회 API 오류: {e}", exc_info=True)
            return JSONResponse(status_code=500, content={"ok": False, "error": "Server error"})

    @app.get("/api/networks")
    async def get_networks():
        """지원하는 네트워크 목록 조회 API"""
        networks = []
        for network, cfg in get_chain_configs().items():
            networks.append({
                "network": network.value,
                "name": cfg["name"],
                "symbol": cfg["symbol"],
                "explorer": cfg["explorer_address"],
            })
        return JSONResponse(content={"ok": True, "networks": networks})
