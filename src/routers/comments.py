"""
댓글 라우터
"""
import json
import logging

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.services.comment_service import client_ip, ip_hash, list_comments, post_comment
from src.services.comment_store import CommentStore, MemoryCommentStore
from src.services.errors import ExplorerError

logger = logging.getLogger(__name__)


def get_comment_store(request: Request) -> CommentStore:
    """시작 시 선택된 저장소. 아직 선택되지 않았으면 메모리 저장소를 붙인다"""
    store = getattr(request.app.state, "comment_store", None)
    if store is None:
        store = MemoryCommentStore()
        request.app.state.comment_store = store
    return store


def register_comment_routes(app):
    """댓글 라우트를 FastAPI 앱에 등록"""

    @app.get("/api/comments")
    async def get_comments(request: Request, network: str = "", address: str = "", store: CommentStore = Depends(get_comment_store)):
        """댓글 목록 조회 API"""
        try:
            result = await list_comments(store, network, address, ip_hash(client_ip(request)))
            return JSONResponse(content=result)
        except ExplorerError as e:
            return JSONResponse(status_code=e.status_code, content={"ok": False, "error": e.message})
        except Exception as e:
            logger.error(f"댓글 조회 API 오류: {e}", exc_info=True)
            return JSONResponse(status_code=500, content={"ok": False, "error": "Server error"})

    @app.post("/api/comments")
    async def create_comment(request: Request, store: CommentStore = Depends(get_comment_store)):
        """댓글 등록 API"""
        try:
            try:
                data = await request.json()
            except json.JSONDecodeError:
                data = None
            if not isinstance(data, dict):
                data = {}

            result = await post_comment(
                store,
                data.get("network"),
                data.get("address"),
                ip_hash(client_ip(request)),
                data.get("text"),
            )
            return JSONResponse(content=result)
        except ExplorerError as e:
            logger.debug(f"댓글 등록 거부 ({e.status_code}): {e.message}")
            return JSONResponse(status_code=e.status_code, content={"ok": False, "error": e.message})
        except Exception as e:
            logger.error(f"댓글 등록 API 오류: {e}", exc_info=True)
            return JSONResponse(status_code=500, content={"ok": False, "error": "Server error"})
