import asyncio
import logging
import os

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from explorer import config, mongodb_client
from explorer.logging_config import configure_logging, uvicorn_log_config
from src.routers.api import register_api_routes
from src.routers.comments import register_comment_routes
from src.routers.utility import register_utility_routes
from src.services.comment_store import MemoryCommentStore, create_comment_store

# --- 로깅 ---
log_level = configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.info(f"로깅 초기화 (레벨: {config.LOG_LEVEL}, 환경: {config.ENVIRONMENT})")

for warning in config.validate():
    logger.warning(f"⚠️ 설정 경고: {warning}")

MONGODB_CONNECT_TIMEOUT = 5.0

# --- 앱 ---
app = FastAPI(title="Multi-Chain Address Lookup", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# 시작 이벤트에서 설정에 맞는 저장소로 교체된다
app.state.comment_store = MemoryCommentStore()


@app.on_event("startup")
async def select_comment_store():
    """MongoDB 연결을 시도하고 댓글 저장소를 고른다"""
    connected = False
    if config.COMMENT_STORAGE != "memory":
        try:
            connected = await asyncio.wait_for(mongodb_client.connect(), timeout=MONGODB_CONNECT_TIMEOUT)
        except asyncio.TimeoutError:
            logger.warning(f"MongoDB 연결 타임아웃 ({MONGODB_CONNECT_TIMEOUT}s)")
        if not connected:
            logger.warning("MongoDB 를 사용할 수 없습니다.")

    app.state.comment_store = create_comment_store(connected)
    logger.info(f"✅ 댓글 저장소: {app.state.comment_store.name}")


@app.on_event("shutdown")
async def close_connections():
    await mongodb_client.disconnect()


register_api_routes(app)
register_comment_routes(app)
register_utility_routes(app)


if __name__ == "__main__":
    debug = config.is_development()
    reload_enabled = debug and os.getenv("RELOAD", "false").lower() == "true"
    host = "127.0.0.1" if debug else "0.0.0.0"
    port = int(os.getenv("PORT", "8000"))

    logger.info(f"서버 시작: {host}:{port} (디버그: {debug}, 리로드: {reload_enabled})")
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        log_level=config.LOG_LEVEL.lower(),
        log_config=uvicorn_log_config(config.LOG_LEVEL),
        access_log=True,
        reload=reload_enabled,
    )
