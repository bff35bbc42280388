"""
Utility 라우터 (health)
"""
import time

from fastapi import Request


def register_utility_routes(app):
    """Utility 라우트를 FastAPI 앱에 등록"""

    @app.get("/health")
    async def health_check(request: Request):
        """헬스 체크 엔드포인트"""
        store = getattr(request.app.state, "comment_store", None)
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "storage": store.name if store else None,
        }
