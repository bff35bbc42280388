"""
공용 테스트 픽스처
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from src.routers.api import get_http_client
from src.routers.comments import get_comment_store
from src.services.comment_store import MemoryCommentStore


class FakeUpstream:
    """httpx.MockTransport 용 라우팅 테이블

    (host, path) → JSON 응답 또는 상태코드. 등록되지 않은 경로는 404.
    "fail" 로 등록하면 연결 오류를 흉내 낸다.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, host: str, path: str, payload=None, status: int = 200):
        self.routes[(host, path)] = (payload, status)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self.routes.get((request.url.host, request.url.path))
        if entry is None:
            return httpx.Response(404, json={"error": "not found"})
        payload, status = entry
        if payload == "fail":
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(status, json=payload)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def price_payload(coin_id: str, usd: float) -> dict:
    return {coin_id: {"usd": usd}}


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def comment_store():
    return MemoryCommentStore()


@pytest.fixture
def api_client(upstream, comment_store):
    """업스트림과 댓글 저장소를 교체한 TestClient"""

    async def _client():
        async with upstream.client() as client:
            yield client

    app.dependency_overrides[get_http_client] = _client
    app.dependency_overrides[get_comment_store] = lambda: comment_store
    yield TestClient(app)
    app.dependency_overrides.clear()
