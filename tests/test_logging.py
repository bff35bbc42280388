"""
로깅 설정 테스트
"""
import logging

import httpx
import pytest

import main
from src.services.errors import UpstreamUnavailable
from src.services.http_client import fetch_json


def test_application_loggers_follow_configured_level():
    for name in ("explorer", "src", "main"):
        logger = logging.getLogger(name)
        assert logger.level == main.log_level
        assert logger.propagate is True
    # 업스트림 요청마다 찍히는 httpx 로그는 억제
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.asyncio
async def test_upstream_errors_are_logged_by_severity(upstream, caplog):
    upstream.add("api.blockcypher.com", "/v1/btc/main/addrs/missing", {}, status=404)
    upstream.add("api.blockcypher.com", "/v1/btc/main/addrs/broken", {}, status=503)

    caplog.set_level(logging.DEBUG, logger="src.services.http_client")
    async with upstream.client() as client:
        for path in ("missing", "broken"):
            with pytest.raises(UpstreamUnavailable):
                await fetch_json(client, f"https://api.blockcypher.com/v1/btc/main/addrs/{path}", "BTC")

    levels = {r.levelno for r in caplog.records if r.name == "src.services.http_client" and "HTTP" in r.getMessage()}
    assert logging.DEBUG in levels
    assert logging.WARNING in levels


@pytest.mark.asyncio
async def test_connection_errors_are_warnings(upstream, caplog):
    upstream.add("tonapi.io", "/v2/accounts/x", "fail")
    caplog.set_level(logging.DEBUG, logger="src.services.http_client")
    async with upstream.client() as client:
        with pytest.raises(UpstreamUnavailable) as exc:
            await fetch_json(client, "https://tonapi.io/v2/accounts/x", "TON")
    assert isinstance(exc.value.original_error, httpx.ConnectError)
    assert any(r.levelno == logging.WARNING for r in caplog.records)
