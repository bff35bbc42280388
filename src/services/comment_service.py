"""
댓글 서비스 (검증, 정화, 클라이언트 IP 해시)
"""
import hashlib
import logging
import re
import time
import uuid
from typing import Optional

from fastapi import Request

from explorer import config
from explorer.models import Comment

from .comment_store import CommentStore
from .errors import ValidationFailed

logger = logging.getLogger(__name__)

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
SCRIPT_BLOCK = re.compile(r'<\s*script[^>]*>[\s\S]*?<\s*/\s*script\s*>', re.IGNORECASE)
HTML_TAG = re.compile(r'<[^>]*>')
# 이미 만들어진 엔티티의 & 는 다시 이스케이프하지 않는다 (두 번 적용해도 결과가 같아야 함)
BARE_AMPERSAND = re.compile(r'&(?!(?:amp|lt|gt|quot|#39);)')

NETWORK_KEY_PATTERN = re.compile(r'^[A-Z0-9:_\-.]{2,80}$', re.IGNORECASE)
ADDRESS_KEY_PATTERN = re.compile(r'^[A-Za-z0-9:_\-.]{1,200}$')

IP_HEADERS = ("x-forwarded-for", "x-vercel-forwarded-for", "cf-connecting-ip", "x-real-ip")
DEFAULT_IP = "127.0.0.1"


def sanitize_plain_text(text: Optional[str]) -> str:
    """사용자 입력을 일반 텍스트로 정화 (저장형 XSS 방지)

    제어문자 제거 → <script> 블록 제거 → 나머지 태그 제거 → 공백 정리 →
    & < > " ' 엔티티 이스케이프. 결과에는 < 와 > 가 남지 않는다.
    """
    s = CONTROL_CHARS.sub("", str(text or ""))
    s = SCRIPT_BLOCK.sub("", s)
    s = HTML_TAG.sub("", s)
    s = s.strip()

    s = BARE_AMPERSAND.sub("&amp;", s)
    return (
        s.replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def client_ip(request: Request) -> str:
    """프록시 헤더를 우선으로 클라이언트 IP 추출"""
    for header in IP_HEADERS:
        value = request.headers.get(header)
        if value and value.split(",")[0].strip():
            return value.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return DEFAULT_IP


def ip_hash(ip: str) -> str:
    """솔트를 섞은 단방향 해시. 평문 IP 는 저장하지 않는다"""
    return hashlib.sha256(f"{ip}|{config.COMMENTS_SALT}".encode("utf-8")).hexdigest()


def normalize_key(network: Optional[str], address: Optional[str]) -> tuple:
    return str(network or "").strip().upper(), str(address or "").strip()


def validate_post(network: str, address: str, text: str):
    if not network or not address or not text:
        raise ValidationFailed("Missing network/address/text")
    if not NETWORK_KEY_PATTERN.match(network) or not ADDRESS_KEY_PATTERN.match(address):
        raise ValidationFailed("Invalid network/address")
    if len(text) > config.COMMENT_MAX_LENGTH:
        raise ValidationFailed(f"Comment too long (max {config.COMMENT_MAX_LENGTH} chars)")


async def list_comments(store: CommentStore, network: Optional[str], address: Optional[str], client_hash: str) -> dict:
    network, address = normalize_key(network, address)
    if not network or not address:
        raise ValidationFailed("Missing network or address")

    comments, can_post = await store.list_comments(network, address, client_hash)
    return {
        "ok": True,
        "network": network,
        "address": address,
        "canPost": can_post,
        "comments": [c.to_response() for c in comments],
        "storage": store.name,
    }


async def post_comment(store: CommentStore, network: Optional[str], address: Optional[str], client_hash: str, raw_text: Optional[str]) -> dict:
    """댓글 등록

    Raises:
        ValidationFailed: 필드 누락/형식 오류/길이 초과
        DuplicateSubmission: 같은 클라이언트가 이미 등록함 (저장소는 변경되지 않음)
    """
    network, address = normalize_key(network, address)
    text = sanitize_plain_text(raw_text)
    validate_post(network, address, text)

    comment = Comment(
        id=str(uuid.uuid4()),
        created_at=int(time.time() * 1000),
        text=text,
    )
    comments = await store.add_if_absent(network, address, client_hash, comment)
    logger.info(f"댓글 등록: {network}:{address[:16]}... (총 {len(comments)}개, storage={store.name})")

    return {
        "ok": True,
        "comment": comment.to_response(),
        "comments": [c.to_response() for c in comments],
        "canPost": False,
        "storage": store.name,
    }
