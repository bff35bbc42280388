"""
TON 주소 정규화

하나의 계정이 raw 형식(`0:abcd...`)과 여러 friendly 형식(EQ.../UQ.../kQ...)으로
표현되므로, 비교는 항상 raw 정규형(`<workchain>:<소문자 hex>`)으로 한다.

friendly 형식 바이트 구성 (base64url 디코딩 후 36바이트):
    [tag(1)][workchain(1, signed)][hash(32)][crc16(2)]
"""
import base64
import binascii
import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

RAW_PATTERN = re.compile(r'^(-?\d+):([0-9a-fA-F]{64})$')

TAG_BOUNCEABLE = 0x11
TAG_NON_BOUNCEABLE = 0x51
TAG_TESTNET_FLAG = 0x80
FRIENDLY_BYTES = 36


def _crc16(data: bytes) -> bytes:
    # CRC16/XMODEM (초기값 0)
    return binascii.crc_hqx(data, 0).to_bytes(2, "big")


def _decode_friendly(value: str) -> Optional[Tuple[int, bytes]]:
    """friendly 형식을 (workchain, hash) 로. 형식이 맞지 않으면 None"""
    if len(value) != 48:
        return None
    text = value.replace("-", "+").replace("_", "/")
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return None
    if len(data) != FRIENDLY_BYTES:
        return None
    if data[0] & ~TAG_TESTNET_FLAG not in (TAG_BOUNCEABLE, TAG_NON_BOUNCEABLE):
        return None
    if _crc16(data[:34]) != data[34:]:
        return None
    workchain = int.from_bytes(data[1:2], "big", signed=True)
    return workchain, data[2:34]


def parse(value: Optional[str]) -> Optional[Tuple[int, bytes]]:
    """raw 또는 friendly 형식을 (workchain, hash) 로. 실패하면 None"""
    text = (value or "").strip()
    if not text:
        return None
    match = RAW_PATTERN.match(text)
    if match:
        workchain = int(match.group(1))
        if not -128 <= workchain <= 127:
            return None
        return workchain, bytes.fromhex(match.group(2))
    return _decode_friendly(text)


def to_raw(value: Optional[str]) -> str:
    """raw 정규형. 디코딩에 실패하면 소문자 입력 문자열을 그대로 키로 쓴다 (예외 없음)"""
    text = (value or "").strip()
    parsed = parse(text)
    if parsed is None:
        if text:
            logger.debug(f"TON 주소 디코딩 실패, 원본 문자열 사용: {text[:20]}...")
        return text.lower()
    workchain, account_hash = parsed
    return f"{workchain}:{account_hash.hex()}"


def to_friendly(value: Optional[str], bounceable: bool = True, testnet: bool = False) -> str:
    """표시용 friendly 형식 (url-safe). 실패하면 입력을 그대로 반환"""
    text = (value or "").strip()
    parsed = parse(text)
    if parsed is None:
        return text
    workchain, account_hash = parsed
    tag = TAG_BOUNCEABLE if bounceable else TAG_NON_BOUNCEABLE
    if testnet:
        tag |= TAG_TESTNET_FLAG
    body = bytes([tag]) + workchain.to_bytes(1, "big", signed=True) + account_hash
    return base64.urlsafe_b64encode(body + _crc16(body)).decode("ascii")


def same_address(a: Optional[str], b: Optional[str]) -> bool:
    """두 표현이 같은 계정인지 (raw 정규형 비교)"""
    key_a, key_b = to_raw(a), to_raw(b)
    return bool(key_a) and key_a == key_b
