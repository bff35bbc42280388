"""
입력 문자열 분류 (주소/트랜잭션, 네트워크 자동 감지)
"""
import logging
import re
from typing import Optional

from explorer.models import AUTO, ClassificationResult, Kind, Network

logger = logging.getLogger(__name__)

ETH_TX_PATTERN = re.compile(r'^0x[0-9a-fA-F]{64}$')
ETH_ADDRESS_PATTERN = re.compile(r'^0x[0-9a-fA-F]{40}$')
# BTC/LTC/TRON 공통 64자 hex. 네트워크는 분류 단계에서 정하지 않는다.
HEX64_PATTERN = re.compile(r'^[0-9a-fA-F]{64}$')
BTC_LEGACY_PATTERN = re.compile(r'^(1|3)[a-zA-Z0-9]{25,62}$')
BTC_BECH32_PATTERN = re.compile(r'^bc1[ac-hj-np-z02-9]{11,90}$', re.IGNORECASE)
LTC_LEGACY_PATTERN = re.compile(r'^(L|M)[a-zA-Z0-9]{25,62}$')
LTC_BECH32_PATTERN = re.compile(r'^ltc1[ac-hj-np-z02-9]{11,90}$', re.IGNORECASE)
TRON_ADDRESS_PATTERN = re.compile(r'^T[a-zA-Z0-9]{33}$')
TON_FRIENDLY_PATTERN = re.compile(r'^(EQ|UQ|kQ)[A-Za-z0-9_-]{46}$')
TON_RAW_PATTERN = re.compile(r'^-?\d+:[0-9a-fA-F]{64}$')

# 순서가 중요하다 (패턴이 서로 겹침). 처음 일치하는 규칙을 사용.
DETECTION_RULES = (
    (ETH_TX_PATTERN, Kind.TX, Network.ETH),
    (ETH_ADDRESS_PATTERN, Kind.ADDRESS, Network.ETH),
    (HEX64_PATTERN, Kind.TX, Network.UNKNOWN),
    (BTC_LEGACY_PATTERN, Kind.ADDRESS, Network.BTC),
    (BTC_BECH32_PATTERN, Kind.ADDRESS, Network.BTC),
    (LTC_LEGACY_PATTERN, Kind.ADDRESS, Network.LTC),
    (LTC_BECH32_PATTERN, Kind.ADDRESS, Network.LTC),
    (TRON_ADDRESS_PATTERN, Kind.ADDRESS, Network.TRON),
    (TON_FRIENDLY_PATTERN, Kind.ADDRESS, Network.TON),
    (TON_RAW_PATTERN, Kind.ADDRESS, Network.TON),
)

UNKNOWN_RESULT = ClassificationResult(kind=Kind.UNKNOWN, network=Network.UNKNOWN)


def detect_input(raw: Optional[str]) -> ClassificationResult:
    """자동 감지 모드 분류"""
    value = (raw or "").strip()
    if not value:
        return UNKNOWN_RESULT

    for pattern, kind, network in DETECTION_RULES:
        if pattern.match(value):
            return ClassificationResult(kind=kind, network=network)

    logger.debug(f"입력 형식 감지 실패: {value[:20]}...")
    return UNKNOWN_RESULT


def normalize_forced_network(forced: Optional[str]) -> str:
    """요청의 network 값을 Network 값 또는 AUTO 로 정리"""
    value = str(forced or AUTO).strip().upper()
    if value in (n.value for n in Network if n != Network.UNKNOWN):
        return value
    return AUTO


def classify(raw: Optional[str], forced: Optional[str] = AUTO) -> ClassificationResult:
    """입력 분류

    네트워크가 강제되면 해당 네트워크의 관례 안에서만 kind 를 추론하며,
    입력이 실제로 그 네트워크 문법을 따르는지는 다시 검증하지 않는다.
    """
    value = (raw or "").strip()
    network = normalize_forced_network(forced)
    if network == AUTO:
        return detect_input(value)

    if network == Network.ETH:
        kind = Kind.TX if ETH_TX_PATTERN.match(value) else Kind.ADDRESS
    elif network in (Network.BTC, Network.LTC, Network.TRON):
        kind = Kind.TX if HEX64_PATTERN.match(value) else Kind.ADDRESS
    else:
        # TON 트랜잭션 ID 는 형식이 제각각이라 주소로만 취급
        kind = Kind.ADDRESS

    result = ClassificationResult(kind=kind, network=Network(network))
    detected = detect_input(value)
    if detected.network not in (Network.UNKNOWN, result.network):
        logger.debug(f"강제 네트워크({network})와 감지 결과({detected.network})가 다릅니다. 강제 값 사용.")
    return result
