"""
업스트림 응답 파싱과 표시 형식 변환에 쓰이는 헬퍼 함수들
"""
import logging
import math
import re
from datetime import datetime
from typing import Any, Iterable, Optional

from .models import SENTINEL

logger = logging.getLogger(__name__)

FRACTION_PATTERN = re.compile(r"\.(\d+)")


# ========== 필드 폴백 체인 ==========

def _walk(obj: Any, path: str) -> Any:
    """'a.b.0.c' 형태의 경로를 따라 값을 꺼낸다. 중간에 끊기면 None"""
    current = obj
    for part in path.split("."):
        if isinstance(current, dict):
            current = current.get(part)
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            current = current[index] if index < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current


def pick(obj: Any, paths: Iterable[str], default: Any = None) -> Any:
    """경로 목록을 순서대로 시도해 처음으로 비어 있지 않은 스칼라 값을 반환

    업스트림마다 같은 필드가 다른 이름(snake_case/camelCase, 중첩 여부)으로
    내려오므로, 각 어댑터는 필드별로 경로 튜플을 선언하고 이 함수로 읽는다.
    dict/list 값은 건너뛴다.
    """
    for path in paths:
        value = _walk(obj, path)
        if value is None or isinstance(value, (dict, list)):
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return default


def pick_dict(obj: Any, paths: Iterable[str]) -> Optional[dict]:
    """경로 목록 중 처음으로 dict 인 값을 반환"""
    for path in paths:
        value = _walk(obj, path)
        if isinstance(value, dict):
            return value
    return None


def pick_list(obj: Any, paths: Iterable[str]) -> list:
    """경로 목록 중 처음으로 list 인 값을 반환. 없으면 빈 리스트"""
    for path in paths:
        value = _walk(obj, path)
        if isinstance(value, list):
            return value
    return []


# ========== 숫자 변환 ==========

def to_number(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """숫자 또는 숫자 문자열을 float 로. 변환 불가하거나 유한하지 않으면 default"""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_int(value: Any) -> Optional[int]:
    number = to_number(value, default=None)
    return int(number) if number is not None else None


def iso_to_epoch(value: Any) -> Optional[int]:
    """ISO-8601 문자열을 epoch 초로. 실패하면 None"""
    if not isinstance(value, str) or not value:
        return None
    text = value.strip().replace("Z", "+00:00")
    # 나노초 단위 소수부는 fromisoformat 이 처리하지 못한다
    match = FRACTION_PATTERN.search(text)
    if match:
        text = text[:match.start()] + "." + match.group(1)[:6].ljust(6, "0") + text[match.end():]
    try:
        return int(datetime.fromisoformat(text).timestamp())
    except ValueError:
        logger.debug(f"날짜 파싱 실패: {value}")
        return None


# ========== 표시 형식 ==========

def fmt(value: Optional[float], digits: int = 6) -> str:
    """고정 소수점으로 만든 뒤 끝의 0 을 제거. 값이 없으면 SENTINEL"""
    if value is None or not math.isfinite(value):
        return SENTINEL
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def fmt_amount(value: Optional[float], symbol: str, digits: int = 6) -> str:
    text = fmt(value, digits)
    return text if text == SENTINEL else f"{text} {symbol}"


def usd_str(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return SENTINEL
    return f"${fmt(value, 2)}"
