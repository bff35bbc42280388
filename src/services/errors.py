"""
서비스 계층 에러 정의
"""
from typing import Optional


class ExplorerError(Exception):
    """API 응답으로 변환되는 커스텀 에러"""
    status_code: int = 500

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class ValidationFailed(ExplorerError):
    """요청 필드 누락/형식 오류"""
    status_code = 400


class UnsupportedInput(ExplorerError):
    """분류는 되었지만 처리할 어댑터가 없음"""
    status_code = 400


class UpstreamUnavailable(ExplorerError):
    """업스트림 호출 실패. 어댑터 경계에서 폴백 결과로 흡수된다"""
    status_code = 502


class DuplicateSubmission(ExplorerError):
    """같은 클라이언트의 중복 댓글"""
    status_code = 403

    def __init__(self, message: str = "You have already posted a comment.", original_error: Optional[Exception] = None):
        super().__init__(message, original_error)
