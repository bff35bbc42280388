"""
익스플로러 설정 관리
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)
# 루트 로거로 전파되도록 설정
logger.propagate = True
logger.handlers.clear()


class ExplorerConfiguration:
    """익스플로러 설정 클래스"""

    # ========== 실행 환경 ==========
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production").lower()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if ENVIRONMENT == "development" else "INFO").upper()
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # ========== 업스트림 API 설정 ==========
    # 모든 외부 호출에 적용되는 타임아웃 (초). 재시도는 하지 않는다.
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))
    USER_AGENT: str = os.getenv("USER_AGENT", "explorer-ui")

    COINGECKO_API_URL: str = os.getenv("COINGECKO_API_URL", "https://api.coingecko.com/api/v3")
    COINGECKO_API_KEY: Optional[str] = os.getenv("COINGECKO_API_KEY")
    TONAPI_URL: str = os.getenv("TONAPI_URL", "https://tonapi.io/v2")
    BLOCKCYPHER_API_URL: str = os.getenv("BLOCKCYPHER_API_URL", "https://api.blockcypher.com/v1")
    TRONSCAN_API_URL: str = os.getenv("TRONSCAN_API_URL", "https://apilist.tronscanapi.com/api")

    # 조회 개수 제한
    TX_HISTORY_LIMIT: int = int(os.getenv("TX_HISTORY_LIMIT", "30"))
    NFT_LIMIT: int = int(os.getenv("NFT_LIMIT", "24"))

    # 응답에 업스트림 원본 JSON을 포함할지 여부
    INCLUDE_RAW: bool = os.getenv("INCLUDE_RAW", "true").lower() == "true"

    # ========== 댓글 설정 ==========
    COMMENTS_SALT: str = os.getenv("COMMENTS_SALT", "pale-comments-salt")
    # auto | mongodb | memory
    COMMENT_STORAGE: str = os.getenv("COMMENT_STORAGE", "auto").lower()
    COMMENT_MAX_LENGTH: int = int(os.getenv("COMMENT_MAX_LENGTH", "500"))
    COMMENT_HISTORY_LIMIT: int = int(os.getenv("COMMENT_HISTORY_LIMIT", "200"))

    # ========== MongoDB 설정 ==========
    MONGODB_URI: Optional[str] = os.getenv("MONGODB_URI")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "explorer_db")
    MONGODB_COMMENTS_COLLECTION: str = os.getenv("MONGODB_COMMENTS_COLLECTION", "comments")

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT == "development"

    @classmethod
    def mongodb_configured(cls) -> bool:
        """MongoDB URI가 실제 값으로 설정되었는지 확인"""
        uri = cls.MONGODB_URI or ""
        return bool(uri) and "username:password" not in uri

    @classmethod
    def validate(cls) -> list:
        """설정 검증 후 경고 메시지 목록 반환"""
        warnings = []
        if cls.COMMENT_STORAGE not in ("auto", "mongodb", "memory"):
            warnings.append(f"알 수 없는 COMMENT_STORAGE 값: {cls.COMMENT_STORAGE} (auto로 처리)")
        if cls.COMMENT_STORAGE == "mongodb" and not cls.mongodb_configured():
            warnings.append("COMMENT_STORAGE=mongodb 이지만 MONGODB_URI가 설정되지 않았습니다.")
        if cls.COMMENTS_SALT == "pale-comments-salt" and not cls.is_development():
            warnings.append("COMMENTS_SALT가 기본값입니다. 운영 환경에서는 변경하세요.")
        if cls.HTTP_TIMEOUT <= 0 or cls.HTTP_TIMEOUT > 10:
            warnings.append(f"HTTP_TIMEOUT={cls.HTTP_TIMEOUT}초는 권장 범위(0~10초)를 벗어납니다.")
        return warnings


# 전역 설정 인스턴스
config = ExplorerConfiguration()
