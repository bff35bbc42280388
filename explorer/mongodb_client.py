"""
MongoDB Atlas 연결 및 데이터베이스 클라이언트 모듈
"""
import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConnectionFailure, PyMongoError

from .configuration import config

logger = logging.getLogger(__name__)
# 루트 로거로 전파되도록 설정
logger.propagate = True
logger.handlers.clear()


class MongoDBClient:
    """MongoDB Atlas 비동기 클라이언트"""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db = None
        self.comments_collection = None

    @property
    def is_connected(self) -> bool:
        return self.comments_collection is not None

    async def connect(self) -> bool:
        """MongoDB Atlas에 연결"""
        if not config.mongodb_configured():
            logger.warning("MongoDB URI가 설정되지 않았습니다. MONGODB_URI 환경변수를 설정해주세요.")
            return False

        try:
            self.client = AsyncIOMotorClient(
                config.MONGODB_URI,
                serverSelectionTimeoutMS=5000,  # 5초 타임아웃
                connectTimeoutMS=5000,
                socketTimeoutMS=5000,
                maxPoolSize=10,
                minPoolSize=1
            )

            await asyncio.wait_for(
                self.client.admin.command('ping'),
                timeout=5.0
            )

            self.db = self.client[config.MONGODB_DATABASE]
            self.comments_collection = self.db[config.MONGODB_COMMENTS_COLLECTION]

            await self.comments_collection.create_index([("network", 1), ("address", 1)])

            logger.info(f"MongoDB Atlas 연결 성공: {config.MONGODB_DATABASE}")
            return True

        except asyncio.TimeoutError:
            logger.warning("MongoDB 연결 타임아웃 (5초)")
        except ConnectionFailure as e:
            logger.error(f"MongoDB 연결 실패: {e}")
        except PyMongoError as e:
            logger.error(f"MongoDB 연결 오류: {e}")

        self._reset()
        return False

    def _reset(self):
        if self.client:
            self.client.close()
        self.client = None
        self.db = None
        self.comments_collection = None

    async def disconnect(self):
        """MongoDB 연결 종료"""
        if self.client:
            self._reset()
            logger.info("MongoDB 연결 종료")


# 전역 인스턴스
mongodb_client = MongoDBClient()
