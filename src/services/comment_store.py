"""
댓글 저장소

(network, address) 키마다 최근 댓글 목록(최대 200개)과 이미 작성한 클라이언트
IP 해시 집합을 가진다. "IP 확인"과 "IP 기록 + 댓글 추가"는 키 단위로 원자적이다.
"""
import logging
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from explorer import config, mongodb_client
from explorer.models import Comment

from .errors import DuplicateSubmission

logger = logging.getLogger(__name__)


def key_for(network: str, address: str) -> str:
    return f"comments:{network}:{address}"


class CommentStore(ABC):
    """댓글 저장소 인터페이스"""

    name: str = "base"

    def __init__(self, history_limit: Optional[int] = None):
        self.history_limit = history_limit or config.COMMENT_HISTORY_LIMIT

    @abstractmethod
    async def list_comments(self, network: str, address: str, ip_hash: str) -> tuple:
        """(댓글 목록, 작성 가능 여부)"""

    @abstractmethod
    async def add_if_absent(self, network: str, address: str, ip_hash: str, comment: Comment) -> list:
        """IP 해시가 없을 때만 기록하고 댓글을 추가한 뒤 전체 목록 반환

        Raises:
            DuplicateSubmission: 이미 기록된 IP 해시 (아무것도 변경하지 않음)
        """


class MemoryCommentStore(CommentStore):
    """프로세스 메모리 저장소 (재시작 시 소멸, 여러 프로세스 간 공유 안 됨)"""

    name = "memory"

    def __init__(self, history_limit: Optional[int] = None):
        super().__init__(history_limit)
        self._comments: dict = {}
        self._ip_hashes: dict = {}
        self._locks: dict = defaultdict(threading.Lock)
        self._registry_lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks[key]

    def _existing_lock(self, key: str) -> Optional[threading.Lock]:
        # 조회만으로는 키 상태를 만들지 않는다
        with self._registry_lock:
            return self._locks.get(key)

    async def list_comments(self, network: str, address: str, ip_hash: str) -> tuple:
        key = key_for(network, address)
        lock = self._existing_lock(key)
        if lock is None:
            return [], True
        with lock:
            comments = list(self._comments.get(key, []))
            can_post = ip_hash not in self._ip_hashes.get(key, set())
        return comments, can_post

    async def add_if_absent(self, network: str, address: str, ip_hash: str, comment: Comment) -> list:
        key = key_for(network, address)
        with self._lock_for(key):
            ips = self._ip_hashes.setdefault(key, set())
            if ip_hash in ips:
                raise DuplicateSubmission()
            ips.add(ip_hash)
            comments = self._comments.get(key, []) + [comment]
            self._comments[key] = comments[-self.history_limit:]
            return list(self._comments[key])


class MongoCommentStore(CommentStore):
    """MongoDB 저장소 (키당 문서 하나)

    문서: {_id, network, address, comments: [...], ip_hashes: [...]}
    중복 방지는 ip_hashes 에 해시가 없는 문서만 대상으로 하는 단일 upsert 로 한다.
    해시가 이미 있으면 필터가 매칭되지 않아 같은 _id 로 삽입을 시도하고
    DuplicateKeyError 가 발생한다.
    """

    name = "mongodb"

    def __init__(self, collection=None, history_limit: Optional[int] = None):
        super().__init__(history_limit)
        self._collection = collection

    @property
    def collection(self):
        collection = self._collection if self._collection is not None else mongodb_client.comments_collection
        if collection is None:
            raise RuntimeError("MongoDB가 연결되지 않았습니다.")
        return collection

    async def list_comments(self, network: str, address: str, ip_hash: str) -> tuple:
        doc = await self.collection.find_one({"_id": key_for(network, address)})
        if not doc:
            return [], True
        comments = [Comment.model_validate(c) for c in doc.get("comments", [])]
        return comments, ip_hash not in doc.get("ip_hashes", [])

    async def add_if_absent(self, network: str, address: str, ip_hash: str, comment: Comment) -> list:
        key = key_for(network, address)
        query = {"_id": key, "ip_hashes": {"$ne": ip_hash}}
        update = {
            "$setOnInsert": {"network": network, "address": address},
            "$addToSet": {"ip_hashes": ip_hash},
            "$push": {"comments": {"$each": [comment.to_response()], "$slice": -self.history_limit}},
        }
        try:
            doc = await self.collection.find_one_and_update(
                query, update, upsert=True, return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError as e:
            # 다른 클라이언트와 동시에 첫 문서를 만든 경우는 중복이 아니다
            if await self.collection.find_one({"_id": key, "ip_hashes": ip_hash}, {"_id": 1}):
                raise DuplicateSubmission(original_error=e) from e
            doc = await self.collection.find_one_and_update(
                query, update, return_document=ReturnDocument.AFTER
            )
            if doc is None:
                raise DuplicateSubmission(original_error=e) from e

        return [Comment.model_validate(c) for c in (doc or {}).get("comments", [])]


def create_comment_store(mongo_connected: bool) -> CommentStore:
    """설정(COMMENT_STORAGE)에 따라 저장소 선택"""
    mode = config.COMMENT_STORAGE
    if mode == "memory":
        return MemoryCommentStore()
    if mongo_connected:
        return MongoCommentStore()
    if mode == "mongodb":
        logger.warning("COMMENT_STORAGE=mongodb 이지만 MongoDB 연결이 없어 메모리 저장소를 사용합니다.")
    return MemoryCommentStore()
