# Services package
from .chain_configs import get_chain_configs, explorer_url
from .input_classifier import classify, detect_input
from .lookup_service import lookup
from .comment_store import CommentStore, MemoryCommentStore, MongoCommentStore, create_comment_store
from .comment_service import list_comments, post_comment, sanitize_plain_text, client_ip, ip_hash
from .errors import ExplorerError, ValidationFailed, UnsupportedInput, UpstreamUnavailable, DuplicateSubmission

__all__ = [
    "get_chain_configs",
    "explorer_url",
    "classify",
    "detect_input",
    "lookup",
    "CommentStore",
    "MemoryCommentStore",
    "MongoCommentStore",
    "create_comment_store",
    "list_comments",
    "post_comment",
    "sanitize_plain_text",
    "client_ip",
    "ip_hash",
    "ExplorerError",
    "ValidationFailed",
    "UnsupportedInput",
    "UpstreamUnavailable",
    "DuplicateSubmission",
]
