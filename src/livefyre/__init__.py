# Livefyre: StreamHub comment API client
"""
Livefyre client module for the comment creation service.

Wraps the StreamHub endpoints for collections (create, info, unfollow)
and comments (page listing, post, delete).
"""

from .client import LivefyreClient, build_url, encode_article_id
from .errors import (
    CollectionNotFoundError,
    InvalidResponseError,
    LivefyreError,
    MissingFieldsError,
    TransportError,
)
from .models import HTTPResult, RequestConfig

__all__ = [
    "LivefyreClient",
    "build_url",
    "encode_article_id",
    "CollectionNotFoundError",
    "InvalidResponseError",
    "LivefyreError",
    "MissingFieldsError",
    "TransportError",
    "HTTPResult",
    "RequestConfig",
]
