"""Livefyre StreamHub client for collections and comments.

Each operation checks its required request fields, resolves a URL
template, sends one HTTP request and turns the answer into either the
response body or a LivefyreError.

Usage:
    with LivefyreClient() as client:
        info = client.get_collection_info_plus({"siteId": 123, "articleId": "a-1"})
        client.post_comment({
            "collectionId": info["collectionSettings"]["collectionId"],
            "commentBody": "<p>Hello</p>",
            "token": user_token,
        })
"""

from __future__ import annotations

import base64
from typing import Any, Mapping

import requests

from src.common.config import Settings

from .errors import (
    COLLECTION_NOT_FOUND_MESSAGE,
    CollectionNotFoundError,
    InvalidResponseError,
    LivefyreError,
    MissingFieldsError,
)
from .http_client import HTTPClient
from .models import HTTPResult, RequestConfig, is_present

WRONG_DOMAIN_MESSAGE = "Wrong domain"


def encode_article_id(article_id: str | int) -> str:
    """Base64-encode an article id the way Livefyre expects in bootstrap URLs."""
    return base64.b64encode(str(article_id).encode("utf-8")).decode("ascii")


def build_url(template: str, **params: Any) -> str:
    """Substitute {placeholder} occurrences in a URL template.

    Every occurrence of each placeholder is replaced. Placeholders
    without a value are left untouched.
    """
    url = template
    for name, value in params.items():
        if value is None:
            continue
        url = url.replace("{" + name + "}", str(value))
    return url


class LivefyreClient:
    """Client for the six StreamHub endpoints used by the comment service."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Settings.load()
        self._http = HTTPClient(self.settings.http, session=session)

    @property
    def network_name(self) -> str:
        return self.settings.livefyre.network_name

    # --- Collections ---

    def create_collection(self, config: RequestConfig | Mapping | None) -> None:
        """Create a collection for an article.

        Requires collectionMeta and siteId; checksum is sent when given.

        Raises:
            LivefyreError: On missing fields, transport failure or a
                non-2xx/empty answer.
        """
        req = _require(
            config,
            "'collectionMeta' and 'siteId' should be provided.",
            "collection_meta", "site_id",
        )
        url = build_url(
            self.settings.livefyre.api.create_collection_url,
            networkName=self.network_name,
            siteId=req.site_id,
        )

        payload: dict[str, Any] = {"collectionMeta": req.collection_meta}
        if req.has("checksum"):
            payload["checksum"] = req.checksum

        result = self._http.post("createCollection", url, json=payload)
        self._raise_for_status(result)
        if result.body is None:
            raise InvalidResponseError()

    def get_collection_info_plus(self, config: RequestConfig | Mapping | None) -> dict:
        """Fetch collection settings and the head document for an article."""
        req = _require(
            config,
            "'articleId' and 'siteId' should be provided.",
            "article_id", "site_id",
        )
        url = build_url(
            self.settings.livefyre.api.collection_info_plus_url,
            networkName=self.network_name,
            siteId=req.site_id,
            articleIdBase64=encode_article_id(req.article_id),
        )

        result = self._http.get("getCollectionInfoPlus", url)
        self._raise_for_status(result)
        if result.body is None:
            raise InvalidResponseError()

        if _has_fields(result.body, "collectionSettings", "headDocument"):
            return result.body
        raise InvalidResponseError()

    def get_comments_by_page(self, config: RequestConfig | Mapping | None) -> dict:
        """Fetch one archived page of comments for an article."""
        req = _require(
            config,
            "'articleId', 'siteId', and 'pageNumber' should be provided.",
            "article_id", "site_id", "page_number",
        )
        url = build_url(
            self.settings.livefyre.api.comments_by_page_url,
            networkName=self.network_name,
            siteId=req.site_id,
            articleIdBase64=encode_article_id(req.article_id),
            pageNumber=req.page_number,
        )

        result = self._http.get("getCommentsByPage", url)
        self._raise_for_status(result)

        if _has_fields(result.body, "content", "authors"):
            return result.body
        raise InvalidResponseError()

    def unfollow_collection(self, config: RequestConfig | Mapping | None) -> dict:
        """Stop following a collection on behalf of the token's user."""
        req = _require(
            config,
            "'collectionId' and 'token' should be provided.",
            "collection_id", "token",
        )
        url = build_url(
            self.settings.livefyre.api.unfollow_collection_url,
            networkName=self.network_name,
            collectionId=req.collection_id,
        )

        result = self._http.post("unfollowCollection", url, data={"lftoken": req.token})
        self._raise_for_status(result)

        if _status_ok(result.body):
            return result.body

        # Livefyre reports some failures as 2xx with the real code in the body
        code = result.body.get("code") if isinstance(result.body, dict) else None
        if isinstance(code, bool) or not isinstance(code, int) or not code:
            code = None
        raise InvalidResponseError(
            status_code=code,
            response_body=result.body,
        )

    # --- Comments ---

    def post_comment(self, config: RequestConfig | Mapping | None) -> dict:
        """Post a comment to a collection."""
        req = _require(
            config,
            "'collectionId', 'commentBody' and 'token' should be provided.",
            "collection_id", "token", "comment_body",
        )
        url = build_url(
            self.settings.livefyre.api.post_comment_url,
            networkName=self.network_name,
            collectionId=req.collection_id,
        )

        result = self._http.post(
            "postComment",
            url,
            data={"lftoken": req.token, "body": req.comment_body},
        )
        self._raise_for_status(result, remap_wrong_domain=True)

        body = result.body
        if _status_ok(body):
            data = body.get("data")
            messages = data.get("messages") if isinstance(data, dict) else None
            if isinstance(messages, list) and messages:
                return body
        raise InvalidResponseError(response_body=body)

    def delete_comment(self, config: RequestConfig | Mapping | None) -> dict:
        """Delete a comment from a collection."""
        req = _require(
            config,
            "'collectionId', 'commentId' and 'token' should be provided.",
            "collection_id", "token", "comment_id",
        )
        url = build_url(
            self.settings.livefyre.api.delete_comment_url,
            networkName=self.network_name,
            commentId=req.comment_id,
        )

        result = self._http.post(
            "deleteComment",
            url,
            data={"lftoken": req.token, "collection_id": req.collection_id},
        )
        self._raise_for_status(result, remap_wrong_domain=True)

        if _status_ok(result.body):
            return result.body
        raise InvalidResponseError(response_body=result.body)

    # --- Response handling ---

    def _raise_for_status(
        self,
        result: HTTPResult,
        remap_wrong_domain: bool = False,
    ) -> None:
        """Raise for non-2xx answers, passing the remote status through."""
        if result.ok:
            return

        body = result.body
        if (
            remap_wrong_domain
            and result.status_code == 403
            and isinstance(body, dict)
            and body.get("msg") == WRONG_DOMAIN_MESSAGE
        ):
            raise CollectionNotFoundError(
                COLLECTION_NOT_FOUND_MESSAGE,
                response_body={**body, "code": 404, "msg": COLLECTION_NOT_FOUND_MESSAGE},
            )

        raise LivefyreError(
            f"Livefyre request failed with HTTP {result.status_code}.",
            status_code=result.status_code,
            response_body=body,
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> LivefyreClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _require(config: Any, message: str, *fields: str) -> RequestConfig:
    """Coerce the request config and make sure the given fields are present."""
    req = RequestConfig.coerce(config)
    if not all(req.has(name) for name in fields):
        raise MissingFieldsError(message)
    return req


def _has_fields(body: Any, *keys: str) -> bool:
    return isinstance(body, dict) and all(is_present(body.get(key)) for key in keys)


def _status_ok(body: Any) -> bool:
    return isinstance(body, dict) and body.get("status") == "ok"
