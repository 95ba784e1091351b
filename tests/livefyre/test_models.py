"""Tests for request config coercion and the error types."""

from __future__ import annotations

import pytest
import requests

from src.livefyre.errors import (
    CollectionNotFoundError,
    InvalidResponseError,
    LivefyreError,
    MissingFieldsError,
    TransportError,
)
from src.livefyre.models import HTTPResult, RequestConfig, is_present


class TestRequestConfig:
    def test_camel_case_keys(self):
        req = RequestConfig.coerce({"siteId": 303, "articleId": "a-1", "pageNumber": 2, "unknown": True})
        assert req.site_id == 303
        assert req.article_id == "a-1"
        assert req.page_number == 2

    def test_snake_case_keys(self):
        req = RequestConfig.coerce({"collection_id": "c", "comment_body": "hi"})
        assert req.collection_id == "c"
        assert req.comment_body == "hi"

    def test_instance_passes_through(self):
        req = RequestConfig(token="t")
        assert RequestConfig.coerce(req) is req

    @pytest.mark.parametrize("value", [None, "x", 1, ["siteId"]])
    def test_non_mapping_is_empty(self, value):
        assert RequestConfig.coerce(value) == RequestConfig()

    def test_values_pass_through_untouched(self):
        req = RequestConfig.coerce({"token": 12345, "checksum": ["a"], "collectionMeta": {"title": "t"}})
        assert req.token == 12345
        assert req.checksum == ["a"]
        assert req.collection_meta == {"title": "t"}
        assert req.has("token")

    def test_has(self):
        req = RequestConfig.coerce({"siteId": 0, "token": "", "pageNumber": 0, "collectionMeta": {}})
        assert not req.has("site_id")
        assert not req.has("token")
        assert req.has("page_number")
        assert req.has("collection_meta")
        assert not req.has("comment_id")


class TestIsPresent:
    @pytest.mark.parametrize("value", ["x", 1, [], {}, [0], True])
    def test_present(self, value):
        assert is_present(value)

    @pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
    def test_missing(self, value):
        assert not is_present(value)


class TestHTTPResult:
    @pytest.mark.parametrize("status, ok", [(200, True), (204, True), (299, True), (199, False), (301, False), (403, False)])
    def test_ok(self, status, ok):
        assert HTTPResult(status_code=status).ok is ok


class TestErrors:
    def test_missing_fields_to_dict(self):
        err = MissingFieldsError("'articleId' and 'siteId' should be provided.")
        assert err.to_dict() == {
            "statusCode": 400,
            "error": "'articleId' and 'siteId' should be provided.",
            "safeMessage": True,
        }
        assert isinstance(err.error, ValueError)

    def test_collection_not_found(self):
        body = {"code": 404, "msg": "Collection not found"}
        err = CollectionNotFoundError("Collection not found", response_body=body)
        assert err.status_code == 404
        assert err.to_dict()["responseBody"] == body
        assert "safeMessage" not in err.to_dict()

    def test_invalid_response_defaults(self):
        err = InvalidResponseError()
        assert err.status_code == 503
        assert str(err) == "Invalid response received from Livefyre."
        assert "responseBody" not in err.to_dict()

    def test_invalid_response_status_override(self):
        assert InvalidResponseError(status_code=401).status_code == 401

    def test_transport_error_message_from_cause(self):
        cause = requests.ConnectionError("refused")
        err = TransportError(error=cause)
        assert err.status_code == 503
        assert err.error is cause
        assert err.to_dict() == {"statusCode": 503, "error": "refused"}

    def test_remote_failure_has_no_error(self):
        err = LivefyreError("Livefyre request failed with HTTP 500.", status_code=500, response_body={"msg": "x"})
        assert err.to_dict() == {"statusCode": 500, "error": None, "responseBody": {"msg": "x"}}

    def test_collection_not_found_has_no_error(self):
        assert CollectionNotFoundError("Collection not found").to_dict()["error"] is None

    def test_all_are_livefyre_errors(self):
        for cls in (MissingFieldsError, CollectionNotFoundError, InvalidResponseError, TransportError):
            assert issubclass(cls, LivefyreError)
