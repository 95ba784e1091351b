"""Shared test fixtures for the comment service client."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def settings(monkeypatch, tmp_path) -> Settings:
    """Default settings with a known network name, unaffected by the local env."""
    for var in (
        "LIVEFYRE_NETWORK_NAME",
        "LIVEFYRE_CREATE_COLLECTION_URL",
        "LIVEFYRE_COLLECTION_INFO_PLUS_URL",
        "LIVEFYRE_COMMENTS_BY_PAGE_URL",
        "LIVEFYRE_UNFOLLOW_COLLECTION_URL",
        "LIVEFYRE_POST_COMMENT_URL",
        "LIVEFYRE_DELETE_COMMENT_URL",
        "REQUEST_TIMEOUT",
        "SLOW_RESPONSE_MS",
    ):
        monkeypatch.delenv(var, raising=False)
    settings = Settings.load(tmp_path / "missing.yaml")
    settings.livefyre.network_name = "testnet"
    return settings


def _build_response(status_code: int = 200, body=None) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw text) body."""
    resp = requests.Response()
    resp.status_code = status_code
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = str(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def mock_session() -> MagicMock:
    """A requests.Session stand-in; set .request.return_value per test."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = _build_response(200, {})
    return session


@pytest.fixture
def make_response():
    """Factory fixture: make_response(status_code, body) -> requests.Response."""
    return _build_response
