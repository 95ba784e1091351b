"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class LivefyreAPISettings(BaseModel):
    """URL templates for the StreamHub endpoints.

    Placeholders: {networkName}, {siteId}, {articleIdBase64},
    {collectionId}, {commentId}, {pageNumber}.
    """
    create_collection_url: str = (
        "https://{networkName}.quill.fyre.co/api/v3.0/site/{siteId}"
        "/collection/create/?sync=1"
    )
    collection_info_plus_url: str = (
        "https://{networkName}.bootstrap.fyre.co/bs3/v3.1/{networkName}.fyre.co"
        "/{siteId}/{articleIdBase64}/init"
    )
    comments_by_page_url: str = (
        "https://{networkName}.bootstrap.fyre.co/bs3/v3.1/{networkName}.fyre.co"
        "/{siteId}/{articleIdBase64}/{pageNumber}.json"
    )
    unfollow_collection_url: str = (
        "https://{networkName}.quill.fyre.co/api/v3.0/collection/{collectionId}/unfollow/"
    )
    post_comment_url: str = (
        "https://{networkName}.quill.fyre.co/api/v3.0/collection/{collectionId}/post/"
    )
    delete_comment_url: str = (
        "https://{networkName}.quill.fyre.co/api/v3.0/message/{commentId}/delete"
    )


class LivefyreSettings(BaseModel):
    """Livefyre network settings."""
    network_name: str = "livefyre"
    api: LivefyreAPISettings = Field(default_factory=LivefyreAPISettings)


class HTTPSettings(BaseModel):
    """Outbound HTTP settings."""
    request_timeout: float = 30.0
    slow_response_ms: int = 5000
    user_agent: str = "comment-creation-service/1.1.0"


class Settings(BaseModel):
    """Top-level application settings."""
    livefyre: LivefyreSettings = Field(default_factory=LivefyreSettings)
    http: HTTPSettings = Field(default_factory=HTTPSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from a YAML file, falling back to defaults.

        Environment variables override whatever the file provides.
        """
        settings_path = path or SETTINGS_FILE
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)
        settings._apply_env_overrides()
        return settings

    def _apply_env_overrides(self) -> None:
        if name := os.getenv("LIVEFYRE_NETWORK_NAME"):
            self.livefyre.network_name = name
        for field_name in LivefyreAPISettings.model_fields:
            if url := os.getenv(f"LIVEFYRE_{field_name.upper()}"):
                setattr(self.livefyre.api, field_name, url)
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.http.request_timeout = float(timeout)
        if slow_ms := os.getenv("SLOW_RESPONSE_MS"):
            self.http.slow_response_ms = int(slow_ms)
