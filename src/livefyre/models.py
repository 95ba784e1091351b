"""Data models for Livefyre requests and raw HTTP results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestConfig(BaseModel):
    """Named parameters consumed by the client operations.

    Accepts the camelCase keys used by callers of the comment service
    (siteId, articleId, ...) as well as the snake_case field names.
    Values are passed through untouched; each operation only checks
    that the fields it needs are present.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    site_id: Any = Field(default=None, alias="siteId")
    collection_id: Any = Field(default=None, alias="collectionId")
    article_id: Any = Field(default=None, alias="articleId")
    token: Any = None
    page_number: Any = Field(default=None, alias="pageNumber")
    comment_body: Any = Field(default=None, alias="commentBody")
    comment_id: Any = Field(default=None, alias="commentId")
    collection_meta: Any = Field(default=None, alias="collectionMeta")
    checksum: Any = None

    @classmethod
    def coerce(cls, value: Any) -> RequestConfig:
        """Build a RequestConfig from a mapping, or an empty one for anything else."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            return cls()
        return cls.model_validate(dict(value))

    def has(self, field_name: str) -> bool:
        """Whether a field counts as provided.

        Follows JSON truthiness: None, "", 0 and False are missing,
        while empty lists and objects are present. page_number only
        needs to be set, since page 0 is the first page.
        """
        value = getattr(self, field_name)
        if field_name == "page_number":
            return value is not None
        return is_present(value)


def is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


@dataclass
class HTTPResult:
    """Outcome of a single HTTP exchange."""
    status_code: int
    body: Any = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
