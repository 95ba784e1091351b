"""Error types raised by the Livefyre client.

Every failure is a LivefyreError carrying the HTTP-style status the
service should answer with, plus whatever the remote side sent back.
"""

from __future__ import annotations

from typing import Any

INVALID_RESPONSE_MESSAGE = "Invalid response received from Livefyre."
COLLECTION_NOT_FOUND_MESSAGE = "Collection not found"


class LivefyreError(Exception):
    """Base error for all Livefyre client failures.

    Attributes:
        status_code: Status to report upstream (400, 404, 503, or the
            remote status for non-2xx answers).
        error: Underlying exception, if any.
        response_body: Parsed response body, if a response was received.
        safe_message: True when the message can be shown to end users.
    """

    default_status = 503

    def __init__(
        self,
        message: str = "",
        *,
        status_code: int | None = None,
        error: BaseException | None = None,
        response_body: Any = None,
        safe_message: bool = False,
    ) -> None:
        super().__init__(message or (str(error) if error else ""))
        self.status_code = status_code if status_code is not None else self.default_status
        self.error = error
        self.response_body = response_body
        self.safe_message = safe_message

    def to_dict(self) -> dict[str, Any]:
        """Uniform failure shape: statusCode, error, responseBody?, safeMessage?"""
        data: dict[str, Any] = {
            "statusCode": self.status_code,
            "error": str(self.error) if self.error is not None else None,
        }
        if self.response_body is not None:
            data["responseBody"] = self.response_body
        if self.safe_message:
            data["safeMessage"] = True
        return data


class MissingFieldsError(LivefyreError):
    """Required request fields were not provided. No request was sent."""

    default_status = 400

    def __init__(self, message: str) -> None:
        super().__init__(message, error=ValueError(message), safe_message=True)


class CollectionNotFoundError(LivefyreError):
    """Livefyre answered 403 "Wrong domain" for a collection."""

    default_status = 404


class InvalidResponseError(LivefyreError):
    """A 2xx response whose body lacks the expected fields."""

    def __init__(
        self,
        *,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            INVALID_RESPONSE_MESSAGE,
            status_code=status_code,
            error=ValueError(INVALID_RESPONSE_MESSAGE),
            response_body=response_body,
        )


class TransportError(LivefyreError):
    """The request never produced an HTTP response."""
