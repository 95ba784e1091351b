"""HTTP client for single-shot Livefyre calls with latency logging."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from src.common.config import HTTPSettings
from src.common.logging import DEFAULT_LOGGER, setup_logging

from .errors import TransportError
from .models import HTTPResult

setup_logging()
logger = logging.getLogger(f"{DEFAULT_LOGGER}.http")


class Timer:
    """Monotonic stopwatch started on creation."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    def elapsed_ms(self) -> float:
        return (time.monotonic() - self._start) * 1000.0


class HTTPClient:
    """Thin wrapper around a requests session.

    Sends exactly one request per call (no retries), logs how long the
    service took to answer, and hands back the status code together
    with the parsed body. Transport failures become TransportError.
    """

    def __init__(
        self,
        settings: HTTPSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or HTTPSettings()
        self._session = session or requests.Session()

    def get(self, service_name: str, url: str) -> HTTPResult:
        """Send a GET request."""
        return self.request(service_name, "GET", url)

    def post(
        self,
        service_name: str,
        url: str,
        data: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> HTTPResult:
        """Send a POST request, form-encoded (data) or JSON-encoded (json)."""
        return self.request(service_name, "POST", url, data=data, json=json)

    def request(
        self,
        service_name: str,
        method: str,
        url: str,
        data: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> HTTPResult:
        """Send a request and time it.

        Args:
            service_name: Operation name used in log lines.
            method: HTTP method.
            url: Fully resolved URL.
            data: Form fields.
            json: JSON payload.

        Returns:
            HTTPResult with status code, parsed body and elapsed time.

        Raises:
            TransportError: The request failed before a response arrived.
        """
        kwargs: dict[str, Any] = {
            "headers": {"User-Agent": self.settings.user_agent},
            "timeout": self.settings.request_timeout,
        }
        if data is not None:
            kwargs["data"] = data
        if json is not None:
            kwargs["json"] = json

        timer = Timer()
        try:
            resp = self._session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            self._log_elapsed(service_name, timer.elapsed_ms(), url)
            logger.warning("livefyre.%s error: %s", service_name, exc)
            raise TransportError(str(exc), error=exc) from exc

        elapsed = timer.elapsed_ms()
        self._log_elapsed(service_name, elapsed, url)
        result = HTTPResult(
            status_code=resp.status_code,
            body=parse_body(resp),
            elapsed_ms=elapsed,
        )
        if not result.ok:
            logger.warning(
                "livefyre.%s: HTTP %d from %s",
                service_name, result.status_code, url,
            )
        return result

    def _log_elapsed(self, service_name: str, elapsed_ms: float, url: str) -> None:
        if elapsed_ms > self.settings.slow_response_ms:
            logger.warning(
                "livefyre.%s: service high response time %dms %s",
                service_name, elapsed_ms, url,
            )
        else:
            logger.info(
                "livefyre.%s: service response time %dms %s",
                service_name, elapsed_ms, url,
            )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def parse_body(resp: requests.Response) -> Any:
    """Decode a response body: JSON when possible, raw text otherwise, None if empty."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text
