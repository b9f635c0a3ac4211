"""Authenticated JSON-over-HTTPS transport for the SparkPost REST API.

Provides :class:`SparkPostTransport`, a thin wrapper around one
``httpx.Client`` that encodes request bodies with orjson, attaches the API key,
and hands back the raw status and body without interpreting them.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
import orjson
from pydantic import BaseModel

from sparkpost_sample.application.ports import ApiResponse
from sparkpost_sample.domain.errors import TransportError, TransportTimeoutError
from sparkpost_sample.domain.models import to_payload

from ..config.settings import DEFAULT_BASE_URL, DEFAULT_LOG_LEVEL, DEFAULT_TIMEOUT, SparkPostSettings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
REDACTED = "[REDACTED]"


def _resolve_level(level: int | str) -> int:
    """Turn a level name or number into its numeric value.

    Example:
        >>> _resolve_level("warning")
        30
        >>> _resolve_level(10)
        10
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


class SparkPostTransport:
    """Issue authenticated JSON requests relative to the API base URL.

    Args:
        api_key: Sent verbatim as the ``Authorization`` header.
        base_url: API root; relative paths such as ``"templates"`` are joined onto it.
        timeout: Overall deadline in seconds for one request, from sending it
            to reading the last byte of the response. Each connect, write and
            read phase is also capped by it.
        log_level: Verbosity of this transport's request log, kept per instance.
            At DEBUG every request is logged with its method, URL, body, status
            and response body, provided the module logger is enabled for DEBUG.
        http_transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Example:
        >>> def handler(request: httpx.Request) -> httpx.Response:
        ...     return httpx.Response(200, json={"results": {"id": "tmpl_1"}})
        >>> with SparkPostTransport(api_key="k_test", http_transport=httpx.MockTransport(handler)) as transport:
        ...     transport.call("POST", "templates", {"name": "x"}).status_code
        200
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: int | str = DEFAULT_LOG_LEVEL,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._log_level = _resolve_level(log_level)
        self._client = httpx.Client(
            base_url=base_url,
            headers={"Authorization": api_key, "Accept": JSON_CONTENT_TYPE},
            timeout=timeout,
            transport=http_transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: SparkPostSettings,
        *,
        http_transport: httpx.BaseTransport | None = None,
    ) -> SparkPostTransport:
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            log_level=settings.log_level,
            http_transport=http_transport,
        )

    def __enter__(self) -> SparkPostTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _redact(self, text: str) -> str:
        """Replace any occurrence of the API key in ``text``.

        Example:
            >>> transport = SparkPostTransport(api_key="k_secret")
            >>> transport._redact('{"auth": "k_secret"}')
            '{"auth": "[REDACTED]"}'
        """
        return text.replace(self._api_key, REDACTED) if self._api_key else text

    def _logs_requests(self) -> bool:
        return self._log_level <= logging.DEBUG and logger.isEnabledFor(logging.DEBUG)

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        """Read the streamed body, giving up once ``deadline`` has passed.

        ``deadline`` is a :func:`time.monotonic` value. httpx bounds each
        read separately, so a server trickling bytes is cut off here.

        Raises:
            httpx.ReadTimeout: The deadline passed before the body was complete.
        """
        chunks: list[bytes] = []
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if time.monotonic() > deadline:
                raise httpx.ReadTimeout(f"response not complete within {self._timeout}s", request=response.request)
        return b"".join(chunks)

    def _encode(self, method: str, url: str, body: BaseModel | Mapping[str, Any]) -> bytes:
        try:
            payload = to_payload(body) if isinstance(body, BaseModel) else body
            return orjson.dumps(payload)
        except (TypeError, ValueError) as exc:
            raise TransportError(f"Could not encode request body as JSON: {exc}", method=method, url=url) from exc

    def call(
        self,
        method: str,
        path: str,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Send one request and return the raw response.

        Args:
            method: HTTP method, e.g. ``"POST"``.
            path: Endpoint path relative to the base URL.
            body: Domain record or JSON-ready mapping; omitted entirely when None.

        Returns:
            Status code, body text and headers, uninterpreted.

        Raises:
            TransportTimeoutError: A phase timed out, or the whole exchange
                took longer than ``timeout`` seconds.
            TransportError: The body could not be encoded, or the request
                failed before a complete response was read.
        """
        url = str(self._client.base_url.join(path))
        content: bytes | None = None
        headers: dict[str, str] = {}
        if body is not None:
            content = self._encode(method, url, body)
            headers["Content-Type"] = JSON_CONTENT_TYPE
        request_body = self._redact(content.decode("utf-8")) if content is not None else ""

        deadline = time.monotonic() + self._timeout
        try:
            with self._client.stream(method, path, content=content, headers=headers) as response:
                raw_body = self._read_body(response, deadline)
        except httpx.TimeoutException as exc:
            if self._logs_requests():
                logger.debug("%s %s timed out after %ss", method, url, self._timeout, exc_info=True)
            raise TransportTimeoutError(
                f"{method} {url} timed out after {self._timeout}s", method=method, url=url
            ) from exc
        except httpx.RequestError as exc:
            if self._logs_requests():
                logger.debug("%s %s failed", method, url, exc_info=True)
            raise TransportError(f"{method} {url} failed: {self._redact(str(exc))}", method=method, url=url) from exc

        response_body = raw_body.decode(response.encoding or "utf-8", errors="replace")
        if self._logs_requests():
            logger.debug(
                "%s %s\nRequest body: %s\nResponse status: %s\nResponse body: %s",
                method,
                url,
                request_body,
                response.status_code,
                self._redact(response_body),
                extra={
                    "method": method,
                    "url": url,
                    "request_headers": {**headers, "Accept": JSON_CONTENT_TYPE, "Authorization": REDACTED},
                    "status_code": response.status_code,
                },
            )
        return ApiResponse(
            status_code=response.status_code,
            body=response_body,
            headers=dict(response.headers),
        )


def open_transport(settings: SparkPostSettings) -> SparkPostTransport:
    """Open a production transport configured from ``settings``."""
    return SparkPostTransport.from_settings(settings)


__all__ = [
    "JSON_CONTENT_TYPE",
    "REDACTED",
    "SparkPostTransport",
    "open_transport",
]
