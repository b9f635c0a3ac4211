"""In-memory SparkPost transport for testing.

Provides a transport that satisfies the same Protocol as the production
adapter but performs no network I/O.

Contents:
    * :class:`SparkPostSpy` - Records calls and replays queued responses.
    * :class:`RecordedCall` - One captured request.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import BaseModel

from sparkpost_sample.application.ports import ApiResponse
from sparkpost_sample.domain.models import to_payload

if TYPE_CHECKING:
    from ..config.settings import SparkPostSettings

#: Returned for a path that has no queued response.
UNQUEUED_STATUS = 404


@dataclass(frozen=True, slots=True)
class RecordedCall:
    """A request captured by :class:`SparkPostSpy`; ``body`` is the canonical JSON form."""

    method: str
    path: str
    body: dict[str, Any] | None


def _empty_calls() -> list[RecordedCall]:
    return []


def _empty_responses() -> dict[str, list[ApiResponse]]:
    return {}


def _empty_settings() -> list[SparkPostSettings]:
    return []


@dataclass
class SparkPostSpy:
    """Captures transport calls for test assertions.

    Each test should create its own SparkPostSpy to avoid cross-test pollution.
    Responses are queued per path and consumed in order.

    Attributes:
        calls: Every request in the order it was issued.
        responses: Queued responses keyed by endpoint path.
        opened_with: Settings passed to :meth:`open`, one entry per open.
        raise_exception: When set, :meth:`call` records the request, then raises this.

    Example:
        >>> spy = SparkPostSpy()
        >>> spy.queue("templates", 200, {"results": {"id": "tmpl_1"}})
        >>> spy.call("POST", "templates", {"name": "x"}).body
        '{"results":{"id":"tmpl_1"}}'
        >>> spy.paths
        ['templates']
    """

    calls: list[RecordedCall] = field(default_factory=_empty_calls)
    responses: dict[str, list[ApiResponse]] = field(default_factory=_empty_responses)
    opened_with: list[SparkPostSettings] = field(default_factory=_empty_settings)
    raise_exception: Exception | None = None

    def queue(self, path: str, status_code: int, body: str | Mapping[str, Any] | list[Any] = "") -> None:
        """Queue a response for the next call to ``path``; non-strings are JSON-encoded."""
        text = body if isinstance(body, str) else orjson.dumps(body).decode("utf-8")
        self.responses.setdefault(path, []).append(ApiResponse(status_code=status_code, body=text))

    @property
    def paths(self) -> list[str]:
        return [recorded.path for recorded in self.calls]

    def bodies_for(self, path: str) -> list[dict[str, Any] | None]:
        return [recorded.body for recorded in self.calls if recorded.path == path]

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.calls.clear()
        self.responses.clear()
        self.opened_with.clear()
        self.raise_exception = None

    def call(
        self,
        method: str,
        path: str,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Record the call and return the next queued response for ``path``.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        if body is None:
            payload = None
        elif isinstance(body, BaseModel):
            payload = to_payload(body)
        else:
            payload = dict(body)
        self.calls.append(RecordedCall(method=method, path=path, body=payload))

        if self.raise_exception is not None:
            raise self.raise_exception
        queued = self.responses.get(path)
        if not queued:
            return ApiResponse(
                status_code=UNQUEUED_STATUS,
                body=f'{{"errors": [{{"message": "no response queued for {path}"}}]}}',
            )
        return queued.pop(0)

    def open(self, settings: SparkPostSettings) -> AbstractContextManager[SparkPostSpy]:
        """Satisfy the OpenTransport protocol by handing out this spy."""
        self.opened_with.append(settings)
        return nullcontext(self)


__all__ = ["RecordedCall", "SparkPostSpy"]
