"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` (or method) signature that the
production adapters and the in-memory test doubles both satisfy through
structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Adapter types (``SparkPostSettings``)
    are imported under ``TYPE_CHECKING`` only, so the application layer does
    not depend on adapters at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..adapters.config.settings import SparkPostSettings

#: Status the server returns for a successful create.
HTTP_OK = 200


def _empty_headers() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Raw HTTP response handed back by a transport.

    The transport never interprets the status; callers decide what it means.

    Example:
        >>> ApiResponse(status_code=200, body='{"results": {}}').ok
        True
        >>> ApiResponse(status_code=422, body="").ok
        False
    """

    status_code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=_empty_headers)

    @property
    def ok(self) -> bool:
        return self.status_code == HTTP_OK


class Transport(Protocol):
    """Perform one authenticated JSON request against the SparkPost API."""

    def call(
        self,
        method: str,
        path: str,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> ApiResponse: ...


class GetConfig(Protocol):
    """Load the layered configuration mapping."""

    def __call__(self, *, start_dir: str | None = ...) -> Mapping[str, str]: ...


class LoadSettings(Protocol):
    """Build validated SparkPost settings from a configuration mapping."""

    def __call__(self, config: Mapping[str, str]) -> SparkPostSettings: ...


class OpenTransport(Protocol):
    """Open a transport for the given settings; closing it releases the connection."""

    def __call__(self, settings: SparkPostSettings) -> AbstractContextManager[Transport]: ...


class InitLogging(Protocol):
    """Initialize console logging with the provided configuration."""

    def __call__(self, config: Mapping[str, str]) -> None: ...


__all__ = [
    "HTTP_OK",
    "ApiResponse",
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "OpenTransport",
    "Transport",
]
