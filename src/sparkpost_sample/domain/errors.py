"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from typing import Any

import orjson


class ConfigurationError(Exception):
    """Missing, empty, or invalid configuration value.

    Raised before any network call is made. ``variable`` names the
    environment variable or setting that caused the failure so the CLI can
    point the user at it.

    Example:
        >>> err = ConfigurationError("SPARKPOST_API_KEY must be defined", variable="SPARKPOST_API_KEY")
        >>> err.variable
        'SPARKPOST_API_KEY'
        >>> str(err)
        'SPARKPOST_API_KEY must be defined'
    """

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable


class TransportError(Exception):
    """The request never produced a complete HTTP response.

    Covers DNS/connect failures, TLS failures, truncated responses, and
    request bodies that could not be encoded as JSON.

    Example:
        >>> err = TransportError("Connection refused", method="POST", url="https://api.example.com/templates")
        >>> err.method, err.url
        ('POST', 'https://api.example.com/templates')
    """

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class TransportTimeoutError(TransportError):
    """The request did not complete within its overall deadline."""


class ServiceError(Exception):
    """A step of the sample flow failed after the server answered.

    Carries the HTTP status and the raw response body for logging.

    Attributes:
        operation: Short label of the failed step (``"template"`` or ``"transmission"``).
        status_code: HTTP status returned by the server.
        body: Raw response body text.
    """

    def __init__(self, message: str, *, operation: str, status_code: int, body: str) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.body = body


class HttpError(ServiceError):
    """The server answered with a status other than 200.

    Example:
        >>> err = HttpError(
        ...     "Could not create template.",
        ...     operation="template",
        ...     status_code=422,
        ...     body='{"errors": [{"message": "name conflict"}]}',
        ... )
        >>> err.status_code
        422
        >>> err.api_messages
        ['name conflict']
    """

    @property
    def api_messages(self) -> list[str]:
        """Return the ``errors[].message`` entries of a SparkPost error body.

        A ``description`` is appended to its message when present. Bodies that
        are not JSON, or do not follow the error shape, yield an empty list.
        """
        try:
            payload: Any = orjson.loads(self.body)
        except orjson.JSONDecodeError:
            return []
        if not isinstance(payload, dict):
            return []
        errors: Any = payload.get("errors")
        if not isinstance(errors, list):
            return []

        messages: list[str] = []
        for entry in errors:
            if not isinstance(entry, dict) or not entry.get("message"):
                continue
            message = str(entry["message"])
            description = entry.get("description")
            if description:
                message = f"{message}: {description}"
            messages.append(message)
        return messages


class ParseError(ServiceError):
    """A 200 response whose body is not JSON or lacks the required fields."""


__all__ = [
    "ConfigurationError",
    "HttpError",
    "ParseError",
    "ServiceError",
    "TransportError",
    "TransportTimeoutError",
]
