"""Error handling shared by the sample command.

Turns domain exceptions into a short stderr diagnostic, a DEBUG log record
with the structured details, and a ``SystemExit`` with the matching exit code.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, NoReturn

import rich_click as click

from sparkpost_sample.application.ports import InitLogging, LoadSettings
from sparkpost_sample.application.use_cases import TEMPLATE_FAILURE_MESSAGE, TRANSMISSION_FAILURE_MESSAGE
from sparkpost_sample.domain.errors import (
    ConfigurationError,
    HttpError,
    ParseError,
    TransportError,
    TransportTimeoutError,
)

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from sparkpost_sample.adapters.config.settings import SparkPostSettings

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES: dict[str, str] = {
    "template": TEMPLATE_FAILURE_MESSAGE,
    "transmission": TRANSMISSION_FAILURE_MESSAGE,
}


def init_logging_or_exit(config: Mapping[str, str], initializer: InitLogging) -> None:
    """Install console logging, or print the diagnostic and exit.

    Raises:
        SystemExit: When a ``SPARKPOST_LOG_*`` value is invalid.
    """
    try:
        initializer(config)
    except ConfigurationError as exc:
        _fail(exc, "Logging configuration rejected", [str(exc)], extra={"variable": exc.variable})


def load_settings_or_exit(config: Mapping[str, str], loader: LoadSettings) -> SparkPostSettings:
    """Validate settings, or print the diagnostic and exit before any request.

    Raises:
        SystemExit: When a required variable is missing or a value is invalid.
    """
    try:
        return loader(config)
    except ConfigurationError as exc:
        _fail(exc, "Configuration rejected", [str(exc)], extra={"variable": exc.variable})


def execute_with_sample_error_handling(operation: Callable[[], Any]) -> None:
    """Run the sample with unified error handling.

    Raises:
        SystemExit: On any error (unless DEVELOPMENT_MODE is set).
        Exception: Re-raised in development mode for debugging.

    Exception Priority Order:
        Exceptions are caught most specific first:

        1. HttpError: the failure message, the status, and the server's error messages
        2. ParseError: the failure message and what was wrong with the body
        3. TransportTimeoutError / TransportError: what failed and where
        4. Exception (catch-all): unexpected errors, logged with traceback

    Development Mode:
        Set the DEVELOPMENT_MODE environment variable to any truthy value to
        re-raise unexpected exceptions instead of catching them.
    """
    try:
        operation()
    except HttpError as exc:
        lines = [str(exc), f"Server returned HTTP {exc.status_code}."]
        lines.extend(f"  {message}" for message in exc.api_messages)
        _fail(
            exc,
            f"{exc.operation.capitalize()} create rejected",
            lines,
            extra={"status_code": exc.status_code, "body": exc.body},
        )
    except ParseError as exc:
        _fail(
            exc,
            f"{exc.operation.capitalize()} create response unreadable",
            [_FAILURE_MESSAGES.get(exc.operation, str(exc)), f"{exc}."],
            extra={"status_code": exc.status_code, "body": exc.body},
        )
    except TransportTimeoutError as exc:
        _fail(exc, "Request timed out", [f"Request timed out: {exc}"], extra={"url": exc.url})
    except TransportError as exc:
        _fail(exc, "Request failed", [f"Request failed: {exc}"], extra={"url": exc.url})
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _fail(exc, "Unexpected error", [f"Unexpected error - {exc}"], log_traceback=True)


def _fail(
    exc: Exception,
    log_message: str,
    user_lines: list[str],
    *,
    extra: dict[str, Any] | None = None,
    log_traceback: bool = False,
) -> NoReturn:
    """Log the details, print the diagnostic, and exit.

    Raises:
        SystemExit: Always raises with GENERAL_ERROR.
    """
    logger.debug(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__, **(extra or {})},
        exc_info=log_traceback,
    )
    for line in user_lines:
        click.echo(line, err=True)
    raise SystemExit(ExitCode.GENERAL_ERROR)


__all__ = [
    "execute_with_sample_error_handling",
    "init_logging_or_exit",
    "load_settings_or_exit",
]
