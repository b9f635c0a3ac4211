"""Tests for the console logging setup.

LoggingConfigModel validation and the handler lifecycle are tested here.
Log output of the sample flow is covered by the transport and CLI tests.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from sparkpost_sample.adapters.logging.setup import (
    LoggingConfigModel,
    init_logging,
    is_initialised,
    shutdown_logging,
)
from sparkpost_sample.domain.errors import ConfigurationError


def _rich_handlers() -> list[logging.Handler]:
    return [handler for handler in logging.getLogger().handlers if isinstance(handler, RichHandler)]


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces verbose defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.level == "DEBUG"
    assert parsed.rich_tracebacks is True
    assert parsed.show_time is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("raw", "expected"), [("info", "INFO"), (" Warning ", "WARNING"), ("ERROR", "ERROR")])
def test_logging_config_model_normalizes_level(raw: str, expected: str) -> None:
    assert LoggingConfigModel(level=raw).level == expected


@pytest.mark.os_agnostic
def test_logging_config_model_rejects_unknown_level() -> None:
    with pytest.raises(ValidationError, match="unknown log level"):
        LoggingConfigModel(level="chatty")


@pytest.mark.os_agnostic
def test_logging_config_model_parses_boolean_strings() -> None:
    parsed = LoggingConfigModel.model_validate({"rich_tracebacks": "false", "show_time": "0"})

    assert parsed.rich_tracebacks is False
    assert parsed.show_time is False


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("SPARKPOST_LOG_LEVEL", "chatty"),
        ("SPARKPOST_LOG_RICH_TRACEBACKS", "sometimes"),
        ("SPARKPOST_LOG_SHOW_TIME", "maybe"),
    ],
)
def test_init_logging_names_the_invalid_variable(variable: str, value: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        init_logging({variable: value})

    assert exc_info.value.variable == variable
    assert str(exc_info.value).startswith(f"{variable} is invalid")
    assert not is_initialised()
    assert _rich_handlers() == []


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
def test_init_logging_installs_one_handler_however_often_called() -> None:
    init_logging({})
    init_logging({"SPARKPOST_LOG_LEVEL": "ERROR"})

    assert is_initialised()
    assert len(_rich_handlers()) == 1
    assert _rich_handlers()[0].level == logging.DEBUG


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
def test_init_logging_honours_the_configured_level() -> None:
    init_logging({"SPARKPOST_LOG_LEVEL": "warning"})

    assert _rich_handlers()[0].level == logging.WARNING


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
def test_init_logging_quietens_http_client_loggers() -> None:
    init_logging({})

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
def test_shutdown_logging_removes_the_handler() -> None:
    init_logging({})

    shutdown_logging()

    assert not is_initialised()
    assert _rich_handlers() == []


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("managed_logging")
def test_shutdown_logging_without_init_is_harmless() -> None:
    shutdown_logging()

    assert not is_initialised()
