"""Centralized logging initialization for all entry points.

Provides a single source of truth for console logging so module execution,
console scripts, and tests observe the same behaviour, while ensuring the
handler is installed exactly once.

Contents:
    * :class:`LoggingConfigModel` - ``SPARKPOST_LOG_*`` settings validation.
    * :func:`init_logging` - idempotent rich console handler installation.
    * :func:`shutdown_logging` - removes the handler again.

System Role:
    Lives in the adapters layer. Domain and application code only ever call
    ``logging.getLogger(__name__)``; this module decides where records go.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

from sparkpost_sample.domain.errors import ConfigurationError

_handler: RichHandler | None = None

_ENV_KEYS: dict[str, str] = {
    "level": "SPARKPOST_LOG_LEVEL",
    "rich_tracebacks": "SPARKPOST_LOG_RICH_TRACEBACKS",
    "show_time": "SPARKPOST_LOG_SHOW_TIME",
}


class LoggingConfigModel(BaseModel):
    """Validated console logging settings.

    Example:
        >>> LoggingConfigModel().level
        'DEBUG'
        >>> LoggingConfigModel(level="info").level
        'INFO'
    """

    model_config = ConfigDict(frozen=True)

    level: str = "DEBUG"
    rich_tracebacks: bool = True
    show_time: bool = True

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


def _build_logging_config(config: Mapping[str, str]) -> LoggingConfigModel:
    """Map ``SPARKPOST_LOG_*`` entries onto :class:`LoggingConfigModel`.

    Raises:
        ConfigurationError: A value fails validation; ``variable`` names it.

    Example:
        >>> _build_logging_config({"SPARKPOST_LOG_LEVEL": "warning", "SPARKPOST_LOG_SHOW_TIME": "false"}).show_time
        False
    """
    raw: dict[str, str] = {}
    for field_name, env_key in _ENV_KEYS.items():
        value = config.get(env_key, "").strip()
        if value:
            raw[field_name] = value

    try:
        return LoggingConfigModel.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        variable = _ENV_KEYS.get(str(first["loc"][0]) if first["loc"] else "", "SPARKPOST_LOG_LEVEL")
        raise ConfigurationError(f"{variable} is invalid: {first['msg']}", variable=variable) from exc


def is_initialised() -> bool:
    return _handler is not None


def init_logging(config: Mapping[str, str]) -> None:
    """Install a rich console handler on the root logger.

    Every entry point needs logging configured, but the handler must only be
    installed once regardless of how many times this function is called.
    Records go to stderr so stdout carries only the sample's own output.

    Args:
        config: Layered configuration mapping containing the optional
            ``SPARKPOST_LOG_LEVEL``, ``SPARKPOST_LOG_RICH_TRACEBACKS`` and
            ``SPARKPOST_LOG_SHOW_TIME`` entries. The level defaults to DEBUG.

    Raises:
        ConfigurationError: A ``SPARKPOST_LOG_*`` value is invalid. Nothing is
            installed in that case.

    Side Effects:
        Adds a handler to the root logger and sets its level. Quietens the
        ``httpx``/``httpcore`` loggers, whose request lines would duplicate
        the transport's own.
    """
    global _handler
    if _handler is not None:
        return

    parsed = _build_logging_config(config)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=parsed.rich_tracebacks,
        show_time=parsed.show_time,
        show_path=False,
        markup=False,
    )
    handler.setLevel(parsed.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(parsed.level)
    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    _handler = handler


def shutdown_logging() -> None:
    """Flush and detach the handler installed by :func:`init_logging`."""
    global _handler
    if _handler is None:
        return
    _handler.flush()
    logging.getLogger().removeHandler(_handler)
    _handler = None


__all__ = [
    "LoggingConfigModel",
    "init_logging",
    "is_initialised",
    "shutdown_logging",
]
