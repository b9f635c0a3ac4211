"""SparkPost connection settings model and loader.

Provides the SparkPostSettings Pydantic model for validated, immutable
settings and the loader that builds it from the layered configuration
mapping returned by :func:`.loader.get_config`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sparkpost_sample.domain.errors import ConfigurationError
from sparkpost_sample.domain.models import EmailAddress

#: Prefix shared by every setting read from the environment.
ENV_PREFIX = "SPARKPOST_"

API_KEY_VARIABLE = f"{ENV_PREFIX}API_KEY"
SENDER_EMAIL_VARIABLE = f"{ENV_PREFIX}SENDER_EMAIL"

#: Where users create API keys.
CREDENTIALS_URL = "https://app.sparkpost.com/account/credentials"

DEFAULT_BASE_URL = "https://api.sparkpost.com/api/v1/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "DEBUG"


class SparkPostSettings(BaseModel):
    """Validated, immutable SparkPost settings.

    Example:
        >>> settings = SparkPostSettings(api_key="k_test", sender_email="demo@example.com")
        >>> settings.base_url
        'https://api.sparkpost.com/api/v1/'
        >>> settings.timeout
        30.0
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    sender_email: EmailAddress
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, v: str) -> str:
        """Relative endpoint paths are joined onto the base URL.

        Examples:
            >>> SparkPostSettings._ensure_trailing_slash("https://api.eu.sparkpost.com/api/v1")
            'https://api.eu.sparkpost.com/api/v1/'
        """
        return v if v.endswith("/") else f"{v}/"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> settings = SparkPostSettings(api_key="k_secret", sender_email="demo@example.com")
            >>> "k_secret" in repr(settings)
            False
            >>> "[REDACTED]" in repr(settings)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key":
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"SparkPostSettings({', '.join(fields)})"


def _require(config: Mapping[str, str], variable: str, message: str) -> str:
    value = config.get(variable, "")
    if not value.strip():
        raise ConfigurationError(message, variable=variable)
    return value


def load_settings(config: Mapping[str, str]) -> SparkPostSettings:
    """Build SparkPostSettings from a layered configuration mapping.

    The API key and sender address are required. The key is kept verbatim
    since it is sent as-is in the Authorization header. The optional
    ``SPARKPOST_BASE_URL``, ``SPARKPOST_TIMEOUT`` and ``SPARKPOST_LOG_LEVEL``
    override the defaults.

    Args:
        config: Mapping of variable names to values, typically from ``get_config()``.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: When a required variable is absent or blank, or a
            value fails validation. ``variable`` names the offending entry.

    Example:
        >>> settings = load_settings({
        ...     "SPARKPOST_API_KEY": "k_test",
        ...     "SPARKPOST_SENDER_EMAIL": "demo@example.com",
        ...     "SPARKPOST_TIMEOUT": "5",
        ... })
        >>> settings.timeout
        5.0
        >>> load_settings({})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: SPARKPOST_API_KEY must be defined as an environment variable.
    """
    api_key = _require(
        config,
        API_KEY_VARIABLE,
        f"{API_KEY_VARIABLE} must be defined as an environment variable.\n"
        f"Visit {CREDENTIALS_URL} to create your API Key.",
    )
    sender_email = _require(
        config,
        SENDER_EMAIL_VARIABLE,
        f"{SENDER_EMAIL_VARIABLE} must be defined as an environment variable.",
    )

    raw: dict[str, Any] = {"api_key": api_key, "sender_email": sender_email}
    for field_name in ("base_url", "timeout", "log_level"):
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        if config.get(env_key, "").strip():
            raw[field_name] = config[env_key].strip()

    try:
        return SparkPostSettings.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field_name = str(first["loc"][0]) if first["loc"] else ""
        variable = f"{ENV_PREFIX}{field_name.upper()}"
        raise ConfigurationError(f"{variable} is invalid: {first['msg']}", variable=variable) from exc


__all__ = [
    "API_KEY_VARIABLE",
    "CREDENTIALS_URL",
    "DEFAULT_BASE_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_TIMEOUT",
    "ENV_PREFIX",
    "SENDER_EMAIL_VARIABLE",
    "SparkPostSettings",
    "load_settings",
]
