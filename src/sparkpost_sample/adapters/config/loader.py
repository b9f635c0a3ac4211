"""Configuration loader layering a ``.env`` file beneath the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, cast

from dotenv import dotenv_values, find_dotenv


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, start_dir: str | None = None) -> Mapping[str, str]: ...
    def cache_clear(self) -> None: ...


def find_dotenv_file(start_dir: str | None = None) -> Path | None:
    """Return the nearest ``.env`` file at or above ``start_dir``.

    Args:
        start_dir: Directory where the upward search begins. Defaults to the
            current working directory.

    Returns:
        Path to the first ``.env`` found, or None when there is none.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     _ = (Path(tmp) / ".env").write_text("A=1")
        ...     nested = Path(tmp) / "a" / "b"
        ...     nested.mkdir(parents=True)
        ...     find_dotenv_file(str(nested)) == Path(tmp) / ".env"
        True
    """
    if start_dir is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None

    for directory in (Path(start_dir).resolve(), *Path(start_dir).resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


# Loaded once per start_dir and cached for the process lifetime.
@lru_cache(maxsize=4)
def _get_config_impl(*, start_dir: str | None = None) -> Mapping[str, str]:
    layered: dict[str, str] = {}
    dotenv_path = find_dotenv_file(start_dir)
    if dotenv_path is not None:
        layered.update({key: value for key, value in dotenv_values(dotenv_path).items() if value is not None})
    layered.update(os.environ)
    return MappingProxyType(layered)


def _get_config(*, start_dir: str | None = None) -> Mapping[str, str]:
    """Load layered configuration values.

    Sources in precedence order (later wins):
    ``.env`` file → process environment.

    The ``.env`` file is read without touching ``os.environ``, so the
    returned snapshot is the only place its values appear.

    Args:
        start_dir: Optional directory that seeds ``.env`` discovery. Defaults
            to the current working directory when None.

    Returns:
        Read-only mapping of variable names to values.

    Note:
        This function is cached (maxsize=4). Call ``get_config.cache_clear()``
        to force a fresh read.

    Example:
        >>> config = get_config()
        >>> isinstance(config, Mapping)
        True
    """
    return _get_config_impl(start_dir=start_dir)


def _cache_clear() -> None:
    """Clear the internal configuration cache."""
    _get_config_impl.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "find_dotenv_file",
    "get_config",
]
