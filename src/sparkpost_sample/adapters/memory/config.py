"""In-memory configuration adapter for testing.

Provides a configuration loader that satisfies the same Protocol as the
production adapter but reads neither ``.env`` files nor the process environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def get_config_in_memory(*, start_dir: str | None = None) -> Mapping[str, str]:
    """Return an empty in-memory configuration mapping."""
    return MappingProxyType({})


__all__ = ["get_config_in_memory"]
