"""Configuration adapter - layered loading and SparkPost settings.

Contents:
    * :mod:`.loader` - ``.env`` + process environment loading with caching
    * :mod:`.settings` - Validated SparkPost settings and their loader
"""

from __future__ import annotations

from .loader import get_config
from .settings import SparkPostSettings, load_settings

__all__ = [
    "SparkPostSettings",
    "get_config",
    "load_settings",
]
