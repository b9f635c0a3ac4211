"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no network, no log handlers.

Contents:
    * :mod:`.config` - In-memory configuration loader
    * :mod:`.sparkpost` - In-memory SparkPost transport (SparkPostSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .sparkpost import RecordedCall, SparkPostSpy

# Static conformance assertions
if TYPE_CHECKING:
    from sparkpost_sample.application.ports import GetConfig, InitLogging, OpenTransport, Transport

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_transport: Transport = SparkPostSpy()
    _assert_open_transport: OpenTransport = SparkPostSpy().open

__all__ = [
    "RecordedCall",
    "SparkPostSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
