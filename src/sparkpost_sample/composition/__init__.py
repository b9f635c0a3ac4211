"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_settings

# Logging services
from ..adapters.logging.setup import init_logging

# SparkPost services
from ..adapters.sparkpost.transport import open_transport

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.sparkpost import SparkPostSpy
    from ..application.ports import GetConfig, InitLogging, LoadSettings, OpenTransport

    _assert_get_config: GetConfig = get_config
    _assert_load_settings: LoadSettings = load_settings
    _assert_init_logging: InitLogging = init_logging
    _assert_open_transport: OpenTransport = open_transport


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    load_settings: LoadSettings
    init_logging: InitLogging
    open_transport: OpenTransport


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        load_settings=load_settings,
        init_logging=init_logging,
        open_transport=open_transport,
    )


def build_testing(*, spy: SparkPostSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Settings are still validated by the real loader so configuration errors
    surface exactly as in production.

    Args:
        spy: Optional SparkPostSpy instance for capturing requests.
            When None, a fresh SparkPostSpy is created. Pass your own spy
            to queue responses and assert on captured requests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import SparkPostSpy, get_config_in_memory, init_logging_in_memory

    transport_spy = spy if spy is not None else SparkPostSpy()

    return AppServices(
        get_config=get_config_in_memory,
        load_settings=load_settings,
        init_logging=init_logging_in_memory,
        open_transport=transport_spy.open,
    )


__all__ = [
    # Configuration
    "get_config",
    "load_settings",
    # Logging
    "init_logging",
    # SparkPost
    "open_transport",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
