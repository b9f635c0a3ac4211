"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions and the transport
    * :mod:`.use_cases` - Template create, transmission create, and the sample run
"""

from __future__ import annotations

from .ports import (
    ApiResponse,
    GetConfig,
    InitLogging,
    LoadSettings,
    OpenTransport,
    Transport,
)
from .use_cases import SampleOutcome, create_template, create_transmission, run_sample

__all__ = [
    # Ports
    "ApiResponse",
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "OpenTransport",
    "Transport",
    # Use cases
    "SampleOutcome",
    "create_template",
    "create_transmission",
    "run_sample",
]
