"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, SparkPost API, logging).

Contents:
    * :mod:`.config` - Layered configuration loading and settings validation
    * :mod:`.sparkpost` - Authenticated JSON transport over httpx
    * :mod:`.logging` - Console logging setup with rich
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
