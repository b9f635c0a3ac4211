"""Logging adapter - rich console setup.

Provides centralized logging initialization for all entry points.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.setup.shutdown_logging` - Handler removal on exit
"""

from __future__ import annotations

from .setup import init_logging, shutdown_logging

__all__ = ["init_logging", "shutdown_logging"]
