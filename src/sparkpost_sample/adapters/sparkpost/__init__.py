"""SparkPost adapter - authenticated JSON transport over httpx.

Contents:
    * :class:`.transport.SparkPostTransport` - one-request-at-a-time API caller
    * :func:`.transport.open_transport` - builds a transport from settings
"""

from __future__ import annotations

from .transport import SparkPostTransport, open_transport

__all__ = ["SparkPostTransport", "open_transport"]
