"""CLI package providing the command-line interface.

Re-exports all public symbols from submodules for convenient access.

Contents:
    * Root command from :mod:`.root`
    * Entry point from :mod:`.main`
    * Exit codes from :mod:`.exit_codes`

System Role:
    Acts as the public facade for the CLI subsystem. Consumers import from here
    and remain insulated from internal module boundaries.
"""

from __future__ import annotations

from .constants import BANNER, CLICK_CONTEXT_SETTINGS
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "BANNER",
    "CLICK_CONTEXT_SETTINGS",
    "ExitCode",
    # Root command
    "cli",
    # Entry point
    "main",
]
