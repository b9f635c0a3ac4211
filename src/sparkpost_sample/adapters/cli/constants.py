"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`BANNER` - First line printed by every run.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated error summaries.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Final

#: Shared Click context flags so help output stays consistent.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Printed to stdout before configuration is checked.
BANNER: Final[str] = "*** SparkPost API Sample application ***"

#: Error summaries longer than this are truncated.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Upper bound for tracebacks when lib_cli_exit_tools.config.traceback is on.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "BANNER",
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
