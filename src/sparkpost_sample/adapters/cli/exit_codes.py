"""Exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by the
CLI carries a named integer instead of a bare literal.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI error paths.

    Every failed step of the sample (configuration, transport, HTTP status,
    unparseable response) ends the run with ``GENERAL_ERROR``. Click's own
    usage errors keep Click's code 2.

    * 0: the template and the transmission were both created
    * 1: any step failed
    * 130: interrupted (SIGINT)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.GENERAL_ERROR)
        1
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    SIGNAL_INT = 130


__all__ = ["ExitCode"]
