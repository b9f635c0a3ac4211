"""CLI entry point and execution wrapper.

Provides the main entry point used by console scripts and ``python -m``
execution, ensuring consistent error handling and exit codes.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools

from sparkpost_sample import __init__conf__
from sparkpost_sample.adapters.logging.setup import shutdown_logging

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from sparkpost_sample.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Execute the CLI with exception handling.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        services_factory: Factory function that returns AppServices. Passed via ctx.obj.

    Returns:
        Exit code produced by the command.
    """
    import sys

    import click

    from .root import cli

    # lib_cli_exit_tools.run_cli cannot pass ``obj``, so Click is invoked
    # directly and only the exception path is delegated to the library.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return ExitCode.SUCCESS
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return ExitCode.SIGNAL_INT
    except SystemExit as exc:
        # The command already printed its diagnostic before exiting.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Provides the single entry point used by console scripts and
    ``python -m`` execution so that behaviour stays identical across transports.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        services_factory: Factory function returning AppServices. Required.
            Callers outside the adapters layer should pass ``build_production``.

    Returns:
        Exit code reported by the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from sparkpost_sample.composition import build_testing
        >>> main([], services_factory=build_testing)
        *** SparkPost API Sample application ***
        1
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        # Only shut down logging from the main thread so other threads keep their handler.
        if threading.current_thread() is threading.main_thread():
            shutdown_logging()


__all__ = ["main"]
