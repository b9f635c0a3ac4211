"""Root CLI command running the sample end to end.

The command takes no arguments: configuration comes from the environment
(optionally seeded by a ``.env`` file).

Contents:
    * :func:`cli` - The sample command.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import rich_click as click

from sparkpost_sample import __init__conf__
from sparkpost_sample.application.use_cases import run_sample

from .constants import BANNER, CLICK_CONTEXT_SETTINGS
from .errors import execute_with_sample_error_handling, init_logging_or_exit, load_settings_or_exit

if TYPE_CHECKING:
    from sparkpost_sample.adapters.config.settings import SparkPostSettings
    from sparkpost_sample.composition import AppServices


def _run_sample_with_transport(services: AppServices, settings: SparkPostSettings) -> None:
    with services.open_transport(settings) as transport:
        run_sample(settings, transport, echo=click.echo)


@click.command(
    name=__init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Create a stored template, then a transmission that uses its draft.

    Prints the banner, loads configuration once, initialises logging,
    validates the two required variables, and only then opens the
    transport. The transmission request is never sent unless the template
    request succeeded.

    Example:
        >>> from click.testing import CliRunner
        >>> from sparkpost_sample.composition import build_testing
        >>> result = CliRunner().invoke(cli, [], obj=build_testing)
        >>> result.exit_code
        1
        >>> "SPARKPOST_API_KEY" in result.output
        True
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()
    click.echo(BANNER)

    config = services.get_config()
    init_logging_or_exit(config, services.init_logging)
    settings = load_settings_or_exit(config, services.load_settings)

    execute_with_sample_error_handling(functools.partial(_run_sample_with_transport, services, settings))


__all__ = ["cli"]
