"""Root command group: global options, configuration loading, logging start-up.

Contents:
    * :func:`cli` - The ``myservice`` group every subcommand hangs off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from myservice import __init__conf__
from myservice.adapters.config.overrides import apply_overrides

from .commands import register_commands
from .context import COMMAND_SETTINGS, CLIContext, enable_tracebacks

if TYPE_CHECKING:
    from myservice.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read the configuration layers and apply ``--set`` on top.

    Raises:
        click.UsageError: If an override string is malformed.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=COMMAND_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'staging' or 'test'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; may be repeated",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration and start logging once for whichever subcommand runs.

    ``ctx.obj`` arrives as the services factory and is replaced by a
    :class:`~.context.CLIContext`.
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)

    CLIContext(
        config=config,
        services=services,
        traceback=traceback,
        profile=profile,
        set_overrides=set_overrides,
    ).attach(ctx)
    enable_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


__all__ = ["cli"]
