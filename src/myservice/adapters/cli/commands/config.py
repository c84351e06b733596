"""``config``: print the configuration the application host would be built from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from myservice.adapters.config.overrides import apply_overrides
from myservice.domain.enums import OutputFormat

from ..context import COMMAND_SETTINGS, CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _config_for(cli_ctx: CLIContext, profile: str | None) -> Config:
    """Reuse the root group's config, or reload it when ``--profile`` is given here.

    The reload reapplies the root-level ``--set`` values so they keep winning.
    """
    if not profile:
        return cli_ctx.config
    return apply_overrides(cli_ctx.services.get_config(profile=profile), cli_ctx.set_overrides)


@click.command("config", context_settings=COMMAND_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="human prints TOML-style tables, json prints one JSON document",
)
@click.option("--section", default=None, help="Print a single top-level table, e.g. 'host'")
@click.option("--profile", default=None, help="Reload with this profile instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the merged configuration.

    Layers, lowest precedence first: bundled defaults, app, host, user,
    .env, environment variables, then --set.
    """
    cli_ctx = CLIContext.of(ctx)
    effective_profile = profile or cli_ctx.profile
    config = _config_for(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config",
        extra={"command": "config", "format": fmt.value, "profile": effective_profile},
    ):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
