"""CLI commands that build the application host and use its services.

Contents:
    * :func:`cli_hello` - Resolve ``MyService`` and print its data.
    * :func:`cli_services` - List the host's registrations.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from myservice.application.ports import MyService
from myservice.domain.errors import ConfigurationError, ResolutionError

from ..context import COMMAND_SETTINGS, CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("hello", context_settings=COMMAND_SETTINGS)
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Resolve MyService from the application host and print its data."""
    cli_ctx = CLIContext.of(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        try:
            with cli_ctx.services.build_host(cli_ctx.config) as host:
                logger.info("Resolving MyService", extra={"environment": host.environment.name})
                click.echo(host.services.resolve(MyService).get_data())
        except (ConfigurationError, ResolutionError) as exc:
            logger.error("Host could not provide MyService", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("services", context_settings=COMMAND_SETTINGS)
@click.pass_context
def cli_services(ctx: click.Context) -> None:
    """List every capability registered in the application host."""
    cli_ctx = CLIContext.of(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-services", extra={"command": "services"}):
        try:
            host = cli_ctx.services.build_host(cli_ctx.config)
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        with host:
            rows = [
                (d.capability.__qualname__, d.lifetime.value, d.implementation_name)
                for d in host.services.registrations
            ]
            logger.info("Listing registrations", extra={"count": len(rows)})
            width = max((len(capability) for capability, _, _ in rows), default=0)
            click.echo(f"Environment: {host.environment.name}")
            for capability, lifetime, implementation in rows:
                click.echo(f"  {capability.ljust(width)}  {lifetime:<9}  {implementation}")


__all__ = ["cli_hello", "cli_services"]
