"""CLI context helpers and root-group edge cases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from myservice.adapters import cli as cli_mod
from myservice.adapters.cli.context import CLIContext
from myservice.composition import build_production, build_testing


@pytest.mark.os_agnostic
def test_cli_context_lookup_raises_when_not_attached() -> None:
    """A command run outside the root group has no CLIContext."""
    ctx = click.Context(click.Command("probe"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        CLIContext.of(ctx)


@pytest.mark.os_agnostic
def test_attached_cli_context_is_found() -> None:
    """attach() stores the context where of() finds it."""
    ctx = click.Context(click.Command("probe"))
    config = Config({"host": {"environment": "dev"}}, {})
    services = build_testing()

    CLIContext(
        config=config,
        services=services,
        profile="dev",
        set_overrides=("host.environment=dev",),
    ).attach(ctx)
    stored = CLIContext.of(ctx)

    assert isinstance(stored, CLIContext)
    assert stored.config is config
    assert stored.services is services
    assert stored.profile == "dev"
    assert stored.set_overrides == ("host.environment=dev",)


@pytest.mark.os_agnostic
def test_root_group_rejects_non_callable_obj(cli_runner: CliRunner) -> None:
    """ctx.obj must be a services factory."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--set without a dot is rejected before any command runs."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", "invalid_no_dot=value", "hello"], obj=production_factory)

    assert result.exit_code == 2
    assert "at least one dot" in result.output


@pytest.mark.os_agnostic
def test_main_returns_usage_exit_code_for_bad_override(managed_traceback_state: None) -> None:
    """main() turns a ClickException into its exit code."""
    assert cli_mod.main(["--set", "invalid_no_dot=value", "hello"], services_factory=build_production) == 2


@pytest.mark.os_agnostic
def test_root_group_stores_overridden_config(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Subcommands receive the config with --set applied."""
    seen: list[CLIContext] = []

    @click.command("probe")
    @click.pass_context
    def probe(ctx: click.Context) -> None:
        seen.append(CLIContext.of(ctx))

    cli_mod.cli.add_command(probe)
    try:
        result = cli_runner.invoke(cli_mod.cli, ["--set", "host.environment=qa", "probe"], obj=production_factory)
    finally:
        cli_mod.cli.commands.pop("probe")

    assert result.exit_code == 0
    assert seen[0].config.get("host", default={})["environment"] == "qa"
    assert seen[0].set_overrides == ("host.environment=qa",)
