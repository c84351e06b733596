"""``info`` prints installation metadata; ``fail`` exercises the error path."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from myservice import __init__conf__

from ..context import COMMAND_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=COMMAND_SETTINGS)
def cli_info() -> None:
    """Show name, version and author of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata", extra={"version": __init__conf__.version})
        __init__conf__.print_info()


@click.command("fail", context_settings=COMMAND_SETTINGS)
def cli_fail() -> None:
    """Raise RuntimeError so error formatting and exit codes can be checked."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Raising on purpose")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
