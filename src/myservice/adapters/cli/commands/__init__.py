"""Subcommands of the ``myservice`` group.

Contents:
    * :mod:`.info` - ``info`` and ``fail``
    * :mod:`.services_cmd` - ``hello`` and ``services``, both backed by the application host
    * :mod:`.config` - ``config``
    * :func:`register_commands` - Attach every subcommand to a group
"""

from __future__ import annotations

import click

from .config import cli_config
from .info import cli_fail, cli_info
from .services_cmd import cli_hello, cli_services

#: Order in which commands appear in ``--help``.
COMMANDS: tuple[click.Command, ...] = (cli_info, cli_hello, cli_services, cli_config, cli_fail)


def register_commands(group: click.Group) -> None:
    """Add each command in :data:`COMMANDS` to ``group``."""
    for command in COMMANDS:
        group.add_command(command)


__all__ = [
    "COMMANDS",
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_services",
    "register_commands",
]
