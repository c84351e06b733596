"""Command-line interface for the ``myservice`` application host.

Import from here rather than from the submodules:

    * :func:`main` - Run the CLI with a services factory and get an exit code
    * :func:`cli` - The root Click group (for ``CliRunner`` in tests)
    * ``cli_*`` - The individual subcommands
    * :class:`CLIContext`, :class:`TracebackState`, :func:`enable_tracebacks`
"""

from __future__ import annotations

from .commands import cli_config, cli_fail, cli_hello, cli_info, cli_services
from .context import COMMAND_SETTINGS, CLIContext, TracebackState, enable_tracebacks
from .main import main
from .root import cli

__all__ = [
    "COMMAND_SETTINGS",
    "CLIContext",
    "TracebackState",
    "cli",
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_services",
    "enable_tracebacks",
    "main",
]
