"""State the root group hands to its subcommands, and traceback flag handling.

Contents:
    * :data:`COMMAND_SETTINGS` - Click settings every command shares.
    * :class:`CLIContext` - Loaded config and services stored on ``ctx.obj``.
    * :class:`TracebackState` - Snapshot of lib_cli_exit_tools traceback flags.
    * :func:`enable_tracebacks` - Switch full tracebacks on or off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from myservice.composition import AppServices

#: ``-h`` works everywhere ``--help`` does.
COMMAND_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Everything a subcommand needs from the root group.

    Attributes:
        config: Configuration after root-level ``--set`` overrides.
        services: Infrastructure adapters (production or testing).
        traceback: Whether ``--traceback`` was given.
        profile: Root-level ``--profile`` value.
        set_overrides: Raw ``--set`` strings, kept so a subcommand that
            reloads configuration for another profile can reapply them.
    """

    config: Config
    services: AppServices
    traceback: bool = False
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def attach(self, ctx: click.Context) -> None:
        """Store this context as ``ctx.obj``, replacing the services factory."""
        ctx.obj = self

    @classmethod
    def of(cls, ctx: click.Context) -> CLIContext:
        """Return the context the root group attached to ``ctx``.

        Raises:
            RuntimeError: If nothing was attached (the command ran outside
                the root group).
        """
        obj = ctx.find_object(cls)
        if obj is None:
            raise RuntimeError("CLI context not initialized; commands must run under the root group.")
        return obj


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags that control error output."""

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        """Read the current flags."""
        config = lib_cli_exit_tools.config
        return cls(bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False)))

    def restore(self) -> None:
        """Write these flags back."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def enable_tracebacks(enabled: bool) -> None:
    """Print full, colored tracebacks when ``enabled``; summaries otherwise.

    Example:
        >>> enable_tracebacks(False)
        >>> TracebackState.capture()
        TracebackState(enabled=False, force_color=False)
    """
    TracebackState(bool(enabled), bool(enabled)).restore()


__all__ = [
    "COMMAND_SETTINGS",
    "CLIContext",
    "TracebackState",
    "enable_tracebacks",
]
