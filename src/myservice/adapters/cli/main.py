"""Run the root group and translate its outcome into a process exit code.

Contents:
    * :func:`main` - Shared by the console script and ``python -m myservice``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from myservice import __init__conf__

from .context import TracebackState, enable_tracebacks
from .root import cli

if TYPE_CHECKING:
    from myservice.composition import AppServices

_SUMMARY_TRACE_CHARS: Final[int] = 500
_VERBOSE_TRACE_CHARS: Final[int] = 10_000


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = TracebackState.capture().enabled
    enable_tracebacks(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=_VERBOSE_TRACE_CHARS if verbose else _SUMMARY_TRACE_CHARS,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to pass ``obj``; Click is driven directly.
    try:
        outcome = cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands exit with a chosen code after printing their own message.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        return _report_failure(exc)
    # Non-standalone Click returns the code of a ctx.exit() instead of raising.
    return outcome if isinstance(outcome, int) else 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were.
        services_factory: Returns the AppServices the root group loads
            configuration with. ``entry`` and ``__main__`` pass
            ``build_production``.

    Raises:
        ValueError: If no services factory is given.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = TracebackState.capture()
    try:
        return _invoke(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            saved.restore()
        # Worker threads must not tear down the shared logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
