"""Protocols the rest of the application is written against.

:class:`MyService` is what the container resolves. The others each declare
a ``__call__`` matching one adapter function, so a plain module-level
function satisfies them structurally.

``Config`` and ``ApplicationHost`` are imported for type checking only; at
runtime this module depends on the domain layer alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..composition.host import ApplicationHost


class MyService(Protocol):
    """Capability exposing a single data operation."""

    def get_data(self) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class BuildHost(Protocol):
    """Build an application host with the application services registered."""

    def __call__(self, config: Config) -> ApplicationHost: ...


__all__ = [
    "BuildHost",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "MyService",
]
