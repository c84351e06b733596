"""Ports: the ``MyService`` capability and the callables the CLI depends on.

Adapters satisfy these Protocols structurally; nothing here imports an
adapter.
"""

from __future__ import annotations

from .ports import (
    BuildHost,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    MyService,
)

__all__ = [
    "BuildHost",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "MyService",
]
