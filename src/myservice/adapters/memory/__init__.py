"""Side-effect free stand-ins for the configuration and logging adapters.

Used by :func:`myservice.composition.build_testing` and by
:class:`myservice.testing.ServiceFixture`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    config_from_mapping,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from myservice.application.ports import DisplayConfig, GetDefaultConfigPath, InitLogging

    _check_default_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _check_display: DisplayConfig = display_config_in_memory
    _check_logging: InitLogging = init_logging_in_memory

__all__ = [
    "config_from_mapping",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
