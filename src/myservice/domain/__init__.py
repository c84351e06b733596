"""Pure definitions shared by every layer.

The canonical greeting, the ``Lifetime`` and ``OutputFormat`` enums, and
the exceptions the container and host raise. No I/O happens here.
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .enums import Lifetime, OutputFormat
from .errors import ConfigurationError, ContainerDisposedError, RegistrationError, ResolutionError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    # Enums
    "Lifetime",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ContainerDisposedError",
    "RegistrationError",
    "ResolutionError",
]
