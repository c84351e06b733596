"""Type-safe domain enums for output formats and service lifetimes."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Lifetime(str, Enum):
    """How long a resolved service instance lives inside a provider.

    Attributes:
        SINGLETON: One instance per provider, shared by every resolution.
        TRANSIENT: A fresh instance for every resolution.

    Example:
        >>> Lifetime.SINGLETON.value
        'singleton'
        >>> Lifetime.TRANSIENT == "transient"
        True
    """

    SINGLETON = "singleton"
    TRANSIENT = "transient"


__all__ = [
    "Lifetime",
    "OutputFormat",
]
