"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello, World!"


def build_greeting() -> str:
    """Return the canonical greeting string.

    The placeholder service exposes this value unchanged. Tests compare it
    character for character, so whitespace and casing are part of the
    contract.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, World!'
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
