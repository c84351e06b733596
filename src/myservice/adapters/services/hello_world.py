"""Placeholder implementation of the :class:`MyService` capability."""

from __future__ import annotations

from myservice.domain.behaviors import build_greeting


class HelloWorldService:
    """Return the canonical greeting for every call.

    Holds no state and owns no resources, so disposal of the container that
    created it has nothing to release.

    Example:
        >>> HelloWorldService().get_data()
        'Hello, World!'
    """

    def get_data(self) -> str:
        """Return the canonical greeting string."""
        return build_greeting()


__all__ = ["HelloWorldService"]
