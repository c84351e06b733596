"""Providers of application capabilities.

:class:`HelloWorldService` is the only ``MyService`` so far.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .hello_world import HelloWorldService

if TYPE_CHECKING:
    from myservice.application.ports import MyService

    _assert_my_service: type[MyService] = HelloWorldService

__all__ = ["HelloWorldService"]
