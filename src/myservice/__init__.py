"""myservice: a placeholder capability served through a small DI container.

Most callers need :class:`HostBuilder` (or :func:`create_default_builder`),
:func:`register_application_services` and :class:`MyService`. Tests use
:class:`myservice.testing.ServiceFixture`.
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.ports import MyService

# Composition exports (wired adapters)
from .composition import (
    ApplicationHost,
    HostBuilder,
    ServiceCollection,
    ServiceProvider,
    create_default_builder,
    get_config,
    register_application_services,
)

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .domain.errors import ConfigurationError, ContainerDisposedError, RegistrationError, ResolutionError

__all__ = [
    "CANONICAL_GREETING",
    "ApplicationHost",
    "ConfigurationError",
    "ContainerDisposedError",
    "HostBuilder",
    "MyService",
    "RegistrationError",
    "ResolutionError",
    "ServiceCollection",
    "ServiceProvider",
    "build_greeting",
    "create_default_builder",
    "get_config",
    "print_info",
    "register_application_services",
]
