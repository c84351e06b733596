"""Reusable dependency-injection fixture for isolated unit tests.

A :class:`ServiceFixture` builds its own application host with in-memory
infrastructure adapters and the application's registrations. Each fixture
owns a separate service provider, so singletons are never shared between
fixtures and test classes can run in parallel.

System Role:
    Sits at package level (outside adapters) like :mod:`.entry`, because it
    wires the composition layer for consumers (pytest fixtures, other test
    suites).

Example:
    >>> from myservice.application.ports import MyService
    >>> with ServiceFixture() as fixture:
    ...     fixture.resolve(MyService).get_data()
    'Hello, World!'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TypeVar

from .composition import (
    AppServices,
    ApplicationHost,
    ConfigureServices,
    ServiceProvider,
    build_testing,
    create_default_builder,
    register_application_services,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceFixture:
    """Per-test-class host exposing a service provider.

    Args:
        services_factory: Infrastructure adapters used to load configuration
            and initialise logging. Defaults to the in-memory set.
        configure: Extra registrations applied after the application's own,
            e.g. to replace a capability with a test double.
        profile: Configuration profile passed to the config loader.
        set_overrides: ``SECTION.KEY=VALUE`` strings applied to the config.
    """

    def __init__(
        self,
        *,
        services_factory: Callable[[], AppServices] = build_testing,
        configure: ConfigureServices | None = None,
        profile: str | None = None,
        set_overrides: tuple[str, ...] = (),
    ) -> None:
        builder = create_default_builder(
            services_factory=services_factory,
            profile=profile,
            set_overrides=set_overrides,
        )
        builder.configure_services(register_application_services)
        if configure is not None:
            builder.configure_services(configure)
        self._host = builder.build()
        logger.debug("Service fixture ready (%d registrations)", len(self._host.services.registrations))

    @property
    def host(self) -> ApplicationHost:
        return self._host

    @property
    def service_provider(self) -> ServiceProvider:
        return self._host.services

    def resolve(self, capability: type[T]) -> T:
        """Shortcut for ``service_provider.resolve(capability)``."""
        return self._host.services.resolve(capability)

    def close(self) -> None:
        """Dispose the host. Results obtained earlier stay valid."""
        self._host.dispose()

    def __enter__(self) -> ServiceFixture:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ServiceFixture"]
