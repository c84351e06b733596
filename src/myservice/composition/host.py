"""Application host: configuration, environment and a built service provider.

:class:`HostBuilder` collects ``configure_services`` callbacks and runs them
in order against a fresh :class:`ServiceCollection` when :meth:`build` is
called. The resulting :class:`ApplicationHost` owns the provider and disposes
it on :meth:`ApplicationHost.dispose`.

Contents:
    * :class:`HostSettings` - Pydantic model for the ``[host]`` config section.
    * :class:`HostEnvironment` - Environment name registered in every host.
    * :class:`HostBuilderContext` - Passed to every configure callback.
    * :class:`HostBuilder` - Collects callbacks and builds the host.
    * :class:`ApplicationHost` - Built host owning the service provider.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from ..domain.errors import ConfigurationError
from .container import ServiceCollection, ServiceProvider

logger = logging.getLogger(__name__)


class HostSettings(BaseModel):
    """Pydantic model for [host] config section validation.

    Example:
        >>> HostSettings().environment
        'production'
        >>> HostSettings(environment="staging").environment
        'staging'
    """

    environment: str = "production"

    model_config = ConfigDict(extra="ignore")


@dataclass(frozen=True, slots=True)
class HostEnvironment:
    """Name of the environment the host runs in."""

    name: str

    def is_production(self) -> bool:
        return self.name.lower() == "production"


@dataclass(frozen=True, slots=True)
class HostBuilderContext:
    """State handed to each ``configure_services`` callback."""

    config: Config
    environment: HostEnvironment


ConfigureServices = Callable[[HostBuilderContext, ServiceCollection], None]


def load_host_settings(config: Config) -> HostSettings:
    """Parse the ``[host]`` section, defaulting missing values.

    Raises:
        ConfigurationError: If the section is present but invalid.
    """
    raw: object = config.get("host", default=None)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[host] must be a table, got {type(raw).__name__}")
    try:
        return HostSettings.model_validate(dict(cast("Mapping[str, object]", raw)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [host] section: {exc}") from exc


@dataclass(slots=True)
class ApplicationHost:
    """A built host: configuration, environment and the service provider."""

    config: Config
    environment: HostEnvironment
    services: ServiceProvider

    def dispose(self) -> None:
        """Dispose the service provider. Safe to call more than once."""
        if not self.services.disposed:
            logger.debug("Disposing application host (%s)", self.environment.name)
        self.services.dispose()

    def __enter__(self) -> ApplicationHost:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


class HostBuilder:
    """Collect service configuration and build an :class:`ApplicationHost`.

    The built provider always contains the ``Config`` instance and the
    :class:`HostEnvironment`, registered before any callback runs so that
    callbacks may replace them.

    Example:
        >>> from lib_layered_config import Config
        >>> host = HostBuilder(Config({}, {})).build()
        >>> host.services.resolve(HostEnvironment).name
        'production'
        >>> host.dispose()
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        self._callbacks: list[ConfigureServices] = []

    @property
    def config(self) -> Config:
        return self._config

    def configure_services(self, configure: ConfigureServices) -> HostBuilder:
        """Queue ``configure`` to run at :meth:`build`. Returns self for chaining."""
        self._callbacks.append(configure)
        return self

    def build(self) -> ApplicationHost:
        """Run the queued callbacks and build the host.

        Raises:
            ConfigurationError: If the ``[host]`` section is invalid.
        """
        settings = load_host_settings(self._config)
        environment = HostEnvironment(name=settings.environment)
        context = HostBuilderContext(config=self._config, environment=environment)

        services = ServiceCollection()
        services.add_singleton(Config, instance=self._config)
        services.add_singleton(HostEnvironment, instance=environment)
        for configure in self._callbacks:
            configure(context, services)

        logger.info(
            "Application host built",
            extra={"environment": environment.name, "registrations": len(services)},
        )
        return ApplicationHost(config=self._config, environment=environment, services=services.build())


__all__ = [
    "ApplicationHost",
    "ConfigureServices",
    "HostBuilder",
    "HostBuilderContext",
    "HostEnvironment",
    "HostSettings",
    "load_host_settings",
]
