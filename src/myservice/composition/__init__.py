"""Wiring: which adapter backs each port, and which services the host registers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.overrides import apply_overrides
from ..adapters.logging.setup import init_logging
from ..adapters.services import HelloWorldService
from ..application.ports import MyService
from .container import ServiceCollection, ServiceDescriptor, ServiceProvider
from .host import (
    ApplicationHost,
    ConfigureServices,
    HostBuilder,
    HostBuilderContext,
    HostEnvironment,
)

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..application.ports import (
        BuildHost,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _check_get_config: GetConfig = get_config
    _check_default_path: GetDefaultConfigPath = get_default_config_path
    _check_display: DisplayConfig = display_config
    _check_logging: InitLogging = init_logging


def register_application_services(context: HostBuilderContext, services: ServiceCollection) -> None:
    """Register the application's capabilities.

    Shared by the CLI host and the test fixture so both resolve the same
    bindings.

    Example:
        >>> from lib_layered_config import Config
        >>> host = HostBuilder(Config({}, {})).configure_services(register_application_services).build()
        >>> host.services.resolve(MyService).get_data()
        'Hello, World!'
        >>> host.dispose()
    """
    services.add_singleton(MyService, HelloWorldService)


def build_application_host(config: Config) -> ApplicationHost:
    """Build a host from already-loaded configuration with the application services."""
    return HostBuilder(config).configure_services(register_application_services).build()


@dataclass(frozen=True, slots=True)
class AppServices:
    """The adapters the CLI runs against, one per port.

    Swap a single field with :func:`dataclasses.replace` to test one port in
    isolation.
    """

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    build_host: BuildHost


def build_production() -> AppServices:
    """lib_layered_config loading, lib_log_rich logging and rich display."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        build_host=build_application_host,
    )


def build_testing() -> AppServices:
    """Production wiring with every I/O port replaced by its in-memory stand-in.

    Configuration is empty, logging is left alone and ``display_config``
    prints nothing. ``build_host`` stays the same, so the testing host
    resolves exactly what production resolves.
    """
    from ..adapters import memory

    return replace(
        build_production(),
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
    )


def create_default_builder(
    *,
    services_factory: Callable[[], AppServices] = build_production,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> HostBuilder:
    """Load configuration, initialise logging and return a HostBuilder.

    Args:
        services_factory: Factory returning the infrastructure adapters.
            ``build_testing`` keeps the host free of filesystem I/O.
        profile: Optional configuration profile name.
        set_overrides: Raw ``SECTION.KEY=VALUE`` strings applied on top of
            the loaded configuration.

    Returns:
        Builder with no application services registered yet.

    Raises:
        ValueError: If the profile name or an override string is invalid.
    """
    app_services = services_factory()
    config = app_services.get_config(profile=profile)
    config = apply_overrides(config, set_overrides)
    app_services.init_logging(config)
    return HostBuilder(config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "init_logging",
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceProvider",
    "ApplicationHost",
    "ConfigureServices",
    "HostBuilder",
    "HostBuilderContext",
    "HostEnvironment",
    "build_application_host",
    "create_default_builder",
    "register_application_services",
    "AppServices",
    "build_production",
    "build_testing",
]
