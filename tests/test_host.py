"""Host stories: builder callbacks, environment settings and default builder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import pytest
from lib_layered_config import Config

from myservice.application.ports import MyService
from myservice.composition import (
    ApplicationHost,
    HostBuilder,
    HostBuilderContext,
    HostEnvironment,
    ServiceCollection,
    build_application_host,
    build_testing,
    create_default_builder,
    register_application_services,
)
from myservice.composition.host import HostSettings, load_host_settings
from myservice.domain.errors import ConfigurationError, ContainerDisposedError


class FakeService:
    def get_data(self) -> str:
        return "fake"


@pytest.mark.os_agnostic
def test_host_settings_default_to_production() -> None:
    """A config without [host] yields the production environment."""
    assert load_host_settings(Config({}, {})) == HostSettings(environment="production")


@pytest.mark.os_agnostic
def test_host_settings_read_environment(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """[host].environment is picked up."""
    config = config_factory({"host": {"environment": "staging"}})

    assert load_host_settings(config).environment == "staging"


@pytest.mark.os_agnostic
def test_host_settings_ignore_unknown_keys(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Extra keys in [host] are tolerated."""
    config = config_factory({"host": {"environment": "dev", "color": "blue"}})

    assert load_host_settings(config).environment == "dev"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "value",
    ["production", False, 0, "", []],
    ids=["text", "false", "zero", "empty-text", "empty-list"],
)
def test_host_settings_reject_non_table(config_factory: Callable[[dict[str, Any]], Config], value: object) -> None:
    """Any [host] value that is not a table is a configuration error, falsy ones included."""
    config = config_factory({"host": value})

    with pytest.raises(ConfigurationError, match="must be a table"):
        load_host_settings(config)


@pytest.mark.os_agnostic
def test_host_settings_reject_invalid_environment(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A non-string environment fails validation."""
    config = config_factory({"host": {"environment": ["a", "b"]}})

    with pytest.raises(ConfigurationError, match="Invalid \\[host\\] section"):
        load_host_settings(config)


@pytest.mark.os_agnostic
def test_host_environment_is_production() -> None:
    """is_production matches 'production' case-insensitively."""
    assert HostEnvironment("Production").is_production() is True
    assert HostEnvironment("staging").is_production() is False


@pytest.mark.os_agnostic
def test_built_host_registers_config_and_environment(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Config and HostEnvironment are always resolvable."""
    config = config_factory({"host": {"environment": "test"}})

    with HostBuilder(config).build() as host:
        assert host.services.resolve(Config) is config
        assert host.services.resolve(HostEnvironment) == HostEnvironment("test")
        assert host.environment.name == "test"
        assert host.config is config


@pytest.mark.os_agnostic
def test_configure_callbacks_run_in_order() -> None:
    """Later callbacks see and may replace earlier registrations."""
    seen: list[bool] = []

    def replace_service(_context: HostBuilderContext, services: ServiceCollection) -> None:
        seen.append(MyService in services)
        services.add_singleton(MyService, FakeService)

    builder = HostBuilder(Config({}, {}))
    returned = builder.configure_services(register_application_services).configure_services(replace_service)

    with builder.build() as host:
        assert returned is builder
        assert seen == [True]
        assert host.services.resolve(MyService).get_data() == "fake"


@pytest.mark.os_agnostic
def test_callbacks_receive_context(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """The context carries the builder's config and environment."""
    config = config_factory({"host": {"environment": "qa"}})
    contexts: list[HostBuilderContext] = []

    HostBuilder(config).configure_services(lambda ctx, _services: contexts.append(ctx)).build().dispose()

    assert contexts[0].config is config
    assert contexts[0].environment.name == "qa"


@pytest.mark.os_agnostic
def test_callbacks_run_only_at_build() -> None:
    """configure_services only queues the callback."""
    calls: list[int] = []
    builder = HostBuilder(Config({}, {})).configure_services(lambda _ctx, _services: calls.append(1))

    assert calls == []
    builder.build().dispose()
    assert calls == [1]


@pytest.mark.os_agnostic
def test_invalid_host_section_fails_build(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Building with a broken [host] section raises ConfigurationError."""
    with pytest.raises(ConfigurationError):
        HostBuilder(config_factory({"host": 3})).build()


@pytest.mark.os_agnostic
def test_build_application_host_resolves_my_service() -> None:
    """The application host binds MyService to the hello-world service."""
    host = build_application_host(Config({}, {}))

    assert isinstance(host, ApplicationHost)
    assert host.services.resolve(MyService).get_data() == "Hello, World!"
    host.dispose()


@pytest.mark.os_agnostic
def test_disposed_host_refuses_resolution() -> None:
    """After dispose the provider raises ContainerDisposedError; dispose twice is fine."""
    host = build_application_host(Config({}, {}))
    host.dispose()
    host.dispose()

    with pytest.raises(ContainerDisposedError):
        host.services.resolve(MyService)


@pytest.mark.os_agnostic
def test_create_default_builder_applies_overrides() -> None:
    """--set style overrides reach the built host's environment."""
    builder = create_default_builder(services_factory=build_testing, set_overrides=("host.environment=ci",))

    with builder.build() as host:
        assert host.environment.name == "ci"


@pytest.mark.os_agnostic
def test_create_default_builder_rejects_bad_override() -> None:
    """Malformed overrides raise ValueError before anything is built."""
    with pytest.raises(ValueError, match="must contain '='"):
        create_default_builder(services_factory=build_testing, set_overrides=("host.environment",))


@pytest.mark.os_agnostic
def test_create_default_builder_initialises_logging_once() -> None:
    """The services factory's init_logging receives the loaded config."""
    received: list[Config] = []
    services = replace(build_testing(), init_logging=received.append)

    builder = create_default_builder(services_factory=lambda: services)

    assert received == [builder.config]
