"""Fixtures shared by the container, host, fixture and CLI test modules.

CLI tests hand ``cli`` a services factory through ``obj``. The factories
built here start from :func:`build_production` and swap out one port, so
lib_log_rich still initialises the way it does for a real run.
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from myservice.adapters.cli.context import TracebackState
from myservice.adapters.config.loader import get_config
from myservice.adapters.memory import config_from_mapping
from myservice.composition import build_production
from myservice.testing import ServiceFixture

if TYPE_CHECKING:
    from myservice.composition import AppServices, ApplicationHost

ServicesFactory = Callable[[], "AppServices"]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def pytest_configure(config: pytest.Config) -> None:
    """Point coverage at a fresh database in the temp directory.

    pytest-cov reads ``COVERAGE_FILE`` after this hook, so an explicit
    value in the environment still wins.
    """
    if "COVERAGE_FILE" in os.environ:
        return
    database = Path(tempfile.gettempdir()) / ".coverage.myservice"
    for leftover in database.parent.glob(database.name + "*"):
        leftover.unlink(missing_ok=True)
    os.environ["COVERAGE_FILE"] = str(database)


def _without_ansi(text: str) -> str:
    return _ANSI.sub("", text)


def _production_with(**ports: Any) -> ServicesFactory:
    """Production services with ``ports`` replaced, behind a zero-argument factory."""
    services = replace(build_production(), **ports)
    return lambda: services


# ======================== Container and host ========================


@pytest.fixture(scope="class")
def service_fixture() -> Iterator[ServiceFixture]:
    """One ServiceFixture per test class, disposed after the class finishes.

    Example:
        class TestGreeting:
            def test_it(self, service_fixture: ServiceFixture) -> None:
                assert service_fixture.resolve(MyService).get_data()
    """
    with ServiceFixture() as fixture:
        yield fixture


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config from a plain dict without reading any layer."""

    def _config(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _config


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Build provenance entries of the shape lib_layered_config records."""

    def _source(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _source


@pytest.fixture
def clear_config_cache() -> None:
    """Start the test with an empty loader cache."""
    get_config.cache_clear()


# ======================== CLI ========================


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner; ``result.stdout`` excludes the log lines on stderr."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return _without_ansi


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Run with lib_cli_exit_tools defaults and tracebacks off; reset afterwards."""
    lib_cli_exit_tools.reset_config()
    TracebackState(enabled=False, force_color=False).restore()
    try:
        yield
    finally:
        lib_cli_exit_tools.reset_config()


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], ServicesFactory]:
    """Turn a config dict into a services factory whose ``get_config`` returns it.

    Example:
        factory = config_cli_context({"host": {"environment": "dev"}})
        result = cli_runner.invoke(cli, ["config"], obj=factory)
    """

    def _factory(data: dict[str, Any]) -> ServicesFactory:
        return _production_with(get_config=config_from_mapping(data))

    return _factory


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like ``config_cli_context``, but every requested profile is appended to a list."""

    def _factory(config: Config, profiles: list[str | None]) -> ServicesFactory:
        def _recording_get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            profiles.append(profile)
            return config

        return _production_with(get_config=_recording_get_config)

    return _factory


@pytest.fixture
def inject_build_host() -> Callable[[Callable[[Config], ApplicationHost]], ServicesFactory]:
    """Swap in another ``build_host``, e.g. one that registers nothing.

    Example:
        factory = inject_build_host(lambda config: HostBuilder(config).build())
        assert cli_runner.invoke(cli, ["hello"], obj=factory).exit_code == 78
    """

    def _factory(build_host: Callable[[Config], ApplicationHost]) -> ServicesFactory:
        return _production_with(build_host=build_host)

    return _factory
