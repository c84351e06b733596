"""Configuration adapters that never touch the filesystem.

``build_testing`` wires these in so a host can be built in a unit test
without reading ``defaultconfig.toml`` or any user layer.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...application.ports import GetConfig
from ...domain.enums import OutputFormat


def config_from_mapping(data: Mapping[str, Any]) -> GetConfig:
    """Return a ``get_config`` that always answers with ``data``.

    ``profile`` and ``start_dir`` are accepted and ignored; every call gets a
    fresh :class:`Config` built from the same mapping.

    Example:
        >>> get_config = config_from_mapping({"host": {"environment": "test"}})
        >>> get_config(profile="anything").get("host.environment")
        'test'
    """
    frozen = dict(data)

    def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return Config(frozen, {})

    return get_config


#: Empty configuration, so the host falls back to its built-in settings.
get_config_in_memory: GetConfig = config_from_mapping({})


def get_default_config_path_in_memory() -> Path:
    return Path(tempfile.gettempdir()) / "myservice" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the request; tests that need output use the real ``display_config``."""


__all__ = [
    "config_from_mapping",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
