"""Layered configuration loading with profile validation and caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from myservice import __init__conf__


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to use as a path component.

    Delegates to ``lib_layered_config.validate_profile_name``.

    Raises:
        ValueError: If the name is empty, too long, contains path separators
            or other invalid characters.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


class CachedConfigLoader:
    """Load the merged configuration once per ``(profile, start_dir)``.

    Layers, lowest precedence first: bundled defaults, app, host, user,
    ``.env`` and environment variables. A profile inserts a
    ``profile/<name>/`` directory into every file-based layer.

    The CLI process is short-lived, so only the most recent few
    combinations are kept.
    """

    def __init__(self, maxsize: int = 4) -> None:
        self._cached = lru_cache(maxsize=maxsize)(_read_layers)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the configuration for ``profile``.

        Args:
            profile: Optional profile name (validated before loading).
            start_dir: Directory that seeds ``.env`` discovery; defaults to
                the current working directory.

        Raises:
            ValueError: If ``profile`` is not a valid profile name.

        Example:
            >>> get_config().get("host.environment")
            'production'
        """
        if profile is not None:
            validate_profile(profile)
        return self._cached(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget cached results so the next call re-reads every layer."""
        self._cached.cache_clear()


get_config = CachedConfigLoader()


__all__ = [
    "CachedConfigLoader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
