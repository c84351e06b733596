"""Logging start-up that leaves the process alone."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Skip lib_log_rich so pytest's ``caplog`` still sees stdlib records."""


__all__ = ["init_logging_in_memory"]
