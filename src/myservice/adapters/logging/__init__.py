"""lib_log_rich start-up, driven by the ``[lib_log_rich]`` configuration table."""

from __future__ import annotations

from .setup import init_logging

__all__ = ["init_logging"]
