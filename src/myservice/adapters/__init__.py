"""Concrete implementations behind the application ports.

Subpackages: ``cli`` (rich-click commands), ``config``
(lib_layered_config), ``logging`` (lib_log_rich), ``memory`` (test
stand-ins) and ``services`` (``MyService`` providers).
"""

from __future__ import annotations

__all__: list[str] = []
