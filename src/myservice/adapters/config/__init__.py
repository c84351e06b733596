"""Where configuration comes from and how it is shown.

``loader`` merges the lib_layered_config layers, ``overrides`` applies
``--set SECTION.KEY=VALUE`` on top, and ``display`` prints the result.
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
]
