"""Target of the ``myservice`` console script.

The CLI adapter never imports the composition layer itself; this module
hands it ``build_production``.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against the production adapters and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
