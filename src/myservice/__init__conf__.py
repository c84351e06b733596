"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml`` on release.
"""

from __future__ import annotations

name = "myservice"
title = "Placeholder service with a dependency-injection host and test fixture"
version = "0.1.0"
homepage = "https://github.com/myservice/myservice"
author = "myservice maintainers"
author_email = "maintainers@myservice.invalid"
shell_command = "myservice"

# Identifiers lib_layered_config uses to derive platform-specific config paths.
LAYEREDCONF_VENDOR: str = "myservice"
LAYEREDCONF_APP: str = "myservice"
LAYEREDCONF_SLUG: str = "myservice"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for myservice:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
