"""Apply ``--set SECTION.KEY=VALUE`` strings to a loaded :class:`Config`.

Values are read as JSON when they parse (``true``, ``8192``, ``[1, 2]``)
and kept as text otherwise, so ``--set host.environment=staging`` needs
no quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]


def coerce_value(raw: str) -> OverrideValue:
    """Decode ``raw`` as JSON, falling back to the string itself.

    Examples:
        >>> coerce_value("false"), coerce_value("8192"), coerce_value("staging")
        (False, 8192, 'staging')
        >>> coerce_value('{"a": 1}')
        {'a': 1}
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` value addressed by a top-level table and a key path under it."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue

    @classmethod
    def parse(cls, raw: str) -> ConfigOverride:
        """Split ``raw`` at the first ``=`` and the path at every dot.

        Raises:
            ValueError: If ``=`` is missing, the path has no dot, or the
                section or any key is empty.

        Examples:
            >>> ConfigOverride.parse("host.environment=staging")
            ConfigOverride(section='host', key_path=('environment',), value='staging')
            >>> ConfigOverride.parse("lib_log_rich.payload_limits.message_max_chars=8192").key_path
            ('payload_limits', 'message_max_chars')
        """
        path, equals, text = raw.partition("=")
        if not equals:
            raise ValueError(f"Invalid override {raw!r}: missing '=', expected SECTION.KEY=VALUE")
        section, dot, rest = path.partition(".")
        if not dot:
            raise ValueError(f"Invalid override {raw!r}: the key needs at least one dot (SECTION.KEY)")
        if not section:
            raise ValueError(f"Invalid override {raw!r}: empty section name")
        keys = tuple(rest.split("."))
        if "" in keys:
            raise ValueError(f"Invalid override {raw!r}: empty key in path")
        return cls(section=section, key_path=keys, value=coerce_value(text))

    @property
    def dotted_key(self) -> str:
        return ".".join((self.section, *self.key_path))

    def merge_into(self, tree: dict[str, object]) -> None:
        """Write the value into ``tree``, creating tables along the path.

        Raises:
            ValueError: If an earlier override already put a non-table value
                where this one needs a table, or a table where this one sets
                a plain value.
        """
        node = tree
        for key in (self.section, *self.key_path[:-1]):
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise ValueError(f"Invalid override {self.dotted_key!r}: {key!r} is already set to a non-table value")
            node = cast("dict[str, object]", child)
        leaf = self.key_path[-1]
        if isinstance(node.get(leaf), dict) and not isinstance(self.value, dict):
            raise ValueError(
                f"Invalid override {self.dotted_key!r}: {leaf!r} already holds a table from an earlier override"
            )
        node[leaf] = self.value


parse_override = ConfigOverride.parse


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return a new Config with every override deep-merged in, later ones winning.

    ``config`` is not mutated and comes back as-is when there is nothing to
    apply.

    Raises:
        ValueError: If any override string is malformed or two overrides conflict.

    Examples:
        >>> base = Config({"host": {"environment": "production"}}, {})
        >>> apply_overrides(base, ("host.environment=dev",))["host"]["environment"]
        'dev'
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, object] = {}
    for override in map(ConfigOverride.parse, raw_overrides):
        override.merge_into(tree)
    return config.with_overrides(tree)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
