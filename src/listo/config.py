"""Immutable list configuration for Listo.

A ListConfig is built once when the host sets up the integration and is
passed explicitly into every classification and transform call. There is
no module-level mutable state: two hosts with different marker sets can
share the same process without interfering.

Usage:
    from listo.config import ListConfig

    config = ListConfig(markers=("-", "+"))
    item = classify("+ milk", config)

    # From a user setup table (unknown keys ignored)
    config = ListConfig.from_dict({"list_markers": ["*", "-"], "theme": "dark"})

    # Derive a variant without touching the original
    quiet = config.merged(filetypes=("markdown",))

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from listo.errors import ConfigError

# Keys used by the editor plugin's setup table, mapped to field names
_KEY_ALIASES: dict[str, str] = {
    "list_markers": "markers",
    "colon_list_marker": "colon_marker",
}


@dataclass(frozen=True, slots=True)
class ListConfig:
    """Immutable marker configuration.

    Frozen dataclass ensures the config cannot change between gestures.

    Attributes:
        markers: Unordered list markers in priority order. The order is
            also the depth-to-marker table used when nesting.
        colon_marker: Marker for a new list started under a plain
            colon-terminated line. Defaults to the first marker. List
            items ending in a colon ignore it and nest with the depth
            marker instead.
        filetypes: Filetypes the host should activate list editing for.
            Only consulted by host activation, never by the core.

    """

    markers: tuple[str, ...] = ("-", "*", "+", ">")
    colon_marker: str | None = None
    filetypes: tuple[str, ...] = ("markdown", "text")

    def __post_init__(self) -> None:
        markers = _as_tuple(self.markers, "markers")
        filetypes = _as_tuple(self.filetypes, "filetypes")
        object.__setattr__(self, "markers", markers)
        object.__setattr__(self, "filetypes", filetypes)

        if not markers:
            raise ConfigError("markers", "at least one marker is required")
        for marker in markers:
            _check_marker("markers", marker)
        if len(set(markers)) != len(markers):
            raise ConfigError("markers", f"markers must be distinct, got {markers!r}")
        if self.colon_marker is not None:
            _check_marker("colon_marker", self.colon_marker)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ListConfig:
        """Create ListConfig from a mapping.

        Accepts both field names and the plugin-style setup keys
        (``list_markers``, ``colon_list_marker``). Unknown keys are
        silently ignored.

        Args:
            config_dict: Mapping with config values.

        Returns:
            New ListConfig instance with values from the mapping.

        Example:
            >>> config = ListConfig.from_dict({
            ...     "list_markers": ["*", "-"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.markers
            ('*', '-')

        """
        return cls(**_normalise_keys(config_dict))

    def merged(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> ListConfig:
        """Return a new config with overrides applied.

        Supplied keys win over the current values; everything else is
        carried over. The receiver is not modified.

        Args:
            overrides: Optional mapping of overrides (aliases accepted).
            **kwargs: Keyword overrides, applied after the mapping.

        Returns:
            New ListConfig.

        """
        changes = _normalise_keys(overrides or {})
        changes.update(_normalise_keys(kwargs))
        if not changes:
            return self
        return replace(self, **changes)

    def is_enabled_for(self, filetype: str) -> bool:
        """Check whether list editing should be active for a filetype."""
        return filetype in self.filetypes

    @property
    def deepest_marker(self) -> str:
        """Marker reused for every nesting level beyond the configured ones."""
        return self.markers[-1]


def _normalise_keys(config_dict: Mapping[str, Any]) -> dict[str, Any]:
    valid_fields = {f.name for f in fields(ListConfig)}
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        name = _KEY_ALIASES.get(key, key)
        if name in valid_fields:
            result[name] = value
    return result


def _as_tuple(value: Iterable[str] | str, field: str) -> tuple[str, ...]:
    # A bare string would otherwise be split into characters
    if isinstance(value, str):
        raise ConfigError(field, f"expected a sequence of strings, got {value!r}")
    try:
        return tuple(value)
    except TypeError:
        raise ConfigError(field, f"expected a sequence of strings, got {value!r}") from None


def _check_marker(field: str, marker: object) -> None:
    if not isinstance(marker, str) or not marker:
        raise ConfigError(field, f"marker must be a non-empty string, got {marker!r}")
    if not marker.strip():
        raise ConfigError(field, f"marker must not be only whitespace, got {marker!r}")


# Built after the validators above, which __post_init__ calls
DEFAULT_CONFIG: ListConfig = ListConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "ListConfig",
]
