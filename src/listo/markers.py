"""Marker selection by nesting depth.

Depth is measured in indent units: ``len(indent) // len(indent_unit)``.
Depth 0 uses the first configured marker, depth 1 the second, and so on.
Depths beyond the configured markers reuse the last one rather than
cycling back to the first.
"""

from __future__ import annotations

from listo.config import DEFAULT_CONFIG, ListConfig

# Fallback unit when a host hands over an empty indent unit
_FALLBACK_UNIT = "\t"


def marker_for_depth(level: int, config: ListConfig = DEFAULT_CONFIG) -> str:
    """Pick the marker for a nesting level.

    Args:
        level: Nesting depth (0 for top level). Negative values are
            treated as 0.
        config: Marker configuration

    Returns:
        ``config.markers[min(level, len(markers) - 1)]``

    Example:
        >>> marker_for_depth(1)
        '*'
        >>> marker_for_depth(99)
        '>'

    """
    markers = config.markers
    return markers[min(max(level, 0), len(markers) - 1)]


def colon_marker(config: ListConfig = DEFAULT_CONFIG) -> str:
    """Marker for a list started under a plain colon-terminated line."""
    if config.colon_marker is not None:
        return config.colon_marker
    return config.markers[0]


def indent_level(indent: str, indent_unit: str) -> int:
    """Number of whole indent units in an indent string."""
    return len(indent) // len(indent_unit or _FALLBACK_UNIT)


def indent_unit_for(expandtab: bool, shiftwidth: int) -> str:
    """Derive the indent unit from host tab settings.

    Args:
        expandtab: Whether the host inserts spaces for tabs
        shiftwidth: Width of one indent level in spaces

    Returns:
        ``shiftwidth`` spaces when expanding tabs, otherwise one tab

    """
    if expandtab:
        return " " * max(shiftwidth, 1)
    return "\t"


def normalise_indent_unit(indent_unit: str) -> str:
    """Return a usable indent unit, replacing an empty one with a tab."""
    return indent_unit or _FALLBACK_UNIT


__all__ = [
    "colon_marker",
    "indent_level",
    "indent_unit_for",
    "marker_for_depth",
    "normalise_indent_unit",
]
