"""Line classifier for markdown list items.

Classification runs an ordered table of matchers against a single line.
The first matcher that accepts the line wins:

1. ``<indent><marker><ws><content>:``  for each marker, declaration order
2. ``<indent><digits><.|)><ws><content>:``
3. ``<indent><marker><ws><content?>``  for each marker, declaration order
4. ``<indent><digits><.|)><ws><content?>``
5. ``<indent><content>:``
6. no match -> None

Colon rules only fire when ``:`` is the last character of the line.
Marker order is the tie-break between markers: the literal text decides
which marker matches, and an earlier marker is never skipped in favour
of a later one.

Markers are literals. They are passed through ``re.escape`` before the
grammar is built, so ``*``, ``+`` and friends never act as regex syntax.

Thread Safety:
    ``classify`` is a pure function. Compiled matcher tables are cached
    per marker tuple and never mutated.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from listo.config import DEFAULT_CONFIG, ListConfig
from listo.items import ListItem, ListKind

# Whitespace allowed in indents and after markers
_WS = r"[ \t]"

_ORDERED_PREFIX = rf"(?P<number>[0-9]+)(?P<separator>[.)]){_WS}+"


@dataclass(frozen=True, slots=True)
class LineMatcher:
    """One rule of the classification table.

    Attributes:
        kind: Kind produced when the pattern matches
        pattern: Compiled pattern, applied with fullmatch
        marker: Literal marker for unordered rules

    """

    kind: ListKind
    pattern: re.Pattern[str]
    marker: str | None = None

    def match(self, line: str) -> ListItem | None:
        m = self.pattern.fullmatch(line)
        if m is None:
            return None

        number: int | None = None
        separator: str | None = None
        if self.kind in (ListKind.ORDERED, ListKind.ORDERED_COLON):
            number = int(m.group("number"))
            separator = m.group("separator")

        return ListItem(
            kind=self.kind,
            indent=m.group("indent"),
            prefix=m.group("prefix") or "",
            content=m.group("content"),
            marker=self.marker,
            number=number,
            separator=separator,
        )


def _unordered_pattern(marker: str, *, colon: bool) -> re.Pattern[str]:
    content = r"(?P<content>.+):" if colon else r"(?P<content>.*)"
    return re.compile(rf"(?P<indent>{_WS}*)(?P<prefix>{re.escape(marker)}{_WS}+){content}")


_ORDERED_COLON_PATTERN = re.compile(
    rf"(?P<indent>{_WS}*)(?P<prefix>{_ORDERED_PREFIX})(?P<content>.+):"
)
_ORDERED_PATTERN = re.compile(rf"(?P<indent>{_WS}*)(?P<prefix>{_ORDERED_PREFIX})(?P<content>.*)")
_COLON_PATTERN = re.compile(rf"(?P<indent>{_WS}*)(?P<prefix>)(?P<content>.+):")


@lru_cache(maxsize=32)
def build_matchers(markers: tuple[str, ...]) -> tuple[LineMatcher, ...]:
    """Build the ordered matcher table for a marker tuple.

    Args:
        markers: Unordered markers in declaration order

    Returns:
        Matchers in evaluation order (first match wins)

    """
    table: list[LineMatcher] = []
    table.extend(
        LineMatcher(ListKind.UNORDERED_COLON, _unordered_pattern(m, colon=True), m)
        for m in markers
    )
    table.append(LineMatcher(ListKind.ORDERED_COLON, _ORDERED_COLON_PATTERN))
    table.extend(
        LineMatcher(ListKind.UNORDERED, _unordered_pattern(m, colon=False), m) for m in markers
    )
    table.append(LineMatcher(ListKind.ORDERED, _ORDERED_PATTERN))
    table.append(LineMatcher(ListKind.COLON, _COLON_PATTERN))
    return tuple(table)


def classify(line: str, config: ListConfig = DEFAULT_CONFIG) -> ListItem | None:
    """Classify a single line as a list item.

    Args:
        line: Raw line text without its line terminator
        config: Marker configuration

    Returns:
        A ListItem descriptor, or None when the line is not a list item

    Example:
        >>> classify("  * Item").kind
        <ListKind.UNORDERED: 'unordered'>
        >>> classify("plain text") is None
        True

    """
    for matcher in build_matchers(config.markers):
        item = matcher.match(line)
        if item is not None:
            return item
    return None


__all__ = [
    "LineMatcher",
    "build_matchers",
    "classify",
]
