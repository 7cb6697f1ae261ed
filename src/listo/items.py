"""List item descriptors produced by the line classifier.

A ListItem is a value: it is built fresh for every classified line and
carries enough of the original text to rebuild it exactly.

Invariant:
    item.render() == line   for every line where classify(line) is item

Thread Safety:
ListItem is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ListKind(Enum):
    """Kinds of line the classifier recognises.

    The colon kinds end in ``:`` and open a nested list below them.

    """

    UNORDERED = "unordered"  # - item
    ORDERED = "ordered"  # 1. item / 1) item
    UNORDERED_COLON = "unordered_colon"  # - item:
    ORDERED_COLON = "ordered_colon"  # 1. item:
    COLON = "colon"  # Topics:


COLON_KINDS: frozenset[ListKind] = frozenset(
    {ListKind.UNORDERED_COLON, ListKind.ORDERED_COLON, ListKind.COLON}
)
ORDERED_KINDS: frozenset[ListKind] = frozenset({ListKind.ORDERED, ListKind.ORDERED_COLON})
UNORDERED_KINDS: frozenset[ListKind] = frozenset({ListKind.UNORDERED, ListKind.UNORDERED_COLON})


@dataclass(frozen=True, slots=True)
class ListItem:
    """A classified line.

    Attributes:
        kind: Which grammar rule matched
        indent: Leading whitespace, verbatim (spaces and/or tabs)
        prefix: Marker text including its trailing whitespace, verbatim
            (e.g. "- ", "2)  "). Empty for plain colon lines.
        content: Text after the prefix, without the trailing colon for
            colon kinds
        marker: The configured marker that matched (unordered kinds only)
        number: Item number (ordered kinds only)
        separator: "." or ")" (ordered kinds only)

    """

    kind: ListKind
    indent: str
    prefix: str
    content: str
    marker: str | None = None
    number: int | None = None
    separator: str | None = None

    @property
    def empty(self) -> bool:
        """True when the item has no content after its prefix.

        Colon kinds always have content, so this is only meaningful for
        plain unordered and ordered items.
        """
        return self.content == ""

    @property
    def is_colon(self) -> bool:
        return self.kind in COLON_KINDS

    @property
    def is_ordered(self) -> bool:
        return self.kind in ORDERED_KINDS

    @property
    def is_unordered(self) -> bool:
        return self.kind in UNORDERED_KINDS

    @property
    def body(self) -> str:
        """Everything after indent and prefix, trailing colon included."""
        return self.content + ":" if self.is_colon else self.content

    def render(self) -> str:
        """Rebuild the original line from the descriptor fields."""
        return self.indent + self.prefix + self.body


__all__ = [
    "COLON_KINDS",
    "ORDERED_KINDS",
    "UNORDERED_KINDS",
    "ListItem",
    "ListKind",
]
