"""Sibling numbering for ordered lists.

When an empty ordered item is outdented, its new number comes from the
ordered siblings already present at the target indent. The lookup walks
upward from the line above the item:

- a line at exactly ``indent`` that is an ordered item contributes its number
- a non-blank line indented deeper than ``indent`` is a nested child of a
  sibling and is skipped
- anything else (blank line, shallower indent, same-indent non-ordered
  line) ends the block

The result is the highest number found plus one, or 1 when the block
is empty.

Example:
    >>> lines = ["1. a", "  1. b", "  "]
    >>> next_sibling_number(lines, "", 3)
    2

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from listo.classifier import classify
from listo.config import DEFAULT_CONFIG, ListConfig

NumberingLookup = Callable[[str, int], int]
"""``(indent, line_number) -> next number``; line_number is 1-indexed."""


def next_sibling_number(
    lines: Sequence[str],
    indent: str,
    from_line: int,
    config: ListConfig = DEFAULT_CONFIG,
) -> int:
    """Find the number for a new ordered item at ``indent``.

    Args:
        lines: Buffer lines (index 0 is line 1)
        indent: Indent of the item being numbered, verbatim
        from_line: 1-indexed line of the item; the scan starts above it
        config: Marker configuration used to classify siblings

    Returns:
        Highest contiguous sibling number plus one, or 1

    """
    highest = 0
    index = min(from_line - 1, len(lines)) - 1
    while index >= 0:
        line = lines[index]
        index -= 1
        if not line.strip():
            break
        leading = line[: len(line) - len(line.lstrip(" \t"))]
        if leading != indent:
            if len(leading) > len(indent) and leading.startswith(indent):
                continue
            break
        item = classify(line, config)
        if item is None or not item.is_ordered or item.number is None:
            break
        highest = max(highest, item.number)
    return highest + 1


def buffer_numbering(lines: Sequence[str], config: ListConfig = DEFAULT_CONFIG) -> NumberingLookup:
    """Bind ``next_sibling_number`` to a buffer snapshot."""

    def lookup(indent: str, line_number: int) -> int:
        return next_sibling_number(lines, indent, line_number, config)

    return lookup


def no_siblings(indent: str, line_number: int) -> int:
    """Lookup used when the host provides none: always start at 1."""
    return 1


__all__ = [
    "NumberingLookup",
    "buffer_numbering",
    "next_sibling_number",
    "no_siblings",
]
