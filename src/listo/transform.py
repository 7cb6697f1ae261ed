"""Edit transform engine for list editing gestures.

Maps a gesture plus the classified current line to a directive that
describes the buffer edit. The engine reads nothing but its arguments
and mutates nothing, so it can be called repeatedly and tested without
an editor.

Gestures:
- CONFIRM: end-of-line continue (Enter in insert mode)
- OPEN_BELOW / OPEN_ABOVE: open a new line below/above (normal mode o/O)
- INDENT / OUTDENT: shift the item one level (Tab / Shift-Tab)

Decision summary:

    ============  ===============  ==================  ===============
    kind          CONFIRM          OPEN_BELOW          OPEN_ABOVE
    ============  ===============  ==================  ===============
    colon kinds   nested child     nested child        passthrough
    empty item    outdent / end    sibling             sibling above
    item          sibling          sibling             sibling above
    not a list    passthrough      passthrough         passthrough
    ============  ===============  ==================  ===============

The colon branches only look at the line text. Where the cursor sits on
the line does not matter: pressing Enter mid-line on ``Topics:`` still
opens a child below.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from enum import Enum

from listo.classifier import classify
from listo.config import DEFAULT_CONFIG, ListConfig
from listo.directives import (
    PASSTHROUGH,
    Directive,
    InsertLine,
    Passthrough,
    ReplaceAndInsertAbove,
    ReplaceCurrentLine,
    ReplaceLineRange,
)
from listo.items import ListItem, ListKind
from listo.markers import colon_marker, indent_level, marker_for_depth, normalise_indent_unit
from listo.numbering import NumberingLookup, no_siblings
from listo.utils.logger import get_logger

logger = get_logger(__name__)

# Unit removed from an empty indented item on CONFIRM. This path does not
# use the host's indent unit: tabs-only indents lose one tab, anything
# else loses two spaces.
_EMPTY_ITEM_TAB_UNIT = "\t"
_EMPTY_ITEM_SPACE_UNIT = "  "


class Gesture(Enum):
    """Editing gestures the engine understands."""

    CONFIRM = "confirm"
    OPEN_BELOW = "open_below"
    OPEN_ABOVE = "open_above"
    INDENT = "indent"
    OUTDENT = "outdent"


def transform(
    gesture: Gesture,
    item: ListItem | None,
    indent_unit: str,
    line_number: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
    cursor_column: int | None = None,
    numbering: NumberingLookup | None = None,
) -> Directive:
    """Compute the directive for a gesture on a classified line.

    Args:
        gesture: The editing gesture
        item: Classification of the current line (None if not a list item)
        indent_unit: One level of indentation (spaces or a tab)
        line_number: 1-indexed current line
        config: Marker configuration
        cursor_column: Current 0-indexed cursor column. Only used by
            INDENT/OUTDENT; defaults to the end of the line.
        numbering: Sibling number lookup for outdenting empty ordered
            items; defaults to assuming no siblings

    Returns:
        Directive describing the edit

    """
    unit = normalise_indent_unit(indent_unit)

    match gesture:
        case Gesture.CONFIRM:
            directive = confirm(item, unit, line_number, config=config, numbering=numbering)
        case Gesture.OPEN_BELOW:
            directive = open_below(item, unit, line_number, config=config)
        case Gesture.OPEN_ABOVE:
            directive = open_above(item, line_number)
        case Gesture.INDENT | Gesture.OUTDENT:
            directive = shift(
                item,
                unit,
                line_number,
                outdent=gesture is Gesture.OUTDENT,
                config=config,
                cursor_column=cursor_column,
            )

    logger.debug(
        "%s on line %d (%s) -> %s",
        gesture.value,
        line_number,
        item.kind.value if item else "plain",
        type(directive).__name__,
    )
    return directive


def transform_line(
    gesture: Gesture,
    line: str,
    indent_unit: str,
    line_number: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
    cursor_column: int | None = None,
    numbering: NumberingLookup | None = None,
) -> Directive:
    """Classify ``line`` and transform it in one step."""
    return transform(
        gesture,
        classify(line, config),
        indent_unit,
        line_number,
        config=config,
        cursor_column=cursor_column,
        numbering=numbering,
    )


def confirm(
    item: ListItem | None,
    indent_unit: str,
    line_number: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
    numbering: NumberingLookup | None = None,
) -> Directive:
    """Continue the list below the current line.

    Empty items end the list instead: an indented empty item moves one
    level out, a top-level empty item is cleared and the host performs
    its ordinary newline.
    """
    if item is None:
        return PASSTHROUGH
    if item.is_colon:
        return _insert_below(line_number, _child_prefix(item, indent_unit, config))
    if not item.empty:
        return _insert_below(line_number, _sibling_prefix(item))

    if not item.indent:
        return Passthrough(clear_line=True)

    reduced = _reduce_empty_indent(item.indent)
    if item.kind is ListKind.ORDERED:
        lookup = numbering or no_siblings
        text = f"{reduced}{lookup(reduced, line_number)}{item.separator} "
    else:
        text = f"{reduced}{item.marker} "
    return ReplaceCurrentLine(line=line_number, text=text, cursor_column=len(text))


def open_below(
    item: ListItem | None,
    indent_unit: str,
    line_number: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> Directive:
    """Open a new line below, continuing the list. Empty items are not special."""
    if item is None:
        return PASSTHROUGH
    if item.is_colon:
        return _insert_below(line_number, _child_prefix(item, indent_unit, config))
    return _insert_below(line_number, _sibling_prefix(item))


def open_above(item: ListItem | None, line_number: int) -> Directive:
    """Open a new line above the current item.

    Colon lines pass through: nesting is never opened above. Opening above
    an ordered item gives the new line the current number and renumbers
    the pushed-down line.
    """
    if item is None or item.is_colon:
        return PASSTHROUGH

    if item.kind is ListKind.ORDERED:
        assert item.number is not None
        inserted = f"{item.indent}{item.number}{item.separator} "
        replacement = f"{item.indent}{item.number + 1}{item.separator} {item.content}"
        return ReplaceAndInsertAbove(
            line=line_number,
            replacement=replacement,
            inserted=inserted,
            cursor_column=len(inserted),
        )

    text = f"{item.indent}{item.marker} "
    return InsertLine(
        after_line=line_number - 1,
        text=text,
        cursor_line=line_number,
        cursor_column=len(text),
    )


def shift(
    item: ListItem | None,
    indent_unit: str,
    line_number: int,
    *,
    outdent: bool,
    config: ListConfig = DEFAULT_CONFIG,
    cursor_column: int | None = None,
) -> Directive:
    """Indent or outdent a list item by one indent unit.

    The marker is re-chosen for the new depth and the text after the old
    prefix is kept verbatim. Outdenting past column 0 clamps to no indent;
    if the indent does not change, the line is reproduced unchanged.
    """
    if item is None or item.kind is ListKind.COLON:
        return PASSTHROUGH

    unit = normalise_indent_unit(indent_unit)
    old_line = item.render()
    if outdent:
        new_indent = item.indent[: -len(unit)] if len(item.indent) >= len(unit) else ""
    else:
        new_indent = item.indent + unit

    if new_indent == item.indent:
        text = old_line
    else:
        marker = marker_for_depth(indent_level(new_indent, unit), config)
        text = f"{new_indent}{marker} {item.body}"

    column = len(old_line) if cursor_column is None else cursor_column
    column = max(0, column + len(new_indent) - len(item.indent))
    return ReplaceLineRange(
        start_line=line_number,
        end_line=line_number,
        lines=(text,),
        cursor_line=line_number,
        cursor_column=column,
    )


def _insert_below(line_number: int, text: str) -> InsertLine:
    return InsertLine(
        after_line=line_number,
        text=text,
        cursor_line=line_number + 1,
        cursor_column=len(text),
    )


def _sibling_prefix(item: ListItem) -> str:
    if item.is_ordered:
        assert item.number is not None
        return f"{item.indent}{item.number + 1}{item.separator} "
    return f"{item.indent}{item.marker} "


def _child_prefix(item: ListItem, indent_unit: str, config: ListConfig) -> str:
    new_indent = item.indent + indent_unit
    if item.kind is ListKind.COLON:
        # A plain colon line starts a new list
        marker = colon_marker(config)
    else:
        marker = marker_for_depth(indent_level(new_indent, indent_unit), config)
    return f"{new_indent}{marker} "


def _reduce_empty_indent(indent: str) -> str:
    if indent.strip("\t") == "":
        unit = _EMPTY_ITEM_TAB_UNIT
    else:
        unit = _EMPTY_ITEM_SPACE_UNIT
    return indent[: max(len(indent) - len(unit), 0)]


__all__ = [
    "Gesture",
    "confirm",
    "open_above",
    "open_below",
    "shift",
    "transform",
    "transform_line",
]
