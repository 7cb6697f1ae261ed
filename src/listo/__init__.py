"""
Listo: Markdown list continuation for editors

Classifies a single line of prose as a markdown list item and computes
what an editing gesture should do to it: continue the list, open a
nested list after a colon, end the list on an empty item, renumber an
ordered list, or shift an item in and out. The engine returns edit
directives and never touches a buffer itself.

Quick Start:
    >>> from listo import Gesture, classify, transform
    >>> item = classify("1. First item")
    >>> transform(Gesture.CONFIRM, item, "  ", 1)
    InsertLine(after_line=1, text='2. ', cursor_line=2, cursor_column=3, enter_insert_mode=True)

    >>> # Or drive an in-memory buffer end to end
    >>> from listo import LineBuffer, handle_gesture
    >>> buf = LineBuffer(["Topics:"])
    >>> _ = handle_gesture(buf, Gesture.CONFIRM)
    >>> buf.lines
    ['Topics:', '  - ']

Custom Markers:
    >>> from listo import ListConfig
    >>> config = ListConfig.from_dict({"list_markers": ["*", "-"]})
    >>> classify("- x", config).marker
    '-'

Installation:
    pip install listo              # Zero runtime dependencies
    pip install listo[test]        # + pytest and hypothesis
"""

from listo.buffer import LineBuffer, Mode, handle_gesture
from listo.classifier import LineMatcher, build_matchers, classify
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
from listo.errors import ConfigError, LineRangeError, ListoError
from listo.items import ListItem, ListKind
from listo.markers import colon_marker, indent_level, indent_unit_for, marker_for_depth
from listo.numbering import NumberingLookup, buffer_numbering, next_sibling_number
from listo.transform import (
    Gesture,
    confirm,
    open_above,
    open_below,
    shift,
    transform,
    transform_line,
)

__version__ = "0.1.0"

__all__ = [
    # Classification
    "classify",
    "build_matchers",
    "LineMatcher",
    "ListItem",
    "ListKind",
    # Configuration
    "DEFAULT_CONFIG",
    "ListConfig",
    # Markers
    "colon_marker",
    "indent_level",
    "indent_unit_for",
    "marker_for_depth",
    # Numbering
    "NumberingLookup",
    "buffer_numbering",
    "next_sibling_number",
    # Transform
    "Gesture",
    "confirm",
    "open_above",
    "open_below",
    "shift",
    "transform",
    "transform_line",
    # Directives
    "PASSTHROUGH",
    "Directive",
    "InsertLine",
    "Passthrough",
    "ReplaceAndInsertAbove",
    "ReplaceCurrentLine",
    "ReplaceLineRange",
    # Host adapter
    "LineBuffer",
    "Mode",
    "handle_gesture",
    # Errors
    "ConfigError",
    "LineRangeError",
    "ListoError",
]
