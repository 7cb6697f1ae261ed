"""In-memory host adapter for list editing.

LineBuffer plays the part of the editor: it owns the lines, the cursor
and the editing mode, and applies the directives the engine returns.
Hosts with a real editor implement the same few operations against
their own API; embedders and tests can use LineBuffer directly.

Example:
    >>> buf = LineBuffer(["* Item 1"], cursor=(1, 8), mode=Mode.INSERT)
    >>> handle_gesture(buf, Gesture.CONFIRM)
    InsertLine(after_line=1, text='* ', cursor_line=2, cursor_column=2, enter_insert_mode=True)
    >>> buf.lines
    ['* Item 1', '* ']

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

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
from listo.errors import LineRangeError
from listo.numbering import buffer_numbering
from listo.transform import Gesture, transform_line
from listo.utils.logger import get_logger

logger = get_logger(__name__)


class Mode(Enum):
    """Editing mode of the buffer."""

    NORMAL = "normal"
    INSERT = "insert"


class LineBuffer:
    """Mutable list of lines with a cursor and a mode.

    Lines are 1-indexed, cursor columns 0-indexed, matching the
    directive conventions.
    """

    def __init__(
        self,
        lines: Iterable[str] = ("",),
        *,
        cursor: tuple[int, int] = (1, 0),
        mode: Mode = Mode.NORMAL,
    ) -> None:
        self.lines: list[str] = list(lines) or [""]
        self.mode = mode
        self.cursor = cursor
        self._check_line(cursor[0])

    @classmethod
    def from_text(cls, text: str, **kwargs: object) -> LineBuffer:
        return cls(text.split("\n"), **kwargs)  # type: ignore[arg-type]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_number(self) -> int:
        return self.cursor[0]

    @property
    def current_line(self) -> str:
        return self.get_line(self.cursor[0])

    def get_line(self, lineno: int) -> str:
        self._check_line(lineno)
        return self.lines[lineno - 1]

    def set_line(self, lineno: int, text: str) -> None:
        self._check_line(lineno)
        self.lines[lineno - 1] = text

    def insert_line(self, after_line: int, text: str) -> None:
        """Insert ``text`` after ``after_line`` (0 inserts at the top)."""
        if not 0 <= after_line <= len(self.lines):
            raise LineRangeError(after_line, len(self.lines))
        self.lines.insert(after_line, text)

    def replace_lines(self, start_line: int, end_line: int, lines: Iterable[str]) -> None:
        self._check_line(start_line)
        self._check_line(end_line)
        self.lines[start_line - 1 : end_line] = list(lines)

    def apply(
        self,
        directive: Directive,
        gesture: Gesture | None = None,
        indent_unit: str = "\t",
    ) -> None:
        """Apply a directive.

        For Passthrough the buffer performs a plain default for the
        originating gesture, standing in for the host's own behavior.
        """
        match directive:
            case Passthrough():
                self._passthrough(directive, gesture, indent_unit)
            case InsertLine():
                self.insert_line(directive.after_line, directive.text)
                self.cursor = (directive.cursor_line, directive.cursor_column)
                if directive.enter_insert_mode:
                    self.mode = Mode.INSERT
            case ReplaceCurrentLine():
                self.set_line(directive.line, directive.text)
                self.cursor = (directive.line, directive.cursor_column)
            case ReplaceAndInsertAbove():
                self.set_line(directive.line, directive.replacement)
                self.insert_line(directive.line - 1, directive.inserted)
                self.cursor = (directive.cursor_line, directive.cursor_column)
                if directive.enter_insert_mode:
                    self.mode = Mode.INSERT
            case ReplaceLineRange():
                self.replace_lines(directive.start_line, directive.end_line, directive.lines)
                self.cursor = (directive.cursor_line, directive.cursor_column)

    def _passthrough(
        self, directive: Passthrough, gesture: Gesture | None, indent_unit: str
    ) -> None:
        lineno, column = self.cursor
        if directive.clear_line:
            self.set_line(lineno, "")
            column = 0

        line = self.get_line(lineno)
        match gesture:
            case Gesture.CONFIRM:
                self.set_line(lineno, line[:column])
                self.insert_line(lineno, line[column:])
                self.cursor = (lineno + 1, 0)
            case Gesture.OPEN_BELOW:
                self.insert_line(lineno, "")
                self.cursor = (lineno + 1, 0)
                self.mode = Mode.INSERT
            case Gesture.OPEN_ABOVE:
                self.insert_line(lineno - 1, "")
                self.cursor = (lineno, 0)
                self.mode = Mode.INSERT
            case Gesture.INDENT:
                self.set_line(lineno, line[:column] + indent_unit + line[column:])
                self.cursor = (lineno, column + len(indent_unit))
            case Gesture.OUTDENT:
                if indent_unit and line.startswith(indent_unit):
                    self.set_line(lineno, line[len(indent_unit) :])
                    column = max(0, column - len(indent_unit))
                self.cursor = (lineno, column)
            case None:
                self.cursor = (lineno, column)

    def _check_line(self, lineno: int) -> None:
        if not 1 <= lineno <= len(self.lines):
            raise LineRangeError(lineno, len(self.lines))

    def __repr__(self) -> str:
        return f"LineBuffer(lines={self.lines!r}, cursor={self.cursor!r}, mode={self.mode.value!r})"


def handle_gesture(
    buffer: LineBuffer,
    gesture: Gesture,
    *,
    config: ListConfig = DEFAULT_CONFIG,
    indent_unit: str = "  ",
    filetype: str | None = None,
) -> Directive:
    """Run one gesture against a buffer: classify, transform, apply.

    Args:
        buffer: Buffer to edit in place
        gesture: The editing gesture
        config: Marker configuration
        indent_unit: One level of indentation for the host
        filetype: When given, gestures on filetypes the config is not
            enabled for pass straight through

    Returns:
        The directive that was applied

    """
    if filetype is not None and not config.is_enabled_for(filetype):
        logger.debug("filetype %r not enabled, passing %s through", filetype, gesture.value)
        directive: Directive = PASSTHROUGH
    else:
        directive = transform_line(
            gesture,
            buffer.current_line,
            indent_unit,
            buffer.line_number,
            config=config,
            cursor_column=buffer.cursor[1],
            numbering=buffer_numbering(tuple(buffer.lines), config),
        )
    buffer.apply(directive, gesture, indent_unit)
    return directive


__all__ = [
    "LineBuffer",
    "Mode",
    "handle_gesture",
]
