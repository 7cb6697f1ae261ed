"""Edit directives returned by the transform engine.

The engine never touches a buffer. It describes the edit as one of the
values below and the host (or ``listo.buffer.LineBuffer``) applies it.

Conventions:
    Line numbers are 1-indexed. Cursor columns are 0-indexed character
    offsets, so a cursor "at the end" of ``"* "`` sits at column 2.

Thread Safety:
All directives are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Let the host run its default behavior for the gesture.

    Attributes:
        clear_line: Clear the current line to "" before the default
            behavior runs (used to end a list on an empty top-level item)

    """

    clear_line: bool = False


@dataclass(frozen=True, slots=True)
class InsertLine:
    """Insert a new line after ``after_line`` and move the cursor.

    ``after_line == 0`` inserts at the top of the buffer.

    """

    after_line: int
    text: str
    cursor_line: int
    cursor_column: int
    enter_insert_mode: bool = True


@dataclass(frozen=True, slots=True)
class ReplaceCurrentLine:
    """Replace the current line in place. The editing mode is left alone."""

    line: int
    text: str
    cursor_column: int


@dataclass(frozen=True, slots=True)
class ReplaceAndInsertAbove:
    """Rewrite the current line, then insert a new line above it.

    After applying, the new line occupies ``line`` and the rewritten line
    sits at ``line + 1``.

    """

    line: int
    replacement: str
    inserted: str
    cursor_column: int
    enter_insert_mode: bool = True

    @property
    def cursor_line(self) -> int:
        return self.line


@dataclass(frozen=True, slots=True)
class ReplaceLineRange:
    """Replace lines ``start_line..end_line`` (inclusive) with ``lines``."""

    start_line: int
    end_line: int
    lines: tuple[str, ...]
    cursor_line: int
    cursor_column: int


Directive = Passthrough | InsertLine | ReplaceCurrentLine | ReplaceAndInsertAbove | ReplaceLineRange

PASSTHROUGH = Passthrough()


__all__ = [
    "PASSTHROUGH",
    "Directive",
    "InsertLine",
    "Passthrough",
    "ReplaceAndInsertAbove",
    "ReplaceCurrentLine",
    "ReplaceLineRange",
]
