"""
Cursor navigation for the Hector text editor.

The navigation state machine is a pure function of the current cursor, the
requested command and the buffer. The column is always re-clamped against the
width of the row the cursor ends up on.
"""
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A (column, row) pair in buffer space."""
    x: int = 0
    y: int = 0


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    QUIT = "quit"


def move_cursor(cursor: Position, command: Command, buffer) -> Position:
    """Return the cursor position after applying a navigation command."""
    x, y = cursor.x, cursor.y
    height = len(buffer)
    width = buffer.row_width(y)

    if command == Command.UP:
        y = max(y - 1, 0)
    elif command == Command.DOWN:
        y = min(y + 1, height)
    elif command == Command.LEFT:
        x = max(x - 1, 0)
    elif command == Command.RIGHT:
        x = min(x + 1, width)
    # PageUp/PageDown jump to the ends of the document, not by one screen
    elif command == Command.PAGE_UP:
        y = 0
    elif command == Command.PAGE_DOWN:
        y = height
    elif command == Command.HOME:
        x = 0
    elif command == Command.END:
        x = width

    return clamp(Position(x, y), buffer)


def clamp(cursor: Position, buffer) -> Position:
    """Pull a position back inside the document: y in [0, len], x in [0, width(row(y))]."""
    y = min(max(cursor.y, 0), len(buffer))
    x = min(max(cursor.x, 0), buffer.row_width(y))
    return Position(x, y)
