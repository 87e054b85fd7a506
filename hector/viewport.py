"""
Viewport scrolling for the Hector text editor.

Keeps the on-screen window over the buffer positioned so that the cursor is
always visible, moving it by the smallest amount that achieves this.
"""
from dataclasses import dataclass

from hector.navigation import Position


@dataclass(frozen=True)
class Size:
    width: int
    height: int


def _scroll_axis(cursor: int, offset: int, extent: int) -> int:
    if cursor < offset:
        return cursor
    if cursor >= offset + extent:
        return cursor - extent + 1
    return offset


def recompute(cursor: Position, offset: Position, size: Size) -> Position:
    """Return the offset that makes `cursor` visible in a window of `size`."""
    width = max(1, size.width)
    height = max(1, size.height)
    return Position(
        _scroll_axis(cursor.x, offset.x, width),
        _scroll_axis(cursor.y, offset.y, height),
    )
