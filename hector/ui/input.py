"""
Input handling for Hector text editor.

Decodes curses key codes into navigation commands and edits and applies them to
the editor context. Keys that mean nothing to the editor are ignored.
"""
import curses

from hector.navigation import Command

CTRL_Q = 17
CTRL_S = 19
CTRL_T = 20

ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (8, curses.KEY_BACKSPACE, 127)

NAVIGATION_KEYS = {
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_PPAGE: Command.PAGE_UP,
    curses.KEY_NPAGE: Command.PAGE_DOWN,
    curses.KEY_HOME: Command.HOME,
    curses.KEY_END: Command.END,
    CTRL_Q: Command.QUIT,
}

def resolve_command(key: int):
    """Return the navigation Command bound to key, or None."""
    return NAVIGATION_KEYS.get(key)

def handle_key(context, key: int):
    """Handle a single key press."""
    command = resolve_command(key)
    if command == Command.QUIT:
        context.quit()
        return
    if command is not None:
        context.move(command)
        return

    if key == curses.KEY_RESIZE:
        context.resize()
        return
    if key == CTRL_S:
        context.save()
        return
    if key == CTRL_T:
        context.cycle_theme()
        return

    document = context.document
    if key in ENTER_KEYS:
        context.cursor = document.insert_newline(context.cursor)
    elif key in BACKSPACE_KEYS:
        context.cursor = document.backspace(context.cursor)
    elif key == curses.KEY_DC:
        context.cursor = document.delete(context.cursor)
    elif key == 9 or 32 <= key <= 126:
        # Insert a printable character (or a tab)
        context.cursor = document.insert(context.cursor, chr(key))
