"""
Terminal handle for the Hector text editor.

Wraps the curses screen as a scoped resource: entering the context switches the
terminal into raw/no-echo/keypad mode, leaving it restores the previous mode
on every exit path.
"""
import curses
import os

from hector import logger
from hector.errors import TerminalInitError, TerminalIOError
from hector.viewport import Size

class Terminal:
    """The process-wide curses screen, acquired with `with Terminal() as terminal:`."""
    def __init__(self):
        self.stdscr = None
        self.extended_color_support = False

    def __enter__(self):
        # Keep ESC from stalling the input loop
        os.environ.setdefault("ESCDELAY", "25")
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.raw()
            self.stdscr.keypad(True)
        except curses.error as e:
            self.restore()
            raise TerminalInitError(f"could not initialise terminal: {e}") from e

        try:
            curses.start_color()
            curses.use_default_colors()
        except curses.error:
            logger.log("terminal has no color support")
        else:
            self.extended_color_support = curses.can_change_color() and curses.COLORS >= 256
        logger.log("terminal initialised")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def restore(self):
        """Put the terminal back into the mode it had before __enter__."""
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.echo()
            curses.noraw()
            curses.endwin()
        except curses.error as e:
            logger.log(f"terminal restore failed: {e}")
        self.stdscr = None

    def size(self) -> Size:
        height, width = self.stdscr.getmaxyx()
        return Size(width, height)

    def read_key(self) -> int:
        """
        Block until one key event is available and return its curses code.
        getch() only returns ERR (-1) in blocking mode when the read itself failed,
        e.g. stdin was closed.
        """
        key = self.stdscr.getch()
        if key == curses.ERR:
            raise TerminalIOError("terminal read failed")
        return key

    def flush(self):
        try:
            self.stdscr.refresh()
        except curses.error as e:
            raise TerminalIOError(f"terminal write failed: {e}") from e
