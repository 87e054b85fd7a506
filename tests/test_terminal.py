import curses

import pytest

from hector.errors import TerminalIOError
from hector.viewport import Size

from conftest import recording_terminal


class TestTerminal:
    def test_size(self):
        assert recording_terminal(Size(100, 30)).size() == Size(100, 30)

    def test_read_key(self):
        terminal = recording_terminal(keys=[ord("a"), curses.KEY_UP])
        assert terminal.read_key() == ord("a")
        assert terminal.read_key() == curses.KEY_UP

    def test_failed_read_is_terminal_error(self):
        terminal = recording_terminal(keys=[curses.ERR])
        with pytest.raises(TerminalIOError):
            terminal.read_key()

    def test_failed_flush_is_terminal_error(self):
        with pytest.raises(TerminalIOError):
            recording_terminal(fail_refresh=True).flush()

    def test_restore_without_screen_is_a_no_op(self):
        terminal = recording_terminal()
        terminal.stdscr = None
        terminal.restore()
        assert terminal.stdscr is None
