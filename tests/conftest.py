import curses

import pytest

from hector import logger
from hector.editor import Editor
from hector.ui.terminal import Terminal
from hector.viewport import Size


class FakeTerminal:
    """Stands in for the curses terminal: a fixed size and a queue of keys."""
    def __init__(self, size=Size(80, 24), keys=()):
        self._size = size
        self.keys = list(keys)
        self.stdscr = None
        self.extended_color_support = False

    def size(self):
        return self._size

    def read_key(self):
        return self.keys.pop(0)


class RecordingScreen:
    """A curses window that records what is drawn on it."""
    def __init__(self, size=Size(80, 24), keys=(), fail_refresh=False):
        self.height = size.height
        self.width = size.width
        self.keys = list(keys)
        self.fail_refresh = fail_refresh
        self.calls = []

    def getmaxyx(self):
        return self.height, self.width

    def getch(self):
        return self.keys.pop(0)

    def addstr(self, y, x, text, attr=0):
        self.calls.append(("addstr", y, x, text, attr))

    def insstr(self, y, x, text, attr=0):
        self.calls.append(("insstr", y, x, text, attr))

    def move(self, y, x):
        self.calls.append(("move", y, x))

    def erase(self):
        self.calls.append(("erase",))

    def bkgd(self, ch, attr=0):
        self.calls.append(("bkgd", ch, attr))

    def refresh(self):
        if self.fail_refresh:
            raise curses.error("refresh failed")
        self.calls.append(("refresh",))

    def drawn(self, kind):
        return [call for call in self.calls if call[0] == kind]


def recording_terminal(size=Size(80, 24), keys=(), fail_refresh=False):
    """A real Terminal handle whose curses window is a RecordingScreen."""
    terminal = Terminal()
    terminal.stdscr = RecordingScreen(size, keys, fail_refresh)
    return terminal


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(tmp_path / "hector.log"))


@pytest.fixture
def make_editor(tmp_path):
    def make(filename=None, size=Size(80, 24), keys=()):
        terminal = FakeTerminal(size, keys)
        return Editor(terminal, filename,
                      themes_dir=str(tmp_path / "themes"),
                      config_path=str(tmp_path / "theme.conf"))
    return make


@pytest.fixture
def fake_curses(monkeypatch):
    """Replace the curses calls that need an initialised screen."""
    installed = {}
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(curses, "has_colors", lambda: True)
    monkeypatch.setattr(curses, "color_pair", lambda pair: pair << 8)
    monkeypatch.setattr(curses, "init_pair", lambda pair, fg, bg: installed.__setitem__(pair, (fg, bg)))
    return installed


@pytest.fixture
def make_screen_editor(tmp_path):
    def make(filename=None, size=Size(80, 24), keys=(), fail_refresh=False):
        terminal = recording_terminal(size, keys, fail_refresh)
        return Editor(terminal, filename,
                      themes_dir=str(tmp_path / "themes"),
                      config_path=str(tmp_path / "theme.conf"))
    return make
