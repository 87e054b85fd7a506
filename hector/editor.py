"""
Editor context for the Hector text editor.

Holds the open document, the cursor, the viewport offset and the highlighter,
and runs the read-key / update / redraw loop until the user quits.
"""
import time

from hector import logger, themes
from hector.buffer import Buffer
from hector.errors import DocumentLoadError
from hector.highlight import Highlighter
from hector.navigation import Position, move_cursor
from hector.ui import input, screen
from hector.viewport import Size, recompute

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-T = theme | Ctrl-Q = quit"
STATUS_TIMEOUT = 5  # seconds a status message stays visible

class StatusMessage:
    """A transient status-bar message."""
    def __init__(self, text: str):
        self.text = text
        self.time = time.time()

    def current(self) -> str:
        """The message text while it is fresh, then an empty string."""
        if time.time() - self.time < STATUS_TIMEOUT:
            return self.text
        return ""

class Editor:
    """
    Holds the state of the editor. The terminal is borrowed from the caller,
    which owns its raw-mode scope.
    """
    def __init__(self, terminal, filename: str = None,
                 themes_dir: str = themes.THEMES_DIR, config_path: str = themes.THEME_CONF):
        self.terminal = terminal
        self.size = terminal.size()
        self.cursor = Position()
        self.offset = Position()
        self.should_quit = False
        self.status = StatusMessage(HELP_MESSAGE)

        self.document = Buffer()
        if filename:
            try:
                self.document = Buffer.open(filename)
            except DocumentLoadError as e:
                # Carry on with an empty, unnamed document
                self.set_status(f"ERR: {e}")

        # Theme persistence
        self.config_path = config_path
        theme_name = themes.load_theme_config(config_path) or themes.DEFAULT_THEME
        self.highlighter = Highlighter(self.document.filename, theme_name,
                                       themes.load_all_themes(themes_dir))

        # Colors are (re)installed by the screen on the next refresh
        self.colors_dirty = True
        self.color_pairs = {}

    def run(self):
        """Redraw, then handle one key, until a quit command has been seen."""
        logger.log("Editor started.")
        while True:
            screen.refresh_screen(self)
            if self.should_quit:
                break
            self.process_keypress()
        logger.log("Editor exited.")

    def process_keypress(self):
        key = self.terminal.read_key()
        input.handle_key(self, key)
        self.scroll()

    def text_area(self) -> Size:
        """The part of the terminal that shows the document (all but the status bar)."""
        return Size(self.size.width, max(1, self.size.height - 1))

    def scroll(self):
        self.offset = recompute(self.cursor, self.offset, self.text_area())

    def set_status(self, text: str):
        self.status = StatusMessage(text)
        logger.log(text)

    def move(self, command):
        self.cursor = move_cursor(self.cursor, command, self.document)

    def quit(self):
        self.should_quit = True

    def resize(self):
        self.size = self.terminal.size()

    def save(self):
        """Write the document back to its file."""
        if not self.document.filename:
            self.set_status("ERR: No file name, nothing saved")
            return
        if self.document.save():
            self.set_status(f"File saved: {self.document.filename}")
        else:
            self.set_status(f"ERR: Could not save file: {self.document.filename}")

    def cycle_theme(self):
        """Switch the highlighter to the next theme and remember the choice."""
        name = self.highlighter.next_theme()
        if name is None:
            return
        themes.save_theme_config(name, self.config_path)
        self.colors_dirty = True
        self.set_status(f"theme changed to {name}")
