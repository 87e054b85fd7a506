"""
Debug log for Hector.

The screen belongs to curses while the editor runs, so diagnostics go to a file
instead: `hector.log` in the working directory, or the path in HECTOR_LOG.
"""
import curses
import datetime
import os

LOG_FILE_PATH = os.environ.get("HECTOR_LOG", "hector.log")

def log(message: str) -> None:
    """Write `[YYYY-mm-dd HH:MM:SS] message` to the log. Never raises."""
    try:
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        pass

def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Draw one span of a row. curses rejects writes that end in the bottom-right
    cell or fall off a shrunk window; those spans are logged and skipped.
    """
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        log(f"addstr rejected at ({y},{x}): {text!r}")
