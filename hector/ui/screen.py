"""
hector/ui/screen.py

Implements the UI drawing for the Hector text editor: the visible rows of the
document (syntax highlighted with the current theme), the welcome banner for an
empty document, the status bar and the cursor.
"""
import curses
import os

from wcwidth import wcwidth

from hector import logger
from hector.themes import CATEGORIES
from hector.version import VERSION

WELCOME_MESSAGE = "Hector editor -- version {}"
FAREWELL_MESSAGE = "Goodbye."
PLACEHOLDER = "~"

# Color pair numbers: one per highlight category, then the status bar
PAIR_NUMBERS = {category: i + 1 for i, category in enumerate(CATEGORIES)}
STATUS_PAIR = len(CATEGORIES) + 1

BASIC_COLORS = {
    "text": curses.COLOR_WHITE,
    "keyword": curses.COLOR_MAGENTA,
    "string": curses.COLOR_GREEN,
    "number": curses.COLOR_YELLOW,
    "comment": curses.COLOR_CYAN,
    "function": curses.COLOR_BLUE,
    "operator": curses.COLOR_RED,
    "name": curses.COLOR_WHITE,
}

# First color index redefined for extended-color themes
FIRST_COLOR_INDEX = 16

def char_width(ch: str) -> int:
    """Cells taken by one character; unprintable characters count as one."""
    width = wcwidth(ch)
    return width if width >= 0 else 1

def text_width(text: str) -> int:
    """Visual width of text in terminal cells."""
    return sum(char_width(ch) for ch in text)

def pad_line(text, width):
    """
    Pad or trim a string to exactly `width` cells. A wide character that would
    straddle the edge is dropped and its remaining cell filled with a space.
    """
    cells = 0
    for i, ch in enumerate(text):
        ch_width = char_width(ch)
        if cells + ch_width > width:
            return text[:i] + " " * (width - cells)
        cells += ch_width
    return text + " " * (width - cells)

###############################################################################
# THEME
###############################################################################

def apply_theme(context):
    """
    Set up curses color pairs for the highlight categories and the status bar
    from the highlighter's active theme. With extended color support the theme's
    RGB colors are installed; otherwise basic curses colors are used. Without a
    theme every category is drawn in the plain text color.
    """
    context.colors_dirty = False
    context.color_pairs = {}
    if not curses.has_colors():
        return

    theme = context.highlighter.theme
    try:
        if theme and context.terminal.extended_color_support:
            def to_curses(rgb):
                return int(rgb[0]/255*1000), int(rgb[1]/255*1000), int(rgb[2]/255*1000)

            keys = ("bg", "status_bg", "status_fg") + CATEGORIES
            index = {key: FIRST_COLOR_INDEX + i for i, key in enumerate(keys)}
            for key in keys:
                curses.init_color(index[key], *to_curses(theme[key]))
            for category in CATEGORIES:
                curses.init_pair(PAIR_NUMBERS[category], index[category], index["bg"])
            curses.init_pair(STATUS_PAIR, index["status_fg"], index["status_bg"])
        else:
            for category in CATEGORIES:
                fg = BASIC_COLORS[category] if theme else curses.COLOR_WHITE
                curses.init_pair(PAIR_NUMBERS[category], fg, curses.COLOR_BLACK)
            curses.init_pair(STATUS_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
    except curses.error as e:
        logger.log(f"could not apply theme {context.highlighter.theme_name}: {e}")
        return

    context.color_pairs = dict(PAIR_NUMBERS, status=STATUS_PAIR)
    try:
        context.terminal.stdscr.bkgd(" ", curses.color_pair(PAIR_NUMBERS["text"]))
    except curses.error:
        pass

def attr(context, category: str) -> int:
    """Curses attribute for a highlight category (0 when colors are unavailable)."""
    pair = context.color_pairs.get(category)
    return curses.color_pair(pair) if pair else 0

###############################################################################
# ROWS
###############################################################################

def welcome_message(width: int) -> str:
    message = WELCOME_MESSAGE.format(VERSION)
    padding = max(0, width - text_width(message)) // 2
    line = PLACEHOLDER + " " * max(0, padding - 1) + message
    return pad_line(line, width).rstrip()

def build_rows(context, size):
    """
    Return the text area as a list of rows, each a list of (category, text) spans.
    The last terminal row is left for the status bar.
    """
    document = context.document
    start = context.offset.x
    end = start + size.width
    rows = []
    for terminal_row in range(size.height - 1):
        row = document.row(context.offset.y + terminal_row)
        if row is not None:
            rows.append(context.highlighter.highlight(row.render(start, end)))
        elif document.is_empty() and terminal_row == size.height // 3:
            rows.append([("text", welcome_message(size.width))])
        else:
            rows.append([("text", PLACEHOLDER)])
    return rows

def draw_rows(context, size):
    stdscr = context.terminal.stdscr
    for y, spans in enumerate(build_rows(context, size)):
        x = 0
        for category, text in spans:
            logger.safe_addstr(stdscr, y, x, text, attr(context, category))
            x += text_width(text)

###############################################################################
# STATUS BAR
###############################################################################

def status_line(context, width: int) -> str:
    """
    Left: file name, line count, modified flag and a fresh status message.
    Right: syntax and cursor line. The right part is dropped when space runs out.
    """
    document = context.document
    name = os.path.basename(document.filename) if document.filename else "[No Name]"
    left = f" {name[:20]} - {len(document)} lines"
    if document.modified:
        left += " (modified)"
    message = context.status.current()
    if message:
        left += f" | {message}"
    right = f"{context.highlighter.syntax_name} | {context.cursor.y + 1}/{len(document)} "

    gap = width - text_width(left) - text_width(right)
    if gap > 0:
        return left + " " * gap + right
    return pad_line(left, width)

def draw_status_bar(context, size):
    if size.height < 1:
        return
    line = status_line(context, size.width)
    try:
        # insstr never moves the cursor, so the bottom-right cell is safe to fill
        context.terminal.stdscr.insstr(size.height - 1, 0, line, attr(context, "status"))
    except curses.error:
        logger.log("curses.error drawing status bar")

###############################################################################
# REFRESH
###############################################################################

def set_cursor_visibility(visible: bool):
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        pass

def refresh_screen(context):
    """
    Re-draw the entire screen: text rows, status bar and cursor, or the farewell
    message when the editor is quitting. Raises TerminalIOError if the terminal
    cannot be written.
    """
    stdscr = context.terminal.stdscr
    if context.colors_dirty:
        apply_theme(context)

    set_cursor_visibility(False)
    stdscr.erase()
    if context.should_quit:
        logger.safe_addstr(stdscr, 0, 0, FAREWELL_MESSAGE)
    else:
        size = context.size
        draw_rows(context, size)
        draw_status_bar(context, size)
        try:
            stdscr.move(context.cursor.y - context.offset.y, context.cursor.x - context.offset.x)
        except curses.error:
            pass
        set_cursor_visibility(True)
    context.terminal.flush()
