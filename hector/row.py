"""
Row module for the Hector text editor.

A Row holds one line of text together with its render form, the printable
projection drawn on screen: tabs expand to the next tab stop and other control
characters are shown in caret notation. Column positions are plain character
counts of that projection; wide and combining characters are not measured.
"""

TAB_STOP = 8


def expand_char(ch: str, col: int) -> str:
    """Return the printable text for `ch` when it starts at render column `col`."""
    if ch == "\t":
        return " " * (TAB_STOP - col % TAB_STOP)
    code = ord(ch)
    if code < 32:
        return "^" + chr(code + 64)
    if code == 127:
        return "^?"
    return ch


class Row:
    """A single line of text plus its cached render form."""
    def __init__(self, text: str = ""):
        self._text = ""
        self._render = ""
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        # The render cache is rebuilt on every assignment so readers never see a stale one
        self._text = value
        parts = []
        col = 0
        for ch in value:
            piece = expand_char(ch, col)
            parts.append(piece)
            col += len(piece)
        self._render = "".join(parts)

    @property
    def rendered(self) -> str:
        return self._render

    def __len__(self) -> int:
        return len(self._render)

    def __repr__(self):
        return f"Row({self._text!r})"

    def render(self, start: int, end: int) -> str:
        """Return the render columns [start, end), clipped to the row."""
        start = max(0, start)
        end = min(end, len(self._render))
        if start >= end:
            return ""
        return self._render[start:end]

    def to_raw_index(self, col: int) -> int:
        """
        Map a render column to the index of the raw character drawn there.
        A column inside a tab expansion maps to the tab itself; columns past the
        end map to len(text).
        """
        pos = 0
        for i, ch in enumerate(self._text):
            pos += len(expand_char(ch, pos))
            if pos > col:
                return i
        return len(self._text)

    def to_render_col(self, index: int) -> int:
        """Map a raw character index to the render column where it starts."""
        col = 0
        for ch in self._text[:max(0, index)]:
            col += len(expand_char(ch, col))
        return col

    def insert(self, index: int, text: str):
        """Insert text before the raw character at index."""
        index = min(max(0, index), len(self._text))
        self.text = self._text[:index] + text + self._text[index:]

    def delete(self, index: int) -> bool:
        """Delete the raw character at index. Returns False if there was none."""
        if not 0 <= index < len(self._text):
            return False
        self.text = self._text[:index] + self._text[index + 1:]
        return True

    def append(self, text: str):
        self.text = self._text + text

    def split(self, index: int) -> "Row":
        """Cut the row at the raw index, keep the head and return the tail as a new Row."""
        index = min(max(0, index), len(self._text))
        tail = Row(self._text[index:])
        self.text = self._text[:index]
        return tail
