"""
Buffer module for Hector text editor.

Defines the Buffer class that holds the open document as an ordered list of Rows
and the row-level editing operations on it (inserting, deleting, splitting and
joining lines). Cursor positions passed in and returned are in render columns.
"""
from hector import logger
from hector.errors import DocumentLoadError
from hector.navigation import Position, clamp
from hector.row import Row

def split_lines(content: str):
    """
    Split file content on LF and CRLF line endings only. Other separators
    (form feed, vertical tab, U+2028 ...) stay inside the line so a save writes
    the file back unchanged. A final line ending does not start an extra line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]

class Buffer:
    """Represents a text buffer (file content) with editing operations."""
    def __init__(self, filename: str = None, lines=None):
        self.filename = filename  # Path to file or None for new/unsaved
        # An empty document has no rows at all, not one empty row
        self.rows = [Row(line) for line in lines] if lines else []
        self.modified = False

    @classmethod
    def open(cls, path: str) -> "Buffer":
        """Read the file at path, one Row per line. Raises DocumentLoadError."""
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                content = split_lines(f.read())
        except (OSError, UnicodeDecodeError) as e:
            logger.log(f"open failed for {path}: {e}")
            raise DocumentLoadError(path) from e
        return cls(path, content)

    def __len__(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    @property
    def lines(self):
        return [row.text for row in self.rows]

    def row(self, index: int):
        """Return the Row at index, or None past the end of the document."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def row_width(self, index: int) -> int:
        """Render width of the row at index; 0 for the row past the end."""
        row = self.row(index)
        return len(row) if row is not None else 0

    def insert(self, at: Position, text: str) -> Position:
        """Insert text at the cursor and return the cursor placed after it."""
        at = clamp(at, self)
        if at.y == len(self.rows):
            self.rows.append(Row())
        row = self.rows[at.y]
        index = row.to_raw_index(at.x)
        row.insert(index, text)
        self.modified = True
        return Position(row.to_render_col(index + len(text)), at.y)

    def insert_newline(self, at: Position) -> Position:
        """Split the current row at the cursor, moving the remainder to a new row below."""
        at = clamp(at, self)
        if at.y == len(self.rows):
            self.rows.append(Row())
        else:
            row = self.rows[at.y]
            self.rows.insert(at.y + 1, row.split(row.to_raw_index(at.x)))
        self.modified = True
        return Position(0, at.y + 1)

    def delete(self, at: Position) -> Position:
        """Delete the character under the cursor, or join the next row at end of line."""
        at = clamp(at, self)
        row = self.row(at.y)
        if row is None:
            return at
        index = row.to_raw_index(at.x)
        if row.delete(index):
            self.modified = True
            return Position(row.to_render_col(index), at.y)
        if at.y + 1 < len(self.rows):
            row.append(self.rows.pop(at.y + 1).text)
            self.modified = True
        return at

    def backspace(self, at: Position) -> Position:
        """Delete the character before the cursor, or join with the previous row at column 0."""
        at = clamp(at, self)
        row = self.row(at.y)
        if at.x > 0 and row is not None:
            index = row.to_raw_index(at.x - 1)
            row.delete(index)
            self.modified = True
            return Position(row.to_render_col(index), at.y)
        if at.y == 0:
            return at
        prev = self.rows[at.y - 1]
        col = len(prev)
        if row is not None:
            prev.append(self.rows.pop(at.y).text)
            self.modified = True
        return Position(col, at.y - 1)

    def save(self) -> bool:
        """
        Write the buffer contents to self.filename, if any.
        Returns True on success, False on error or if no filename is set.
        """
        if not self.filename:
            return False
        try:
            with open(self.filename, 'w', encoding='utf-8', newline='') as f:
                for row in self.rows:
                    f.write(row.text + "\n")
        except OSError as e:
            logger.log(f"save failed for {self.filename}: {e}")
            return False
        self.modified = False
        return True
