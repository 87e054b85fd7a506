"""
Error types for the Hector text editor.

Only the I/O boundary fails: a document that cannot be read is recovered by the
editor, while terminal failures end the session.
"""


class EditorError(Exception):
    """Base class for editor errors."""


class DocumentLoadError(EditorError):
    """The file given on the command line could not be read."""
    def __init__(self, path: str):
        super().__init__(f"Could not open file: {path}")
        self.path = path


class TerminalInitError(EditorError):
    """The terminal could not be switched into raw mode."""


class TerminalIOError(EditorError):
    """Reading from or writing to the terminal failed during the run loop."""
