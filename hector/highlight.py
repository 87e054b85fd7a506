"""
Syntax highlighting for the Hector text editor.

Lexes one display line at a time with Pygments and reduces the tokens to a few
color categories that the screen maps onto curses color pairs. A missing lexer
or theme is not an error: the line is then returned as plain text.
"""
from pygments import lex
from pygments.lexers import get_lexer_for_filename
from pygments.token import Token
from pygments.util import ClassNotFound

from hector import logger
from hector.themes import DEFAULT_THEME

TOKEN2CATEGORY = {
    Token.Keyword: "keyword",
    Token.Literal.String: "string",
    Token.Literal.Number: "number",
    Token.Comment: "comment",
    Token.Name.Function: "function",
    Token.Name.Class: "function",
    Token.Operator: "operator",
    Token.Name: "name",
    Token.Text: "text",
}

def category_for(tok) -> str:
    while tok not in TOKEN2CATEGORY and tok.parent:
        tok = tok.parent
    return TOKEN2CATEGORY.get(tok, "text")

class Highlighter:
    """Owns the lexer for the open file and the active color theme."""
    def __init__(self, filename=None, theme_name=DEFAULT_THEME, themes=None):
        self.themes = themes or {}
        self.lexer = None
        self.theme_name = None
        self.theme = None
        self.set_syntax(filename)
        self.switch_theme(theme_name)

    @property
    def syntax_name(self) -> str:
        return self.lexer.name if self.lexer else "plain text"

    def set_syntax(self, filename) -> bool:
        """Pick a lexer from the file name; fall back to no highlighting."""
        self.lexer = None
        if not filename:
            return False
        try:
            self.lexer = get_lexer_for_filename(filename, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.log(f"no lexer for {filename}, highlighting disabled")
            return False
        return True

    def switch_theme(self, name) -> bool:
        """Make `name` the active theme. Unknown names disable highlighting."""
        if name not in self.themes:
            logger.log(f"theme {name} not found, highlighting disabled")
            self.theme_name = None
            self.theme = None
            return False
        self.theme_name = name
        self.theme = self.themes[name]
        return True

    def next_theme(self) -> str:
        """Cycle to the next known theme and return its name."""
        names = sorted(self.themes)
        if not names:
            return None
        if self.theme_name in names:
            name = names[(names.index(self.theme_name) + 1) % len(names)]
        else:
            name = names[0]
        self.switch_theme(name)
        return name

    def highlight(self, line: str):
        """
        Split a display line into (category, text) spans.
        The span texts always join back to `line`.
        """
        if not line:
            return []
        if self.lexer is None or self.theme is None:
            return [("text", line)]

        spans = []
        for tok, text in lex(line, self.lexer):
            if not text:
                continue
            category = category_for(tok)
            if spans and spans[-1][0] == category:
                spans[-1] = (category, spans[-1][1] + text)
            else:
                spans.append((category, text))
        # Lexers may normalise their input; draw the raw line if the spans no longer match it
        if "".join(text for _, text in spans) != line:
            return [("text", line)]
        return spans
