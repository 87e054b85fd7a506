from hector.highlight import Highlighter, category_for
from hector.themes import get_builtin_themes
from pygments.token import Token


def python_highlighter(theme="ocean"):
    return Highlighter("example.py", theme, get_builtin_themes())


class TestHighlighter:
    def test_spans_join_back_to_line(self):
        line = "def greet(name):  return 'hi ' + name  # say hi"
        spans = python_highlighter().highlight(line)
        assert "".join(text for _, text in spans) == line

    def test_python_categories(self):
        spans = python_highlighter().highlight("def greet(): return 42")
        categories = {category for category, _ in spans}
        assert "keyword" in categories
        assert "function" in categories
        assert "number" in categories

    def test_comment(self):
        assert python_highlighter().highlight("# note") == [("comment", "# note")]

    def test_empty_line(self):
        assert python_highlighter().highlight("") == []

    def test_unknown_file_type_is_plain(self):
        highlighter = Highlighter("notes.unknownext", "ocean", get_builtin_themes())
        assert highlighter.lexer is None
        assert highlighter.syntax_name == "plain text"
        assert highlighter.highlight("def x") == [("text", "def x")]

    def test_no_filename_is_plain(self):
        highlighter = Highlighter(None, "ocean", get_builtin_themes())
        assert highlighter.highlight("x = 1") == [("text", "x = 1")]

    def test_unknown_theme_disables_highlighting(self):
        highlighter = python_highlighter(theme="no-such-theme")
        assert highlighter.theme is None
        assert highlighter.highlight("def x(): pass") == [("text", "def x(): pass")]

    def test_switch_theme(self):
        highlighter = python_highlighter()
        assert highlighter.switch_theme("monokai")
        assert highlighter.theme_name == "monokai"
        assert not highlighter.switch_theme("missing")
        assert highlighter.theme_name is None

    def test_next_theme_cycles(self):
        highlighter = python_highlighter()
        assert highlighter.next_theme() == "solarized"
        assert highlighter.next_theme() == "monokai"
        assert highlighter.next_theme() == "ocean"

    def test_next_theme_recovers_from_no_theme(self):
        highlighter = python_highlighter(theme="missing")
        assert highlighter.next_theme() == "monokai"
        assert highlighter.theme is not None

    def test_category_falls_back_to_parent(self):
        assert category_for(Token.Literal.String.Double) == "string"
        assert category_for(Token.Punctuation) == "text"
