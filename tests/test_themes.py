import os

from hector import themes

SAMPLE_THEMES = os.path.join(os.path.dirname(__file__), "..", "config", "themes")


class TestThemes:
    def test_builtin_themes_have_all_colors(self):
        for name, data in themes.get_builtin_themes().items():
            for key in themes.REQUIRED_KEYS:
                assert key in data, f"{name} lacks {key}"
        assert themes.DEFAULT_THEME in themes.get_builtin_themes()

    def test_sample_user_theme_loads(self):
        found = themes.load_user_themes(SAMPLE_THEMES)
        assert "gruvbox" in found

    def test_missing_theme_dir(self, tmp_path):
        assert themes.load_user_themes(str(tmp_path / "nope")) == {}

    def test_broken_and_incomplete_theme_files_are_skipped(self, tmp_path):
        (tmp_path / "broken.py").write_text("this is not python(", encoding="utf-8")
        (tmp_path / "partial.py").write_text(
            'theme_name = "partial"\ntheme_data = {"bg": (0, 0, 0)}\n', encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        assert themes.load_user_themes(str(tmp_path)) == {}

    def test_user_theme_overrides_builtin(self, tmp_path):
        data = dict(themes.get_builtin_themes()["monokai"], bg=(1, 2, 3))
        (tmp_path / "mine.py").write_text(
            f'theme_name = "ocean"\ntheme_data = {data!r}\n', encoding="utf-8")
        assert themes.load_all_themes(str(tmp_path))["ocean"]["bg"] == (1, 2, 3)

    def test_theme_config_round_trip(self, tmp_path):
        path = str(tmp_path / "config" / "theme.conf")
        assert themes.load_theme_config(path) is None
        themes.save_theme_config("monokai", path)
        assert themes.load_theme_config(path) == "monokai"
