"""
themes.py

Holds the built-in Hector themes in a Python dictionary form and the small
configuration layer around them. Any .py file in ~/hector/config/themes/ that
defines `theme_name` and `theme_data` is also picked up, and the last chosen
theme is remembered in ~/hector/config/theme.conf.
"""
import importlib.util
import os

from hector import logger

CONFIG_DIR = os.path.expanduser("~/hector/config")
THEMES_DIR = os.path.join(CONFIG_DIR, "themes")
THEME_CONF = os.path.join(CONFIG_DIR, "theme.conf")

DEFAULT_THEME = "ocean"

# Highlight categories every theme must color
CATEGORIES = ("text", "keyword", "string", "number", "comment", "function", "operator", "name")
REQUIRED_KEYS = ("bg", "status_bg", "status_fg") + CATEGORIES

def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their color definitions.
    Colors are (r, g, b) tuples in 0-255.
    """
    return {
        "ocean": {
            "bg": (43, 48, 59),
            "text": (192, 197, 206),
            "keyword": (180, 142, 173),
            "string": (163, 190, 140),
            "number": (208, 135, 112),
            "comment": (101, 115, 126),
            "function": (143, 161, 179),
            "operator": (150, 181, 180),
            "name": (192, 197, 206),
            "status_bg": (79, 91, 102),
            "status_fg": (239, 241, 245),
        },
        "solarized": {
            "bg": (0, 43, 54),
            "text": (131, 148, 150),
            "keyword": (133, 153, 0),
            "string": (42, 161, 152),
            "number": (211, 54, 130),
            "comment": (88, 110, 117),
            "function": (38, 139, 210),
            "operator": (203, 75, 22),
            "name": (147, 161, 161),
            "status_bg": (7, 54, 66),
            "status_fg": (147, 161, 161),
        },
        "monokai": {
            "bg": (39, 40, 34),
            "text": (248, 248, 242),
            "keyword": (249, 38, 114),
            "string": (230, 219, 116),
            "number": (174, 129, 255),
            "comment": (117, 113, 94),
            "function": (166, 226, 46),
            "operator": (249, 38, 114),
            "name": (248, 248, 242),
            "status_bg": (73, 72, 62),
            "status_fg": (248, 248, 242),
        },
    }

def load_user_themes(themes_dir: str = THEMES_DIR):
    """
    Import every .py file in themes_dir that defines a theme.
    Files that fail to import or lack colors are logged and skipped.
    """
    found = {}
    if not os.path.isdir(themes_dir):
        return found  # no directory => nothing to add

    for fname in sorted(os.listdir(themes_dir)):
        if not fname.endswith(".py") or fname == "__init__.py":
            continue
        full_path = os.path.join(themes_dir, fname)
        spec = importlib.util.spec_from_file_location(f"hector_user_theme_{fname[:-3]}", full_path)
        if not spec or not spec.loader:
            continue

        mod = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(mod)
        except Exception as e:
            logger.log(f"theme file {full_path} failed to load: {e}")
            continue
        name = getattr(mod, "theme_name", None)
        data = getattr(mod, "theme_data", None)
        if not isinstance(name, str) or not isinstance(data, dict):
            continue
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            logger.log(f"theme {name} skipped, missing colors: {', '.join(missing)}")
            continue
        found[name] = data
    return found

def load_all_themes(themes_dir: str = THEMES_DIR):
    """Built-in themes, overlaid with the user's theme files."""
    available = get_builtin_themes()
    available.update(load_user_themes(themes_dir))
    return available

def load_theme_config(config_path: str = THEME_CONF):
    """Return the theme name saved in theme.conf, or None."""
    if not os.path.isfile(config_path):
        return None  # no config file yet
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            for line in f:
                if line.startswith("theme="):
                    theme_name = line.split("=", 1)[1].strip()
                    if theme_name:
                        return theme_name
    except OSError as e:
        logger.log(f"could not read {config_path}: {e}")
    return None

def save_theme_config(theme_name: str, config_path: str = THEME_CONF) -> None:
    """Save the current theme to theme.conf, creating directories if necessary."""
    try:
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(f"theme={theme_name}\n")
    except OSError as e:
        logger.log(f"could not write {config_path}: {e}")
