from pathlib import Path
import sys
import logging
import configparser
from typing import Any

logger = logging.getLogger(__name__)


def _resolve_config_file() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent / "expense_calc.ini"
    module_dir = Path(__file__).resolve().parent
    candidate = module_dir / "expense_calc.ini"
    if candidate.exists():
        return candidate
    return module_dir.with_name("expense_calc.ini")


CONFIG_FILE = _resolve_config_file()

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEME_CHOICES = [THEME_LIGHT, THEME_DARK]
DEFAULT_THEME = THEME_DARK

STYLE_DEFAULTS: dict[str, Any] = {
    "ui_font_family": "Segoe UI",
    "ui_base_font_size": 10,
    "title_font_size": 16,
    "heading_font_size": 12,
    "window_scale_ratio": 0.8,
    "chart_height": 320,
    "panel_min_width": 320,
}

_STYLE_INT_KEYS = {
    "ui_base_font_size",
    "title_font_size",
    "heading_font_size",
    "chart_height",
    "panel_min_width",
}
_STYLE_FLOAT_KEYS = {"window_scale_ratio"}


def _load_cfg() -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if CONFIG_FILE.exists():
        cfg.read(CONFIG_FILE, encoding="utf-8")
    return cfg


def _save_cfg(cfg: configparser.ConfigParser) -> None:
    with open(CONFIG_FILE, "w", encoding="utf-8") as f:
        cfg.write(f)


def load_theme() -> str:
    """Return the persisted theme, storing the default when none is saved.

    Unreadable files and unknown values fall back to the dark theme.
    """
    try:
        cfg = _load_cfg()
    except OSError as exc:
        logger.warning("Could not read settings file %s: %s", CONFIG_FILE, exc)
        return DEFAULT_THEME
    except configparser.Error as exc:
        logger.warning("Rewriting unparsable settings file %s: %s", CONFIG_FILE, exc)
        save_theme(DEFAULT_THEME)
        return DEFAULT_THEME
    theme = cfg.get("app", "theme", fallback=None)
    if theme is None:
        save_theme(DEFAULT_THEME)
        return DEFAULT_THEME
    if theme not in THEME_CHOICES:
        logger.warning("Ignoring unknown theme %r in %s", theme, CONFIG_FILE)
        return DEFAULT_THEME
    return theme


def save_theme(theme: str) -> None:
    try:
        try:
            cfg = _load_cfg()
        except configparser.Error:
            # Unparsable file; start over so the theme can persist again
            cfg = configparser.ConfigParser()
        if "app" not in cfg:
            cfg["app"] = {}
        cfg["app"]["theme"] = str(theme)
        _save_cfg(cfg)
    except (OSError, configparser.Error) as exc:
        logger.warning("Could not save theme to %s: %s", CONFIG_FILE, exc)


def load_style_settings() -> dict[str, Any]:
    try:
        cfg = _load_cfg()
    except (OSError, configparser.Error) as exc:
        logger.warning("Could not read style settings from %s: %s", CONFIG_FILE, exc)
        return dict(STYLE_DEFAULTS)
    updated = False
    if "style" not in cfg:
        cfg["style"] = {}
        updated = True
    section = cfg["style"]
    settings: dict[str, Any] = {}
    for key, default in STYLE_DEFAULTS.items():
        raw_value = section.get(key)
        if raw_value is None:
            section[key] = str(default)
            raw_value = str(default)
            updated = True
        try:
            if key in _STYLE_INT_KEYS:
                settings[key] = int(float(raw_value))
            elif key in _STYLE_FLOAT_KEYS:
                settings[key] = float(raw_value)
            else:
                settings[key] = raw_value
        except (TypeError, ValueError, OverflowError):
            # Fallback to default on invalid values
            settings[key] = default
            section[key] = str(default)
            updated = True
    if updated:
        try:
            _save_cfg(cfg)
        except OSError as exc:
            logger.warning("Could not write style defaults to %s: %s", CONFIG_FILE, exc)
    return settings
