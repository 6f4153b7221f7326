from PyQt6.QtGui import QColor

from .config import THEME_DARK, THEME_LIGHT, load_style_settings
from .exceptions import UnknownThemeError

_STYLE = load_style_settings()

# Fonts
UI_FONT_FAMILY = _STYLE["ui_font_family"]
UI_BASE_FONT_SIZE = _STYLE["ui_base_font_size"]
TITLE_FONT_SIZE = _STYLE["title_font_size"]
HEADING_FONT_SIZE = _STYLE["heading_font_size"]

# Window geometry
WINDOW_SCALE_RATIO = _STYLE["window_scale_ratio"]
PANEL_MIN_WIDTH = _STYLE["panel_min_width"]

# Chart settings
CHART_HEIGHT = _STYLE["chart_height"]
CHART_TITLE = "Monthly Financial Overview"

# Colour tokens per theme; the only place the view takes colours from.
PALETTES: dict[str, dict[str, str]] = {
    THEME_LIGHT: {
        "background": "#ffffff",
        "panel": "#f3f4f6",
        "text": "#111827",
        "muted": "#4b5563",
        "input_bg": "#ffffff",
        "input_border": "#d1d5db",
        "button": "#2563eb",
        "button_hover": "#1d4ed8",
        "toggle": "#1f2937",
        "grid": "#e5e7eb",
        "expenses": "#ef4444",
        "income": "#16a34a",
        "savings": "#3b82f6",
    },
    THEME_DARK: {
        "background": "#111827",
        "panel": "#1f2937",
        "text": "#ffffff",
        "muted": "#cccccc",
        "input_bg": "#374151",
        "input_border": "#4b5563",
        "button": "#3b82f6",
        "button_hover": "#2563eb",
        "toggle": "#facc15",
        "grid": "#374151",
        "expenses": "#f87171",
        "income": "#22c55e",
        "savings": "#60a5fa",
    },
}


def palette_for(theme: str) -> dict[str, str]:
    try:
        return PALETTES[theme]
    except KeyError:
        raise UnknownThemeError(f"No palette for theme: {theme!r}") from None


def palette_color(theme: str, token: str) -> QColor:
    return QColor(palette_for(theme)[token])


def build_stylesheet(theme: str) -> str:
    """Return the window-wide style sheet for ``theme``."""
    p = palette_for(theme)
    return f"""
        QWidget {{ background-color: {p['background']}; color: {p['text']}; font-family: "{UI_FONT_FAMILY}"; font-size: {UI_BASE_FONT_SIZE}pt; }}
        QFrame#panel {{ background-color: {p['panel']}; border-radius: 8px; }}
        QFrame#panel QLabel {{ background-color: transparent; }}
        QLabel#hint {{ color: {p['muted']}; }}
        QLineEdit, QComboBox, QListView {{ background-color: {p['input_bg']}; color: {p['text']}; border: 1px solid {p['input_border']}; border-radius: 5px; padding: 4px 6px; }}
        QPushButton#addExpense {{ background-color: {p['button']}; color: #ffffff; font-weight: bold; border: none; border-radius: 5px; padding: 6px 12px; }}
        QPushButton#addExpense:hover {{ background-color: {p['button_hover']}; }}
        QPushButton#removeExpense {{ background-color: transparent; color: {p['text']}; border: 1px solid {p['input_border']}; border-radius: 5px; padding: 4px 10px; }}
        QToolButton#themeToggle {{ background-color: transparent; color: {p['toggle']}; border: none; font-size: 16pt; }}
        """
