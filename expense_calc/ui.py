from typing import Callable

from PyQt6.QtWidgets import QFrame, QLabel, QToolButton, QVBoxLayout
from PyQt6.QtGui import QStandardItem, QFont, QBrush, QColor
from PyQt6.QtCore import Qt

from .config import THEME_DARK
from .ledger import Expense
from .style import UI_FONT_FAMILY, UI_BASE_FONT_SIZE, HEADING_FONT_SIZE

SUN_GLYPH = "☀"
MOON_GLYPH = "☾"


def format_money(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def make_item(expense: Expense, index: int, color: QColor | None = None) -> QStandardItem:
    item = QStandardItem(f"{expense.name}: {format_money(expense.amount)}")
    item.setEditable(False)
    item.setFont(QFont(UI_FONT_FAMILY, UI_BASE_FONT_SIZE))
    if color is not None:
        item.setForeground(QBrush(color))
    item.setTextAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
    item.setData(index, Qt.ItemDataRole.UserRole)
    return item


def make_heading(text: str) -> QLabel:
    label = QLabel(text)
    font = QFont(UI_FONT_FAMILY, HEADING_FONT_SIZE)
    font.setBold(True)
    label.setFont(font)
    return label


def make_panel(title: str) -> tuple[QFrame, QVBoxLayout]:
    """Return a rounded panel frame and its layout, with the heading added."""
    frame = QFrame()
    frame.setObjectName("panel")
    layout = QVBoxLayout(frame)
    layout.setContentsMargins(16, 16, 16, 16)
    layout.setSpacing(8)
    layout.addWidget(make_heading(title))
    return frame, layout


class ThemeToggleButton(QToolButton):
    """Shows a sun while dark mode is active and a moon in light mode."""

    def __init__(self, theme: str, on_toggle: Callable[[], None], parent=None):
        super().__init__(parent)
        self.setObjectName("themeToggle")
        self.setAutoRaise(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clicked.connect(lambda checked=False: on_toggle())
        self.set_theme(theme)

    def set_theme(self, theme: str):
        if theme == THEME_DARK:
            self.setText(SUN_GLYPH)
            self.setToolTip("Switch to light theme")
        else:
            self.setText(MOON_GLYPH)
            self.setToolTip("Switch to dark theme")
