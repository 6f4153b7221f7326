import sys
import logging
from typing import Callable

from PyQt6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox,
    QLineEdit, QPushButton, QSizePolicy, QListView, QAbstractItemView,
    QFormLayout,
)
from PyQt6.QtGui import QStandardItemModel, QFont, QDoubleValidator
from PyQt6.QtCore import Qt, QTimer, QLocale
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from . import config
from .config import THEME_DARK, THEME_LIGHT, DEFAULT_THEME
from .ledger import (
    MAX_AMOUNT,
    MONTHS,
    SERIES_NAMES,
    Expense,
    ExpenseInput,
    Ledger,
)
from .style import (
    CHART_HEIGHT,
    CHART_TITLE,
    PANEL_MIN_WIDTH,
    TITLE_FONT_SIZE,
    UI_FONT_FAMILY,
    WINDOW_SCALE_RATIO,
    build_stylesheet,
    palette_color,
    palette_for,
)
from .ui import ThemeToggleButton, format_money, make_item, make_panel

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_HINT = "Expense name and amount are required."


def _amount_validator(parent) -> QDoubleValidator:
    validator = QDoubleValidator(-MAX_AMOUNT, MAX_AMOUNT, 2, parent)
    validator.setNotation(QDoubleValidator.Notation.StandardNotation)
    validator.setLocale(QLocale.c())
    return validator


class ExpenseCalculator(QWidget):
    """Income and expense form, monthly summary and yearly chart in one window.

    ``theme`` is the initial theme and ``save_theme`` is called with the new
    value every time the user toggles it.
    """

    def __init__(
        self,
        theme: str = DEFAULT_THEME,
        save_theme: Callable[[str], None] | None = None,
        ledger: Ledger | None = None,
    ):
        super().__init__()
        self.setWindowTitle("Expense Calculator")
        screen = QApplication.primaryScreen()
        if screen is not None:
            geometry = screen.availableGeometry()
            self.resize(int(geometry.width() * WINDOW_SCALE_RATIO), int(geometry.height() * WINDOW_SCALE_RATIO))
            self.move(geometry.center() - self.rect().center())
        self.theme = theme if theme in (THEME_LIGHT, THEME_DARK) else DEFAULT_THEME
        self._save_theme = save_theme
        self.ledger = ledger if ledger is not None else Ledger()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        header_layout = QHBoxLayout()
        title = QLabel("Expense Calculator")
        title_font = QFont(UI_FONT_FAMILY, TITLE_FONT_SIZE)
        title_font.setBold(True)
        title.setFont(title_font)
        header_layout.addWidget(title)
        header_layout.addStretch()
        self.theme_btn = ThemeToggleButton(self.theme, self.toggle_theme)
        header_layout.addWidget(self.theme_btn)
        layout.addLayout(header_layout)

        panels_layout = QHBoxLayout()
        panels_layout.setSpacing(16)
        panels_layout.addWidget(self._build_form_panel(), stretch=1)
        panels_layout.addWidget(self._build_summary_panel(), stretch=1)
        layout.addLayout(panels_layout)

        self.figure = Figure(figsize=(8, CHART_HEIGHT / 100), dpi=100)
        self.canvas = FigureCanvasQTAgg(self.figure)
        self.canvas.setMinimumHeight(CHART_HEIGHT)
        self.canvas.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        layout.addWidget(self.canvas, stretch=1)

        self.apply_theme()

    def _build_form_panel(self) -> QWidget:
        frame, layout = make_panel("Add Income & Expenses")
        frame.setMinimumWidth(PANEL_MIN_WIDTH)
        form = QFormLayout()
        form.setFieldGrowthPolicy(QFormLayout.FieldGrowthPolicy.AllNonFixedFieldsGrow)

        self.income_input = QLineEdit(f"{self.ledger.income:g}")
        self.income_input.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.income_input.setValidator(_amount_validator(self.income_input))
        self.income_input.textChanged.connect(self._on_income_changed)
        form.addRow("Monthly Income", self.income_input)

        self.month_cb = QComboBox()
        self.month_cb.addItems(MONTHS)
        self.month_cb.setCurrentText(self.ledger.selected_month)
        self.month_cb.currentTextChanged.connect(self._on_month_changed)
        form.addRow("Select Month", self.month_cb)

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Required")
        self.name_input.returnPressed.connect(self.add_expense)
        form.addRow("Expense Name", self.name_input)

        self.amount_input = QLineEdit()
        self.amount_input.setPlaceholderText("Required")
        self.amount_input.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.amount_input.setValidator(_amount_validator(self.amount_input))
        self.amount_input.returnPressed.connect(self.add_expense)
        form.addRow("Expense Amount", self.amount_input)
        layout.addLayout(form)

        self.add_btn = QPushButton("Add Expense")
        self.add_btn.setObjectName("addExpense")
        self.add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_btn.clicked.connect(self.add_expense)
        layout.addWidget(self.add_btn)

        self.hint_label = QLabel("")
        self.hint_label.setObjectName("hint")
        layout.addWidget(self.hint_label)
        layout.addStretch()
        return frame

    def _build_summary_panel(self) -> QWidget:
        frame, layout = make_panel("Summary")
        frame.setMinimumWidth(PANEL_MIN_WIDTH)
        self.selected_month_label = QLabel()
        self.month_total_label = QLabel()
        self.month_savings_label = QLabel()
        self.yearly_expenses_label = QLabel()
        self.yearly_savings_label = QLabel()
        for label in (
            self.selected_month_label,
            self.month_total_label,
            self.month_savings_label,
        ):
            label.setTextFormat(Qt.TextFormat.RichText)
            layout.addWidget(label)
        layout.addSpacing(6)
        for label in (self.yearly_expenses_label, self.yearly_savings_label):
            label.setTextFormat(Qt.TextFormat.RichText)
            layout.addWidget(label)
        layout.addSpacing(6)

        self.expenses_heading = QLabel()
        layout.addWidget(self.expenses_heading)
        self.expense_model = QStandardItemModel()
        self.expense_view = QListView()
        self.expense_view.setModel(self.expense_model)
        self.expense_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.expense_view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        layout.addWidget(self.expense_view, stretch=1)

        self.remove_btn = QPushButton("Remove Selected")
        self.remove_btn.setObjectName("removeExpense")
        self.remove_btn.clicked.connect(self.remove_selected_expense)
        layout.addWidget(self.remove_btn, alignment=Qt.AlignmentFlag.AlignRight)
        return frame

    def showEvent(self, event):
        super().showEvent(event)
        # Redraw once the canvas has its real size
        QTimer.singleShot(0, self.update_chart)

    def toggle_theme(self):
        self.theme = THEME_LIGHT if self.theme == THEME_DARK else THEME_DARK
        if self._save_theme is not None:
            self._save_theme(self.theme)
        logger.info("Theme switched to %s", self.theme)
        self.apply_theme()

    def apply_theme(self):
        self.setStyleSheet(build_stylesheet(self.theme))
        self.theme_btn.set_theme(self.theme)
        self.refresh()

    def _on_income_changed(self, text: str):
        self.ledger.set_income(text)
        self.refresh()

    def _on_month_changed(self, month: str):
        if not month:
            return
        self.ledger.select_month(month)
        self.refresh()

    def current_input(self) -> ExpenseInput:
        return ExpenseInput(self.name_input.text(), self.amount_input.text())

    def add_expense(self) -> Expense | None:
        entry = self.current_input()
        if not entry.is_complete():
            self.hint_label.setText(REQUIRED_FIELDS_HINT)
            return None
        expense = entry.to_expense()
        self.ledger.add_expense(expense.name, expense.amount)
        self.name_input.clear()
        self.amount_input.clear()
        self.hint_label.setText("")
        self.name_input.setFocus()
        self.refresh()
        return expense

    def remove_selected_expense(self) -> Expense | None:
        index = self.expense_view.currentIndex()
        if not index.isValid():
            return None
        row = index.data(Qt.ItemDataRole.UserRole)
        expense = self.ledger.remove_expense(self.ledger.selected_month, int(row))
        self.refresh()
        return expense

    def refresh(self):
        month = self.ledger.selected_month
        self.selected_month_label.setText(f"Selected Month: <b>{month}</b>")
        self.month_total_label.setText(
            f"Total Monthly Expenses: <b>{format_money(self.ledger.monthly_total(month))}</b>"
        )
        self.month_savings_label.setText(
            f"Savings for {month}: <b>{format_money(self.ledger.display_savings(month))}</b>"
        )
        self.yearly_expenses_label.setText(
            f"Yearly Total Expenses: <b>{format_money(self.ledger.yearly_total_expenses())}</b>"
        )
        self.yearly_savings_label.setText(
            f"Yearly Total Savings: <b>{format_money(self.ledger.yearly_total_savings())}</b>"
        )

        self.expenses_heading.setText(f"Expenses for {month}")
        item_color = palette_color(self.theme, "expenses")
        self.expense_model.clear()
        for row, expense in enumerate(self.ledger.expenses_for(month)):
            self.expense_model.appendRow(make_item(expense, row, item_color))
        self.remove_btn.setEnabled(self.expense_model.rowCount() > 0)

        self.update_chart()

    def update_chart(self):
        if not hasattr(self, "figure"):
            return
        palette = palette_for(self.theme)
        frame = self.ledger.summary_frame()
        text_color = palette["text"]

        self.figure.clear()
        self.figure.set_facecolor(palette["background"])
        ax = self.figure.add_subplot(111)
        ax.set_facecolor(palette["background"])
        xs = list(range(len(frame.index)))
        for series in SERIES_NAMES:
            ax.plot(
                xs,
                frame[series].tolist(),
                color=palette[series.lower()],
                marker="o",
                linewidth=2,
                markersize=4,
                label=series,
            )
        ax.set_xticks(xs)
        ax.set_xticklabels(list(frame.index), rotation=30, ha="right", fontsize=8, color=text_color)
        ax.tick_params(axis="x", colors=text_color)
        ax.tick_params(axis="y", labelsize=8, colors=text_color)
        ax.set_title(CHART_TITLE, fontsize=10, color=text_color, pad=8)
        ax.grid(axis="y", color=palette["grid"], linestyle="--", linewidth=0.8, alpha=0.7)
        for spine in ("top", "right"):
            ax.spines[spine].set_visible(False)
        for spine in ("bottom", "left"):
            ax.spines[spine].set_color(palette["grid"])
        legend = ax.legend(loc="upper right", fontsize=8, frameon=False)
        for text in legend.get_texts():
            text.set_color(text_color)
        self.figure.subplots_adjust(left=0.08, right=0.98, top=0.9, bottom=0.22)
        self.canvas.draw_idle()


def main():
    logging.basicConfig(level=logging.INFO)
    app = QApplication(sys.argv)
    w = ExpenseCalculator(theme=config.load_theme(), save_theme=config.save_theme)
    w.show()
    sys.exit(app.exec())
