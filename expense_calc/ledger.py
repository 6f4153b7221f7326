"""In-memory expense ledger and the totals derived from it."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pandas as pd

from .exceptions import UnknownMonthError

logger = logging.getLogger(__name__)

MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
DEFAULT_MONTH = MONTHS[0]

SERIES_EXPENSES = "Expenses"
SERIES_INCOME = "Income"
SERIES_SAVINGS = "Savings"
SERIES_NAMES = [SERIES_EXPENSES, SERIES_INCOME, SERIES_SAVINGS]

# Larger inputs are treated as invalid; keeps every total finite.
MAX_AMOUNT = 1e12


def coerce_amount(value) -> float:
    """Turn user input into a finite float; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or abs(number) > MAX_AMOUNT:
        return 0.0
    return number


def check_month(month: str) -> str:
    if month not in MONTHS:
        raise UnknownMonthError(f"Unknown month: {month!r}")
    return month


@dataclass(frozen=True)
class Expense:
    name: str
    amount: float


@dataclass(frozen=True)
class ExpenseInput:
    """Values bound from the expense form."""

    name: str
    amount_text: str

    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.amount_text.strip())

    def to_expense(self) -> Expense:
        return Expense(self.name.strip(), coerce_amount(self.amount_text))


class Ledger:
    """Expenses per month plus the shared monthly income.

    All totals are derived on demand; the yearly figures are always the sum
    of the twelve monthly totals.
    """

    def __init__(self, income: float = 0.0, selected_month: str = DEFAULT_MONTH) -> None:
        self._entries: dict[str, list[Expense]] = {}
        self._income = coerce_amount(income)
        self._selected_month = check_month(selected_month)

    @property
    def income(self) -> float:
        return self._income

    @property
    def selected_month(self) -> str:
        return self._selected_month

    def set_income(self, value) -> float:
        self._income = coerce_amount(value)
        return self._income

    def select_month(self, month: str) -> None:
        self._selected_month = check_month(month)

    def add_expense(self, name: str, amount) -> Expense:
        """Append an expense to the selected month and return it."""
        expense = Expense(name, coerce_amount(amount))
        self._entries.setdefault(self._selected_month, []).append(expense)
        logger.debug("Added %r to %s", expense, self._selected_month)
        return expense

    def remove_expense(self, month: str, index: int) -> Expense:
        entries = self._entries.get(check_month(month), [])
        if not 0 <= index < len(entries):
            raise IndexError(f"No expense #{index} in {month}")
        expense = entries.pop(index)
        if not entries:
            self._entries.pop(month, None)
        logger.debug("Removed %r from %s", expense, month)
        return expense

    def expenses_for(self, month: str) -> list[Expense]:
        return list(self._entries.get(check_month(month), []))

    def monthly_total(self, month: str) -> float:
        return sum((e.amount for e in self._entries.get(check_month(month), [])), 0.0)

    def month_savings(self, month: str) -> float:
        return self._income - self.monthly_total(month)

    def display_savings(self, month: str) -> float:
        """Savings shown in the summary; never below zero."""
        return max(self.month_savings(month), 0.0)

    def yearly_total_expenses(self) -> float:
        return sum((self.monthly_total(m) for m in MONTHS), 0.0)

    def yearly_total_savings(self) -> float:
        return self._income * 12 - self.yearly_total_expenses()

    def summary_frame(self) -> pd.DataFrame:
        """Chart series as a frame indexed by month."""
        expenses = [self.monthly_total(m) for m in MONTHS]
        return pd.DataFrame(
            {
                SERIES_EXPENSES: expenses,
                SERIES_INCOME: [self._income] * len(MONTHS),
                SERIES_SAVINGS: [self._income - total for total in expenses],
            },
            index=pd.Index(MONTHS, name="Month"),
        )
