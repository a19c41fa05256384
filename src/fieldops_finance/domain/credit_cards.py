"""Credit card statement date arithmetic.

A card closes its statement on ``closing_day`` each month; purchases made
after that day go to the next statement. The statement is due on ``due_day``
of the month following the statement month.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class StatementPeriod:
    start: date
    end: date


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _clamped_date(year: int, month: int, day: int) -> date:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def calculate_statement_date(purchase_date: date, closing_day: int, due_day: int) -> date:
    """
    Due date of the statement that will bill a purchase.

    ``due_day`` is clamped to the length of the due month (31 -> Feb 28/29).
    """
    year, month = purchase_date.year, purchase_date.month
    if purchase_date.day > closing_day:
        year, month = _shift_month(year, month, 1)

    due_year, due_month = _shift_month(year, month, 1)
    return _clamped_date(due_year, due_month, due_day)


def get_statement_period(statement_due_date: date, closing_day: int) -> StatementPeriod:
    """
    Purchase window billed on the statement due at ``statement_due_date``.

    The window runs from the day after the previous closing up to and
    including the closing day of the month before the due month.
    """
    purchase_year, purchase_month = _shift_month(
        statement_due_date.year, statement_due_date.month, -1
    )
    start_year, start_month = _shift_month(purchase_year, purchase_month, -1)

    return StatementPeriod(
        start=_clamped_date(start_year, start_month, closing_day + 1),
        end=_clamped_date(purchase_year, purchase_month, closing_day),
    )
