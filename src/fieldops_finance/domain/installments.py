"""Installment schedule generation for service order payments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum


class InstallmentStatus(str, Enum):
    OPEN = "OPEN"
    PAID = "PAID"
    CANCELED = "CANCELED"


@dataclass(frozen=True, slots=True)
class Installment:
    number: int
    days: int
    due_date: date
    amount: Decimal
    status: InstallmentStatus = InstallmentStatus.OPEN
    is_edited: bool = False


def generate_installments(
    start_date: date,
    installment_days: Sequence[int],
    total: Decimal,
) -> list[Installment]:
    """
    Split ``total`` into equal installments with cumulative due dates.

    Each offset in ``installment_days`` counts from the previous installment's
    due date (the first one counts from ``start_date``), so ``[30, 30, 30]``
    starting 2024-01-01 yields 2024-01-31, 2024-03-01 and 2024-03-31.

    Args:
        start_date: Date the payment term starts counting from
        installment_days: Day offsets, one per installment
        total: Amount to split

    Returns:
        Installments numbered from 1, all OPEN and unedited. Empty when there
        are no offsets or ``total`` is not positive.

    Note:
        Every installment gets ``total / n`` at full Decimal precision. The
        last one does not absorb the division remainder.
    """
    if not installment_days or total <= 0:
        return []

    value_per_installment = total / len(installment_days)

    installments = []
    current_date = start_date
    for index, days in enumerate(installment_days):
        current_date = current_date + timedelta(days=days)
        installments.append(
            Installment(
                number=index + 1,
                days=days,
                due_date=current_date,
                amount=value_per_installment,
            )
        )

    return installments
