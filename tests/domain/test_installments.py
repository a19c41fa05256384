from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from fieldops_finance.domain.installments import (
    Installment,
    InstallmentStatus,
    generate_installments,
)


# ============================================================================
# DEGENERATE INPUT
# ============================================================================


def test_empty_days_returns_empty_schedule():
    assert generate_installments(date(2024, 1, 1), [], Decimal("300")) == []


def test_zero_total_returns_empty_schedule():
    assert generate_installments(date(2024, 1, 1), [30, 30], Decimal("0")) == []


def test_negative_total_returns_empty_schedule():
    assert generate_installments(date(2024, 1, 1), [30], Decimal("-10")) == []


# ============================================================================
# SCHEDULE
# ============================================================================


def test_three_monthly_installments_scenario():
    """30-day offsets are cumulative: Jan 31, then 30 days later, then 30 more."""
    installments = generate_installments(date(2024, 1, 1), [30, 30, 30], Decimal("300"))

    assert [i.due_date for i in installments] == [
        date(2024, 1, 31),
        date(2024, 3, 1),
        date(2024, 3, 31),
    ]
    assert [i.amount for i in installments] == [Decimal("100")] * 3
    assert [i.number for i in installments] == [1, 2, 3]
    assert [i.days for i in installments] == [30, 30, 30]


def test_installments_start_open_and_unedited():
    installments = generate_installments(date(2024, 1, 1), [0, 15], Decimal("50"))

    for installment in installments:
        assert installment.status is InstallmentStatus.OPEN
        assert installment.is_edited is False


def test_installment_carries_only_schedule_fields():
    installment = generate_installments(date(2024, 1, 1), [30], Decimal("10"))[0]

    assert not hasattr(installment, "payment_method")


def test_zero_offset_is_due_on_start_date():
    """An entry installment (0 days) is due on the start date itself."""
    installments = generate_installments(date(2024, 5, 10), [0, 30], Decimal("200"))

    assert installments[0].due_date == date(2024, 5, 10)
    assert installments[1].due_date == date(2024, 6, 9)


def test_due_dates_follow_cumulative_offsets():
    start = date(2023, 12, 20)
    days = [10, 45, 1, 0, 365]

    installments = generate_installments(start, days, Decimal("1000"))

    assert len(installments) == len(days)
    assert installments[0].due_date == start + timedelta(days=days[0])
    for previous, current, offset in zip(installments, installments[1:], days[1:]):
        assert current.due_date == previous.due_date + timedelta(days=offset)


def test_uneven_split_is_not_corrected():
    """100 / 3 leaves a remainder; every installment gets the same value."""
    installments = generate_installments(date(2024, 1, 1), [30, 30, 30], Decimal("100"))

    amounts = {i.amount for i in installments}
    assert amounts == {Decimal("100") / 3}
    assert abs(sum(i.amount for i in installments) - Decimal("100")) < Decimal("0.0001")


def test_negative_offsets_are_not_rejected():
    """Sign of offsets is the caller's concern; dates simply move backwards."""
    installments = generate_installments(date(2024, 1, 31), [-10], Decimal("10"))

    assert installments == [
        Installment(number=1, days=-10, due_date=date(2024, 1, 21), amount=Decimal("10"))
    ]
