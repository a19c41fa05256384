from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fieldops_finance.domain.credit_cards import (
    StatementPeriod,
    calculate_statement_date,
    get_statement_period,
)
from fieldops_finance.domain.errors import ValidationError


class InvalidStatementInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class StatementRequest:
    purchase_date: date
    closing_day: int
    due_day: int

    def validate(self) -> None:
        errors = []
        for name in ("closing_day", "due_day"):
            value = getattr(self, name)
            if not 1 <= value <= 31:
                errors.append(
                    {"field": name, "message": "Must be between 1 and 31", "code": "INVALID_VALUE"}
                )
        if errors:
            raise InvalidStatementInput(errors=errors)


@dataclass(frozen=True, slots=True)
class StatementResult:
    due_date: date
    period: StatementPeriod


@dataclass(frozen=True, slots=True)
class ResolveCreditCardStatement:
    """Find which statement bills a purchase and the purchase window it covers."""

    def execute(self, req: StatementRequest) -> StatementResult:
        req.validate()

        due_date = calculate_statement_date(req.purchase_date, req.closing_day, req.due_day)
        return StatementResult(
            due_date=due_date,
            period=get_statement_period(due_date, req.closing_day),
        )
