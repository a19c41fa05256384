from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fieldops_finance.domain.discounts import CalculatedTotals, DiscountConfig, compute_totals
from fieldops_finance.domain.errors import ValidationError
from fieldops_finance.domain.installments import Installment, generate_installments
from fieldops_finance.domain.payments import (
    PaymentMethodEntry,
    PaymentValidation,
    validate_payment_methods,
)


class InvalidFinancialsInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class FinancialsRequest:
    subtotal_parts: Decimal
    subtotal_services: Decimal
    discounts: DiscountConfig = field(default_factory=DiscountConfig)
    start_date: date | None = None
    installment_days: tuple[int, ...] = ()
    payment_methods: tuple[PaymentMethodEntry, ...] = ()

    def validate(self) -> None:
        errors: list[dict[str, str]] = []

        if self.subtotal_parts < 0:
            errors.append(_error("subtotal_parts", "Must be >= 0"))
        if self.subtotal_services < 0:
            errors.append(_error("subtotal_services", "Must be >= 0"))

        for tier in ("parts", "services", "total"):
            if getattr(self.discounts, tier).value < 0:
                errors.append(_error(f"discounts.{tier}.value", "Must be >= 0"))

        for index, days in enumerate(self.installment_days):
            if days < 0:
                errors.append(_error(f"installment_days.{index}", "Must be >= 0"))

        if self.installment_days and self.start_date is None:
            errors.append(_error("start_date", "Required when installment_days is given"))

        for index, entry in enumerate(self.payment_methods):
            if entry.amount < 0:
                errors.append(_error(f"payment_methods.{index}.amount", "Must be >= 0"))

        if errors:
            raise InvalidFinancialsInput(errors=errors)


@dataclass(frozen=True, slots=True)
class FinancialsSummary:
    totals: CalculatedTotals
    installments: list[Installment]
    payment_validation: PaymentValidation


@dataclass(frozen=True, slots=True)
class CalculateFinancials:
    """
    Compute a service order's financial summary.

    Flow:
    1. Validate business preconditions (the calculators themselves never raise)
    2. Apply discount tiers to get the grand total
    3. Split the grand total into installments, if a payment term is set
    4. Reconcile the declared payment methods against the grand total
    """

    def execute(self, req: FinancialsRequest) -> FinancialsSummary:
        req.validate()

        totals = compute_totals(req.subtotal_parts, req.subtotal_services, req.discounts)

        installments: list[Installment] = []
        if req.start_date is not None:
            installments = generate_installments(
                req.start_date, req.installment_days, totals.grand_total
            )

        payment_validation = validate_payment_methods(req.payment_methods, totals.grand_total)

        return FinancialsSummary(
            totals=totals,
            installments=installments,
            payment_validation=payment_validation,
        )


def _error(field_name: str, message: str) -> dict[str, str]:
    return {"field": field_name, "message": message, "code": "INVALID_VALUE"}
