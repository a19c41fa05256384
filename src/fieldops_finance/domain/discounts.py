from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

HUNDRED = Decimal("100")


class DiscountType(str, Enum):
    PERCENT = "percent"
    FIXED = "fixed"

    @classmethod
    def _missing_(cls, value: object) -> DiscountType | None:
        # Stored configs written before the rename use "value" for fixed amounts
        if value == "value":
            return cls.FIXED
        return None


@dataclass(frozen=True, slots=True)
class DiscountRule:
    type: DiscountType = DiscountType.PERCENT
    value: Decimal = Decimal("0")

    def apply_to(self, amount: Decimal) -> Decimal:
        """
        Discount this rule grants against ``amount``.

        Percent rules scale the amount and are never clamped. Fixed rules
        are capped at ``amount`` so a fixed discount can't push it below zero.
        """
        if self.type is DiscountType.PERCENT:
            return amount * (self.value / HUNDRED)
        return min(self.value, amount)


@dataclass(frozen=True, slots=True)
class DiscountConfig:
    parts: DiscountRule = field(default_factory=DiscountRule)
    services: DiscountRule = field(default_factory=DiscountRule)
    total: DiscountRule = field(default_factory=DiscountRule)


@dataclass(frozen=True, slots=True)
class CalculatedTotals:
    subtotal_parts: Decimal
    subtotal_services: Decimal
    discount_parts: Decimal
    discount_services: Decimal
    discount_total: Decimal
    total_parts: Decimal
    total_services: Decimal
    grand_total: Decimal

    @property
    def subtotal_after_categories(self) -> Decimal:
        return self.total_parts + self.total_services


def compute_totals(
    subtotal_parts: Decimal,
    subtotal_services: Decimal,
    discounts: DiscountConfig,
) -> CalculatedTotals:
    """
    Apply the three discount tiers to a service order.

    Order of application:
    1. Parts discount against the parts subtotal
    2. Services discount against the services subtotal
    3. Whole-order discount against the sum of the two discounted categories

    Preconditions (not enforced here): subtotals are non-negative and every
    rule value is non-negative. A percent rule above 100 is applied as-is,
    which can drive a category total below zero.
    """
    discount_parts = discounts.parts.apply_to(subtotal_parts)
    total_parts = subtotal_parts - discount_parts

    discount_services = discounts.services.apply_to(subtotal_services)
    total_services = subtotal_services - discount_services

    subtotal_after_categories = total_parts + total_services
    discount_total = discounts.total.apply_to(subtotal_after_categories)
    grand_total = subtotal_after_categories - discount_total

    return CalculatedTotals(
        subtotal_parts=subtotal_parts,
        subtotal_services=subtotal_services,
        discount_parts=discount_parts,
        discount_services=discount_services,
        discount_total=discount_total,
        total_parts=total_parts,
        total_services=total_services,
        grand_total=grand_total,
    )
