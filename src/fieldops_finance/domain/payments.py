from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

# Cent-level tolerance for reconciling two-decimal currency amounts
PAYMENT_TOLERANCE = Decimal("0.01")


class PaymentMethodType(str, Enum):
    """Payment methods offered on a service order."""

    CASH = "dinheiro"
    PIX = "pix"
    CREDIT_CARD = "cartao_credito"
    DEBIT_CARD = "cartao_debito"
    BANK_SLIP = "boleto"
    BANK_TRANSFER = "transferencia"
    OTHER = "outros"


@dataclass(frozen=True, slots=True)
class PaymentMethodEntry:
    id: str
    method: str
    amount: Decimal
    details: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentValidation:
    valid: bool
    diff: Decimal


def validate_payment_methods(
    methods: Sequence[PaymentMethodEntry],
    total: Decimal,
) -> PaymentValidation:
    """
    Check that the declared payment amounts add up to ``total``.

    ``diff`` is what is still missing (positive) or overpaid (negative).
    """
    paid = sum((entry.amount for entry in methods), Decimal("0"))
    diff = total - paid
    return PaymentValidation(valid=abs(diff) < PAYMENT_TOLERANCE, diff=diff)
