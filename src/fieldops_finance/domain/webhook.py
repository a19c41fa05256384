"""Payload sent to the external ledger when a service order's financials are closed.

Key names follow the receiving system's contract and are kept in Portuguese.
Monetary values are decimal strings.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Any

from fieldops_finance.domain.discounts import (
    CalculatedTotals,
    DiscountConfig,
    DiscountRule,
    DiscountType,
)
from fieldops_finance.domain.installments import Installment
from fieldops_finance.domain.payments import PaymentMethodEntry

# The ledger only knows "percent" and "value" (fixed amount)
LEDGER_DISCOUNT_TYPES = {DiscountType.PERCENT: "percent", DiscountType.FIXED: "value"}


def _discount_entry(rule: DiscountRule, calculated: Any) -> dict[str, Any]:
    return {
        "tipo": LEDGER_DISCOUNT_TYPES[rule.type],
        "valor": str(rule.value),
        "calculado": str(calculated),
    }


def prepare_webhook_payload(
    service_order_id: str,
    client_id: str,
    os_number: int | None,
    discounts: DiscountConfig,
    totals: CalculatedTotals,
    start_date: date,
    installments: Sequence[Installment],
    payment_methods: Sequence[PaymentMethodEntry],
    created_at: datetime | None = None,
) -> dict[str, Any]:
    created_at = created_at or datetime.now(timezone.utc)

    return {
        "os_id": service_order_id,
        "os_number": os_number,
        "client_id": client_id,
        "subtotal_pecas": str(totals.subtotal_parts),
        "subtotal_servicos": str(totals.subtotal_services),
        "descontos": {
            "pecas": _discount_entry(discounts.parts, totals.discount_parts),
            "servicos": _discount_entry(discounts.services, totals.discount_services),
            "os": _discount_entry(discounts.total, totals.discount_total),
        },
        "total_os": str(totals.grand_total),
        "pagamento": {
            "data_inicio_prazo": start_date.isoformat(),
            "parcelas": [
                {
                    "numero": inst.number,
                    "dias": inst.days,
                    "vencimento": inst.due_date.isoformat(),
                    "valor": str(inst.amount),
                    "status": inst.status.value,
                }
                for inst in installments
            ],
            "formas": [
                {"method": pm.method, "valor": str(pm.amount), "detalhes": pm.details}
                for pm in payment_methods
            ],
        },
        "created_at": created_at.isoformat(),
    }
