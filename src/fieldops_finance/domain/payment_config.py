"""Codec for the ``payment_config`` document stored on each service order.

Stored shape::

    {
        "start_date": "2024-01-01",
        "installment_days": [30, 30, 30],
        "payment_methods": [
            {"id": "...", "method": "pix", "amount": "150.00", "details": null}
        ]
    }

Parsing is lenient and never raises: only type coercion and defaults, no
business validation. Values that can't be coerced are dropped (day offsets,
non-object payment entries) or zeroed (amounts).
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from fieldops_finance.domain.payments import PaymentMethodEntry


@dataclass(frozen=True, slots=True)
class PaymentConfig:
    start_date: str = ""
    installment_days: tuple[int, ...] = field(default_factory=tuple)
    payment_methods: tuple[PaymentMethodEntry, ...] = field(default_factory=tuple)


def parse_payment_config(raw: Any) -> PaymentConfig | None:
    """Build a PaymentConfig from a stored JSON document, or None if it isn't an object."""
    if not isinstance(raw, Mapping):
        return None

    start_date = raw.get("start_date")
    days = raw.get("installment_days")
    methods = raw.get("payment_methods")

    return PaymentConfig(
        start_date=start_date if isinstance(start_date, str) else "",
        installment_days=(
            tuple(d for d in map(_to_int, days) if d is not None)
            if isinstance(days, list)
            else ()
        ),
        payment_methods=(
            tuple(_parse_payment_method(pm) for pm in methods if isinstance(pm, Mapping))
            if isinstance(methods, list)
            else ()
        ),
    )


def build_payment_config(
    start_date: date | None,
    installment_days: Sequence[int],
    payment_methods: Sequence[PaymentMethodEntry],
) -> dict[str, Any]:
    """Serialize payment settings into the JSON-safe stored document.

    A start date that hasn't been chosen yet is stored as an empty string.
    """
    return {
        "start_date": start_date.isoformat() if start_date else "",
        "installment_days": list(installment_days),
        "payment_methods": [
            {
                "id": pm.id,
                "method": pm.method,
                "amount": str(pm.amount),
                "details": pm.details,
            }
            for pm in payment_methods
        ],
    }


def _parse_payment_method(raw: Mapping[str, Any]) -> PaymentMethodEntry:
    return PaymentMethodEntry(
        id=raw.get("id") or str(uuid.uuid4()),
        method=raw.get("method") or "",
        amount=_to_decimal(raw.get("amount")),
        details=raw.get("details"),
    )


def _to_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _to_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        # str() first so JSON floats keep their printed value instead of binary noise
        amount = Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
    return amount if amount.is_finite() else Decimal("0")
