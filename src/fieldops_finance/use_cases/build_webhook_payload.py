"""Build financial webhook payload use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from fieldops_finance.domain.errors import ValidationError
from fieldops_finance.domain.webhook import prepare_webhook_payload
from fieldops_finance.use_cases.calculate_financials import (
    CalculateFinancials,
    FinancialsRequest,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WebhookPayloadRequest:
    service_order_id: str
    client_id: str
    financials: FinancialsRequest
    os_number: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class BuildFinancialWebhookPayload:
    """
    Shape the document the external ledger receives for a service order.

    Delivery is the caller's job; this only computes the financials and lays
    them out in the receiver's format. A payment term (start date) is
    mandatory because the payload always carries one.
    """

    calculate_financials: CalculateFinancials = field(default_factory=CalculateFinancials)

    def execute(self, req: WebhookPayloadRequest) -> dict[str, Any]:
        if req.financials.start_date is None:
            raise ValidationError(
                errors=[
                    {
                        "field": "start_date",
                        "message": "Required to build the webhook payload",
                        "code": "MISSING_VALUE",
                    }
                ]
            )

        summary = self.calculate_financials.execute(req.financials)

        if not summary.payment_validation.valid:
            logger.info(
                "Webhook payload built with unreconciled payment methods",
                extra={
                    "service_order_id": req.service_order_id,
                    "diff": str(summary.payment_validation.diff),
                },
            )

        return prepare_webhook_payload(
            service_order_id=req.service_order_id,
            client_id=req.client_id,
            os_number=req.os_number,
            discounts=req.financials.discounts,
            totals=summary.totals,
            start_date=req.financials.start_date,
            installments=summary.installments,
            payment_methods=req.financials.payment_methods,
            created_at=req.created_at,
        )
