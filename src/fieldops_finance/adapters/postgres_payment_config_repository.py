"""PostgreSQL implementation of PaymentConfigRepository."""

from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from fieldops_finance.domain.payment_config import (
    PaymentConfig,
    build_payment_config,
    parse_payment_config,
)
from fieldops_finance.infra.db.models.service_order_financials import ServiceOrderFinancialsRow
from fieldops_finance.ports.payment_config_repository import PaymentConfigRepository


class PostgresPaymentConfigRepository(PaymentConfigRepository):
    """
    PostgreSQL implementation of PaymentConfigRepository.

    - One row per service order in ``service_order_financials``
    - The config lives in a JSONB column in the stored document format
    - Commit/rollback is owned by the session provider, not the repository
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, service_order_id: str) -> PaymentConfig | None:
        query = select(ServiceOrderFinancialsRow).where(
            ServiceOrderFinancialsRow.service_order_id == UUID(service_order_id)
        )
        row = self._session.execute(query).scalar_one_or_none()
        return parse_payment_config(row.payment_config) if row else None

    def save(self, service_order_id: str, config: PaymentConfig) -> None:
        document = self._to_document(config)

        row = self._session.get(ServiceOrderFinancialsRow, UUID(service_order_id))
        if row is None:
            row = ServiceOrderFinancialsRow(
                service_order_id=UUID(service_order_id),
                payment_config=document,
            )
            self._session.add(row)
        else:
            row.payment_config = document

        self._session.flush()

    def _to_document(self, config: PaymentConfig) -> dict[str, Any]:
        start_date = date.fromisoformat(config.start_date) if config.start_date else None
        return build_payment_config(start_date, config.installment_days, config.payment_methods)
