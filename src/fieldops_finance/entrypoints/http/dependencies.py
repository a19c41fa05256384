"""
Dependency injection for FastAPI routes.

Database sessions are per-request. Calculation use cases hold no state and
are built per request as well, which keeps them trivially overridable in
tests via ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from fieldops_finance.adapters.postgres_payment_config_repository import (
    PostgresPaymentConfigRepository,
)
from fieldops_finance.infra.db.session import get_session
from fieldops_finance.use_cases.build_webhook_payload import BuildFinancialWebhookPayload
from fieldops_finance.use_cases.calculate_financials import CalculateFinancials
from fieldops_finance.use_cases.payment_config import GetPaymentConfig, SavePaymentConfig
from fieldops_finance.use_cases.resolve_credit_card_statement import ResolveCreditCardStatement


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_calculate_financials_use_case() -> CalculateFinancials:
    return CalculateFinancials()


def get_build_webhook_payload_use_case() -> BuildFinancialWebhookPayload:
    return BuildFinancialWebhookPayload()


def get_resolve_statement_use_case() -> ResolveCreditCardStatement:
    return ResolveCreditCardStatement()


def get_payment_config_use_case(db: Session = Depends(get_db)) -> GetPaymentConfig:
    """
    Factory returning a GetPaymentConfig wired to a fresh repository.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
    """
    return GetPaymentConfig(payment_config_repository=PostgresPaymentConfigRepository(session=db))


def save_payment_config_use_case(db: Session = Depends(get_db)) -> SavePaymentConfig:
    """Factory returning a SavePaymentConfig wired to a fresh repository."""
    return SavePaymentConfig(payment_config_repository=PostgresPaymentConfigRepository(session=db))
