"""
Unit test suite for PostgresPaymentConfigRepository.

Uses a mocked SQLAlchemy session to verify:
- Rows are converted through parse_payment_config()
- New configs are added, existing rows are updated in place
- Stored documents use the build_payment_config() format
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from fieldops_finance.adapters.postgres_payment_config_repository import (
    PostgresPaymentConfigRepository,
)
from fieldops_finance.domain.payment_config import PaymentConfig
from fieldops_finance.domain.payments import PaymentMethodEntry
from fieldops_finance.infra.db.models.service_order_financials import ServiceOrderFinancialsRow

ORDER_ID = "6d3c1a2e-5b7f-4e19-9a0d-2c8e4f6b1a30"


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def config() -> PaymentConfig:
    return PaymentConfig(
        start_date="2024-01-01",
        installment_days=(30, 60),
        payment_methods=(
            PaymentMethodEntry(id="pm-1", method="pix", amount=Decimal("99.90"), details="sinal"),
        ),
    )


# ==============================================================================
# get()
# ==============================================================================


def test_get_parses_stored_document(mock_session: Mock, config: PaymentConfig) -> None:
    row = ServiceOrderFinancialsRow(
        service_order_id=uuid.UUID(ORDER_ID),
        payment_config={
            "start_date": "2024-01-01",
            "installment_days": [30, 60],
            "payment_methods": [
                {"id": "pm-1", "method": "pix", "amount": "99.90", "details": "sinal"}
            ],
        },
    )
    mock_session.execute.return_value.scalar_one_or_none.return_value = row

    result = PostgresPaymentConfigRepository(mock_session).get(ORDER_ID)

    assert result == config
    mock_session.execute.assert_called_once()


def test_get_row_with_empty_document_is_a_default_config(mock_session: Mock) -> None:
    row = ServiceOrderFinancialsRow(service_order_id=uuid.UUID(ORDER_ID), payment_config={})
    mock_session.execute.return_value.scalar_one_or_none.return_value = row

    assert PostgresPaymentConfigRepository(mock_session).get(ORDER_ID) == PaymentConfig()


def test_get_returns_none_when_row_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert PostgresPaymentConfigRepository(mock_session).get(ORDER_ID) is None


def test_get_query_filters_by_service_order_id(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    PostgresPaymentConfigRepository(mock_session).get(ORDER_ID)

    query = mock_session.execute.call_args[0][0]
    compiled = str(query.compile(compile_kwargs={"literal_binds": False}))
    assert "service_order_financials.service_order_id" in compiled


# ==============================================================================
# save()
# ==============================================================================


def test_save_adds_new_row(mock_session: Mock, config: PaymentConfig) -> None:
    mock_session.get.return_value = None

    PostgresPaymentConfigRepository(mock_session).save(ORDER_ID, config)

    mock_session.get.assert_called_once_with(ServiceOrderFinancialsRow, uuid.UUID(ORDER_ID))
    added = mock_session.add.call_args[0][0]
    assert isinstance(added, ServiceOrderFinancialsRow)
    assert added.service_order_id == uuid.UUID(ORDER_ID)
    assert added.payment_config == {
        "start_date": "2024-01-01",
        "installment_days": [30, 60],
        "payment_methods": [
            {"id": "pm-1", "method": "pix", "amount": "99.90", "details": "sinal"}
        ],
    }
    mock_session.flush.assert_called_once()


def test_save_updates_existing_row(mock_session: Mock, config: PaymentConfig) -> None:
    existing = ServiceOrderFinancialsRow(
        service_order_id=uuid.UUID(ORDER_ID),
        payment_config={"start_date": "", "installment_days": [], "payment_methods": []},
    )
    mock_session.get.return_value = existing

    PostgresPaymentConfigRepository(mock_session).save(ORDER_ID, config)

    mock_session.add.assert_not_called()
    assert existing.payment_config["installment_days"] == [30, 60]
    mock_session.flush.assert_called_once()


def test_save_keeps_empty_start_date(mock_session: Mock) -> None:
    mock_session.get.return_value = None

    PostgresPaymentConfigRepository(mock_session).save(ORDER_ID, PaymentConfig())

    added = mock_session.add.call_args[0][0]
    assert added.payment_config == {"start_date": "", "installment_days": [], "payment_methods": []}
