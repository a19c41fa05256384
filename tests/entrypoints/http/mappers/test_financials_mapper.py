"""
Test suite for FinancialsMapper and PaymentConfigMapper.

The mappers only translate: str → Decimal on the way in (collecting field
errors), Decimal → str on the way out. No business rules live here.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fieldops_finance.domain.discounts import (
    CalculatedTotals,
    DiscountConfig,
    DiscountRule,
    DiscountType,
)
from fieldops_finance.domain.errors import ValidationError
from fieldops_finance.domain.installments import Installment
from fieldops_finance.domain.payment_config import PaymentConfig
from fieldops_finance.domain.payments import PaymentMethodEntry, PaymentValidation
from fieldops_finance.entrypoints.http.dtos.financials import (
    DiscountConfigDTO,
    DiscountRuleDTO,
    FinancialsRequestDTO,
    PaymentMethodDTO,
    WebhookPayloadRequestDTO,
)
from fieldops_finance.entrypoints.http.dtos.payment_config import PaymentConfigDTO
from fieldops_finance.entrypoints.http.mappers.financials_mapper import (
    FinancialsMapper,
    parse_decimal,
)
from fieldops_finance.entrypoints.http.mappers.payment_config_mapper import PaymentConfigMapper
from fieldops_finance.use_cases.calculate_financials import FinancialsSummary


# ==============================================================================
# parse_decimal()
# ==============================================================================


def test_parse_decimal_keeps_precision() -> None:
    errors: list[dict[str, str]] = []

    assert parse_decimal("10.50", "amount", errors) == Decimal("10.50")
    assert str(parse_decimal("10.50", "amount", errors)) == "10.50"
    assert errors == []


def test_parse_decimal_collects_error() -> None:
    errors: list[dict[str, str]] = []

    result = parse_decimal("ten", "amount", errors)

    assert result == Decimal("0")
    assert errors == [
        {"field": "amount", "message": "Must be a valid decimal: ten", "code": "INVALID_DECIMAL"}
    ]


# ==============================================================================
# FinancialsMapper.to_domain_request()
# ==============================================================================


def test_to_domain_request_converts_all_fields() -> None:
    dto = FinancialsRequestDTO(
        subtotal_parts="100.00",
        subtotal_services="50",
        discounts=DiscountConfigDTO(
            parts=DiscountRuleDTO(type="percent", value="12.5"),
            total=DiscountRuleDTO(type="value", value="5"),
        ),
        start_date=date(2024, 1, 1),
        installment_days=[10, 20],
        payment_methods=[PaymentMethodDTO(id="pm-1", method="pix", amount="145.00")],
    )

    result = FinancialsMapper.to_domain_request(dto)

    assert result.subtotal_parts == Decimal("100.00")
    assert result.subtotal_services == Decimal("50")
    assert result.discounts == DiscountConfig(
        parts=DiscountRule(DiscountType.PERCENT, Decimal("12.5")),
        services=DiscountRule(),
        total=DiscountRule(DiscountType.FIXED, Decimal("5")),
    )
    assert result.start_date == date(2024, 1, 1)
    assert result.installment_days == (10, 20)
    assert result.payment_methods == (
        PaymentMethodEntry(id="pm-1", method="pix", amount=Decimal("145.00")),
    )


def test_to_domain_request_generates_missing_payment_ids() -> None:
    dto = FinancialsRequestDTO(
        subtotal_parts="0",
        subtotal_services="0",
        payment_methods=[
            PaymentMethodDTO(method="pix", amount="1"),
            PaymentMethodDTO(method="pix", amount="1"),
        ],
    )

    first, second = FinancialsMapper.to_domain_request(dto).payment_methods

    assert first.id and second.id
    assert first.id != second.id


def test_to_domain_request_reports_every_invalid_decimal() -> None:
    # model_construct skips the DTO pattern so the mapper's own check is exercised
    dto = FinancialsRequestDTO.model_construct(
        subtotal_parts="1e",
        subtotal_services="x",
        discounts=DiscountConfigDTO(),
        start_date=None,
        installment_days=[],
        payment_methods=[],
    )

    with pytest.raises(ValidationError) as exc_info:
        FinancialsMapper.to_domain_request(dto, prefix="financials.")

    assert [e["field"] for e in exc_info.value.errors] == [
        "financials.subtotal_parts",
        "financials.subtotal_services",
    ]


def test_to_webhook_request() -> None:
    dto = WebhookPayloadRequestDTO(
        client_id="client-1",
        os_number=7,
        financials=FinancialsRequestDTO(subtotal_parts="1", subtotal_services="2"),
    )

    result = FinancialsMapper.to_webhook_request("order-1", dto)

    assert result.service_order_id == "order-1"
    assert result.client_id == "client-1"
    assert result.os_number == 7
    assert result.financials.subtotal_services == Decimal("2")
    assert result.created_at is None


# ==============================================================================
# FinancialsMapper.to_response()
# ==============================================================================


def test_to_response_converts_decimals_to_strings() -> None:
    summary = FinancialsSummary(
        totals=CalculatedTotals(
            subtotal_parts=Decimal("100.00"),
            subtotal_services=Decimal("50.00"),
            discount_parts=Decimal("10.000"),
            discount_services=Decimal("0"),
            discount_total=Decimal("0"),
            total_parts=Decimal("90.000"),
            total_services=Decimal("50.00"),
            grand_total=Decimal("140.000"),
        ),
        installments=[
            Installment(number=1, days=30, due_date=date(2024, 1, 31), amount=Decimal("140.000"))
        ],
        payment_validation=PaymentValidation(valid=False, diff=Decimal("140.000")),
    )

    result = FinancialsMapper.to_response(summary)

    assert result.totals.discount_parts == "10.000"
    assert result.totals.subtotal_after_categories == "140.000"
    assert result.totals.grand_total == "140.000"
    assert result.installments[0].amount == "140.000"
    assert result.installments[0].status == "OPEN"
    assert result.installments[0].due_date == date(2024, 1, 31)
    assert result.payment_validation.valid is False
    assert result.payment_validation.diff == "140.000"


# ==============================================================================
# PaymentConfigMapper
# ==============================================================================


def test_payment_config_to_save_request() -> None:
    dto = PaymentConfigDTO(
        start_date="2024-01-01",
        installment_days=[30],
        payment_methods=[PaymentMethodDTO(id="pm-1", method="boleto", amount="99.90", details="1x")],
    )

    request = PaymentConfigMapper.to_save_request("order-1", dto)

    assert request.service_order_id == "order-1"
    assert request.config == PaymentConfig(
        start_date="2024-01-01",
        installment_days=(30,),
        payment_methods=(
            PaymentMethodEntry(id="pm-1", method="boleto", amount=Decimal("99.90"), details="1x"),
        ),
    )


def test_payment_config_to_response() -> None:
    config = PaymentConfig(
        start_date="",
        installment_days=(0, 15),
        payment_methods=(PaymentMethodEntry(id="pm-1", method="pix", amount=Decimal("12.345")),),
    )

    result = PaymentConfigMapper.to_response(config)

    assert result.start_date == ""
    assert result.installment_days == [0, 15]
    assert result.payment_methods[0].amount == "12.345"
    assert result.payment_methods[0].details is None
