from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation

from fieldops_finance.domain.discounts import DiscountConfig, DiscountRule, DiscountType
from fieldops_finance.domain.errors import ValidationError
from fieldops_finance.domain.payments import PaymentMethodEntry
from fieldops_finance.entrypoints.http.dtos.financials import (
    DiscountConfigDTO,
    FinancialsRequestDTO,
    FinancialsResponseDTO,
    InstallmentDTO,
    PaymentMethodDTO,
    PaymentValidationDTO,
    TotalsDTO,
    WebhookPayloadRequestDTO,
)
from fieldops_finance.use_cases.build_webhook_payload import WebhookPayloadRequest
from fieldops_finance.use_cases.calculate_financials import (
    FinancialsRequest,
    FinancialsSummary,
)


def parse_decimal(value: str, field: str, errors: list[dict[str, str]]) -> Decimal:
    """
    Convert a decimal string, collecting a field error instead of raising.

    Returns Decimal("0") as a placeholder on failure so the caller can keep
    validating the remaining fields.
    """
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {value}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")


def to_payment_methods(
    dtos: list[PaymentMethodDTO], errors: list[dict[str, str]], prefix: str = "payment_methods"
) -> tuple[PaymentMethodEntry, ...]:
    return tuple(
        PaymentMethodEntry(
            id=dto.id or str(uuid.uuid4()),
            method=dto.method,
            amount=parse_decimal(dto.amount, f"{prefix}.{index}.amount", errors),
            details=dto.details,
        )
        for index, dto in enumerate(dtos)
    )


class FinancialsMapper:
    """Maps between REST DTOs and domain models for service order financials."""

    @staticmethod
    def to_domain_request(dto: FinancialsRequestDTO, prefix: str = "") -> FinancialsRequest:
        """
        Converts request DTO to domain FinancialsRequest.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If any monetary string is not a valid Decimal
        """
        errors: list[dict[str, str]] = []

        subtotal_parts = parse_decimal(dto.subtotal_parts, f"{prefix}subtotal_parts", errors)
        subtotal_services = parse_decimal(
            dto.subtotal_services, f"{prefix}subtotal_services", errors
        )
        discounts = FinancialsMapper._to_discounts(dto.discounts, errors, prefix)
        payment_methods = to_payment_methods(
            dto.payment_methods, errors, prefix=f"{prefix}payment_methods"
        )

        if errors:
            raise ValidationError(errors=errors)

        return FinancialsRequest(
            subtotal_parts=subtotal_parts,
            subtotal_services=subtotal_services,
            discounts=discounts,
            start_date=dto.start_date,
            installment_days=tuple(dto.installment_days),
            payment_methods=payment_methods,
        )

    @staticmethod
    def to_webhook_request(
        service_order_id: str, dto: WebhookPayloadRequestDTO
    ) -> WebhookPayloadRequest:
        return WebhookPayloadRequest(
            service_order_id=service_order_id,
            client_id=dto.client_id,
            os_number=dto.os_number,
            financials=FinancialsMapper.to_domain_request(dto.financials, prefix="financials."),
        )

    @staticmethod
    def to_response(summary: FinancialsSummary) -> FinancialsResponseDTO:
        """
        Converts domain FinancialsSummary to response DTO.

        Handles Decimal → string conversion at the boundary.
        """
        totals = summary.totals
        return FinancialsResponseDTO(
            totals=TotalsDTO(
                subtotal_parts=str(totals.subtotal_parts),
                subtotal_services=str(totals.subtotal_services),
                discount_parts=str(totals.discount_parts),
                discount_services=str(totals.discount_services),
                discount_total=str(totals.discount_total),
                total_parts=str(totals.total_parts),
                total_services=str(totals.total_services),
                subtotal_after_categories=str(totals.subtotal_after_categories),
                grand_total=str(totals.grand_total),
            ),
            installments=[
                InstallmentDTO(
                    number=inst.number,
                    days=inst.days,
                    due_date=inst.due_date,
                    amount=str(inst.amount),
                    status=inst.status.value,
                    is_edited=inst.is_edited,
                )
                for inst in summary.installments
            ],
            payment_validation=PaymentValidationDTO(
                valid=summary.payment_validation.valid,
                diff=str(summary.payment_validation.diff),
            ),
        )

    @staticmethod
    def _to_discounts(
        dto: DiscountConfigDTO, errors: list[dict[str, str]], prefix: str
    ) -> DiscountConfig:
        rules = {}
        for tier in ("parts", "services", "total"):
            rule = getattr(dto, tier)
            rules[tier] = DiscountRule(
                type=DiscountType(rule.type),
                value=parse_decimal(rule.value, f"{prefix}discounts.{tier}.value", errors),
            )
        return DiscountConfig(**rules)
