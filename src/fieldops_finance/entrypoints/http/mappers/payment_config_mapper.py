from __future__ import annotations

from fieldops_finance.domain.errors import ValidationError
from fieldops_finance.domain.payment_config import PaymentConfig
from fieldops_finance.entrypoints.http.dtos.payment_config import (
    PaymentConfigDTO,
    PaymentConfigResponseDTO,
    StoredPaymentMethodDTO,
)
from fieldops_finance.entrypoints.http.mappers.financials_mapper import to_payment_methods
from fieldops_finance.use_cases.payment_config import SavePaymentConfigRequest


class PaymentConfigMapper:
    """Maps between REST DTOs and the stored PaymentConfig."""

    @staticmethod
    def to_save_request(service_order_id: str, dto: PaymentConfigDTO) -> SavePaymentConfigRequest:
        """
        Raises:
            ValidationError: If a payment amount is not a valid Decimal
        """
        errors: list[dict[str, str]] = []
        payment_methods = to_payment_methods(dto.payment_methods, errors)

        if errors:
            raise ValidationError(errors=errors)

        return SavePaymentConfigRequest(
            service_order_id=service_order_id,
            config=PaymentConfig(
                start_date=dto.start_date,
                installment_days=tuple(dto.installment_days),
                payment_methods=payment_methods,
            ),
        )

    @staticmethod
    def to_response(config: PaymentConfig) -> PaymentConfigResponseDTO:
        return PaymentConfigResponseDTO(
            start_date=config.start_date,
            installment_days=list(config.installment_days),
            payment_methods=[
                StoredPaymentMethodDTO(
                    id=pm.id,
                    method=pm.method,
                    amount=str(pm.amount),
                    details=pm.details,
                )
                for pm in config.payment_methods
            ],
        )
