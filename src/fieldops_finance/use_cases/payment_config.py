"""Read and write the stored payment config of a service order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID

from fieldops_finance.domain.errors import NotFoundError, ValidationError
from fieldops_finance.domain.payment_config import PaymentConfig
from fieldops_finance.ports.payment_config_repository import PaymentConfigRepository

logger = logging.getLogger(__name__)


def _validate_service_order_id(service_order_id: str) -> None:
    try:
        UUID(service_order_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "service_order_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


class GetPaymentConfig:
    """
    Use case for loading a service order's payment config.

    Raises:
        ValidationError: If service_order_id is not a valid UUID
        NotFoundError: If the order has no stored config
    """

    def __init__(self, payment_config_repository: PaymentConfigRepository) -> None:
        self._repository = payment_config_repository

    def execute(self, service_order_id: str) -> PaymentConfig:
        _validate_service_order_id(service_order_id)

        config = self._repository.get(service_order_id)
        if config is None:
            raise NotFoundError(resource="PaymentConfig", identifier=service_order_id)

        return config


@dataclass(frozen=True, slots=True)
class SavePaymentConfigRequest:
    service_order_id: str
    config: PaymentConfig


class SavePaymentConfig:
    """
    Use case for storing a service order's payment config.

    Unlike parse_payment_config(), which accepts whatever is in the database,
    writes are checked: start_date must be empty or an ISO date, and day
    offsets can't be negative.
    """

    def __init__(self, payment_config_repository: PaymentConfigRepository) -> None:
        self._repository = payment_config_repository

    def execute(self, request: SavePaymentConfigRequest) -> PaymentConfig:
        _validate_service_order_id(request.service_order_id)
        self._validate_config(request.config)

        config = _normalized(request.config)
        self._repository.save(request.service_order_id, config)
        logger.info(
            "Payment config saved",
            extra={
                "service_order_id": request.service_order_id,
                "installments": len(config.installment_days),
                "payment_methods": len(config.payment_methods),
            },
        )
        return config

    def _validate_config(self, config: PaymentConfig) -> None:
        errors = []

        if config.start_date:
            try:
                date.fromisoformat(config.start_date)
            except ValueError:
                errors.append(
                    {
                        "field": "start_date",
                        "message": "Must be an ISO date (YYYY-MM-DD)",
                        "code": "INVALID_DATE",
                    }
                )

        for index, days in enumerate(config.installment_days):
            if days < 0:
                errors.append(
                    {
                        "field": f"installment_days.{index}",
                        "message": "Must be >= 0",
                        "code": "INVALID_VALUE",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)


def _normalized(config: PaymentConfig) -> PaymentConfig:
    """Rewrite start_date in canonical YYYY-MM-DD form (e.g. "20240101" -> "2024-01-01")."""
    if not config.start_date:
        return config
    return replace(config, start_date=date.fromisoformat(config.start_date).isoformat())
