from __future__ import annotations

from abc import ABC, abstractmethod

from fieldops_finance.domain.payment_config import PaymentConfig


class PaymentConfigRepository(ABC):
    """
    Port for the payment settings stored on each service order.

    Contract (Preconditions):
        - service_order_id is a valid UUID string, checked by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def get(self, service_order_id: str) -> PaymentConfig | None:
        """
        Load the payment config of a service order.

        Returns:
            The stored PaymentConfig, or None if the order has none
        """
        ...

    @abstractmethod
    def save(self, service_order_id: str, config: PaymentConfig) -> None:
        """Create or replace the payment config of a service order."""
        ...
