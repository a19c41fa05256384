from __future__ import annotations

from fieldops_finance.domain.payment_config import PaymentConfig
from fieldops_finance.ports.payment_config_repository import PaymentConfigRepository


class InMemoryPaymentConfigRepository(PaymentConfigRepository):
    """
    Canonical contract implementation for tests.

    - Keyed by service order id
    - save() replaces any previous config (upsert)
    """

    def __init__(self, configs: dict[str, PaymentConfig] | None = None) -> None:
        self._configs = dict(configs or {})

    def get(self, service_order_id: str) -> PaymentConfig | None:
        return self._configs.get(service_order_id)

    def save(self, service_order_id: str, config: PaymentConfig) -> None:
        self._configs[service_order_id] = config
