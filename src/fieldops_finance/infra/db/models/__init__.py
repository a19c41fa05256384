from fieldops_finance.infra.db.models.base import Base
from fieldops_finance.infra.db.models.service_order_financials import ServiceOrderFinancialsRow

__all__ = ["Base", "ServiceOrderFinancialsRow"]
