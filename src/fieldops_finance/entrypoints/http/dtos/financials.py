from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
DISCOUNT_VALUE_PATTERN = r"^\d+(\.\d+)?$"


class DiscountRuleDTO(BaseModel):
    """One discount tier. ``value`` is a percentage or an amount depending on ``type``."""

    type: Literal["percent", "fixed", "value"] = Field(
        default="percent",
        description="'percent' or 'fixed' ('value' is accepted as a legacy alias of 'fixed')",
    )
    value: str = Field(
        default="0",
        description="Non-negative decimal string",
        examples=["10", "50.00"],
        pattern=DISCOUNT_VALUE_PATTERN,
    )


class DiscountConfigDTO(BaseModel):
    parts: DiscountRuleDTO = Field(default_factory=DiscountRuleDTO)
    services: DiscountRuleDTO = Field(default_factory=DiscountRuleDTO)
    total: DiscountRuleDTO = Field(default_factory=DiscountRuleDTO)


class PaymentMethodDTO(BaseModel):
    id: str | None = Field(default=None, description="Generated when omitted")
    method: str = Field(description="Payment method, e.g. 'pix', 'boleto'", examples=["pix"])
    amount: str = Field(
        description="Amount as decimal string",
        examples=["150.00"],
        pattern=MONEY_PATTERN,
    )
    details: str | None = None


class FinancialsRequestDTO(BaseModel):
    """Request payload for calculating a service order's financials."""

    subtotal_parts: str = Field(
        description="Parts subtotal as decimal string",
        examples=["1000.00"],
        pattern=MONEY_PATTERN,
    )
    subtotal_services: str = Field(
        description="Services subtotal as decimal string",
        examples=["500.00"],
        pattern=MONEY_PATTERN,
    )
    discounts: DiscountConfigDTO = Field(default_factory=DiscountConfigDTO)
    start_date: date | None = Field(
        default=None,
        description="Date the payment term starts counting from",
        examples=["2024-01-01"],
    )
    installment_days: list[int] = Field(
        default_factory=list,
        description="Cumulative day offsets, one per installment",
        examples=[[30, 30, 30]],
    )
    payment_methods: list[PaymentMethodDTO] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subtotal_parts": "1000.00",
                "subtotal_services": "500.00",
                "discounts": {
                    "parts": {"type": "percent", "value": "10"},
                    "services": {"type": "fixed", "value": "50.00"},
                    "total": {"type": "percent", "value": "5"},
                },
                "start_date": "2024-01-01",
                "installment_days": [30, 30, 30],
                "payment_methods": [{"method": "boleto", "amount": "1282.50"}],
            }
        }
    )


class TotalsDTO(BaseModel):
    subtotal_parts: str
    subtotal_services: str
    discount_parts: str
    discount_services: str
    discount_total: str
    total_parts: str
    total_services: str
    subtotal_after_categories: str
    grand_total: str


class InstallmentDTO(BaseModel):
    number: int
    days: int
    due_date: date
    amount: str
    status: str
    is_edited: bool


class PaymentValidationDTO(BaseModel):
    valid: bool = Field(description="True when the methods add up to the grand total (1 cent tolerance)")
    diff: str = Field(description="Grand total minus the declared amounts")


class FinancialsResponseDTO(BaseModel):
    """Calculated totals, installment schedule and payment reconciliation."""

    totals: TotalsDTO
    installments: list[InstallmentDTO]
    payment_validation: PaymentValidationDTO


class WebhookPayloadRequestDTO(BaseModel):
    """Request payload for building the ledger webhook document."""

    client_id: str = Field(description="Client the service order belongs to")
    os_number: int | None = Field(default=None, description="Human-facing service order number")
    financials: FinancialsRequestDTO
