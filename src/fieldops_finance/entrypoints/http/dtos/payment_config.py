from pydantic import BaseModel, ConfigDict, Field

from fieldops_finance.entrypoints.http.dtos.financials import PaymentMethodDTO


class PaymentConfigDTO(BaseModel):
    """Payment settings stored on a service order."""

    start_date: str = Field(
        default="",
        description="ISO date (YYYY-MM-DD), or empty when not chosen yet",
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
                "start_date": "2024-01-01",
                "installment_days": [30, 30, 30],
                "payment_methods": [
                    {"id": "5f0c1c2e-2f6b-4c53-9f7e-0c4e9b1d7a10", "method": "pix", "amount": "300.00"}
                ],
            }
        }
    )


class StoredPaymentMethodDTO(BaseModel):
    id: str
    method: str
    amount: str = Field(description="Amount as decimal string", examples=["150.00"])
    details: str | None = None


class PaymentConfigResponseDTO(BaseModel):
    """Stored payment settings, returned as read from the database."""

    start_date: str
    installment_days: list[int]
    payment_methods: list[StoredPaymentMethodDTO]
