from datetime import date

from pydantic import BaseModel, Field


class StatementRequestDTO(BaseModel):
    """Request payload for resolving which statement bills a purchase."""

    purchase_date: date = Field(examples=["2024-01-15"])
    closing_day: int = Field(description="Day of month the statement closes", examples=[10])
    due_day: int = Field(description="Day of month the statement is due", examples=[20])


class StatementResponseDTO(BaseModel):
    due_date: date = Field(description="Due date of the statement billing the purchase")
    period_start: date = Field(description="First purchase day billed on that statement")
    period_end: date = Field(description="Last purchase day billed on that statement")
