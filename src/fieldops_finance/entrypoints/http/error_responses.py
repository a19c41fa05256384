"""Error response models, used to document error bodies in OpenAPI."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One failing field of a validation error."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``errors`` is only present for validation failures.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "PaymentConfig with identifier "
                    "'5f0c1c2e-2f6b-4c53-9f7e-0c4e9b1d7a10' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "installment_days.1",
                            "message": "Must be >= 0",
                            "code": "INVALID_VALUE",
                        }
                    ],
                },
            ]
        }
    )
