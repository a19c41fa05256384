from typing import Any

from fastapi import APIRouter, Depends

from fieldops_finance.entrypoints.http.dependencies import (
    get_build_webhook_payload_use_case,
    get_calculate_financials_use_case,
)
from fieldops_finance.entrypoints.http.dtos.financials import (
    FinancialsRequestDTO,
    FinancialsResponseDTO,
    WebhookPayloadRequestDTO,
)
from fieldops_finance.entrypoints.http.mappers.financials_mapper import FinancialsMapper
from fieldops_finance.use_cases.build_webhook_payload import BuildFinancialWebhookPayload
from fieldops_finance.use_cases.calculate_financials import CalculateFinancials


router = APIRouter(tags=["Financials"])


@router.post(
    "/financials/summary",
    response_model=FinancialsResponseDTO,
    summary="Calculate service order financials",
    description="""
    Apply discounts, build the installment schedule and reconcile payment methods.

    ## Monetary Values
    - All monetary values are strings (e.g., "1000.00")
    - Responses keep full decimal precision (installments are not rounded)

    ## Discounts
    Applied in order: parts, services, then the whole order against the sum of
    the discounted categories. Fixed discounts are capped at the amount they
    reduce; percent discounts are not capped.

    ## Installments
    - `installment_days` are cumulative: each offset counts from the previous due date
    - Every installment is `grand_total / n`
    - No installments when `start_date` is omitted or the grand total is zero

    ## Payment Methods
    `valid` is true when the amounts add up to the grand total within 0.01.
    """,
    responses={
        200: {
            "description": "Successful calculation",
            "content": {
                "application/json": {
                    "example": {
                        "totals": {
                            "subtotal_parts": "1000.00",
                            "subtotal_services": "500.00",
                            "discount_parts": "100.000",
                            "discount_services": "50.00",
                            "discount_total": "67.50000",
                            "total_parts": "900.000",
                            "total_services": "450.00",
                            "subtotal_after_categories": "1350.000",
                            "grand_total": "1282.50000",
                        },
                        "installments": [
                            {
                                "number": 1,
                                "days": 30,
                                "due_date": "2024-01-31",
                                "amount": "427.50000",
                                "status": "OPEN",
                                "is_edited": False,
                            }
                        ],
                        "payment_validation": {"valid": True, "diff": "0.00000"},
                    }
                }
            },
        },
        422: {"description": "Validation error"},
    },
)
def calculate_financials(
    payload: FinancialsRequestDTO,
    use_case: CalculateFinancials = Depends(get_calculate_financials_use_case),
) -> FinancialsResponseDTO:
    """Parse → map → execute → map → return."""
    request = FinancialsMapper.to_domain_request(payload)
    summary = use_case.execute(request)
    return FinancialsMapper.to_response(summary)


@router.post(
    "/service-orders/{service_order_id}/financials/webhook-payload",
    response_model=dict[str, Any],
    summary="Build ledger webhook payload",
    description="""
    Build the document the external ledger expects for a closed service order.

    The payload is returned, not sent. Keys follow the ledger's contract
    (`os_id`, `subtotal_pecas`, `descontos`, `pagamento`, ...). `financials.start_date`
    is required.
    """,
)
def build_webhook_payload(
    service_order_id: str,
    payload: WebhookPayloadRequestDTO,
    use_case: BuildFinancialWebhookPayload = Depends(get_build_webhook_payload_use_case),
) -> dict[str, Any]:
    request = FinancialsMapper.to_webhook_request(service_order_id, payload)
    return use_case.execute(request)
