from fastapi import APIRouter, Depends

from fieldops_finance.entrypoints.http.dependencies import (
    get_payment_config_use_case,
    save_payment_config_use_case,
)
from fieldops_finance.entrypoints.http.dtos.payment_config import (
    PaymentConfigDTO,
    PaymentConfigResponseDTO,
)
from fieldops_finance.entrypoints.http.error_responses import ErrorResponse
from fieldops_finance.entrypoints.http.mappers.payment_config_mapper import PaymentConfigMapper
from fieldops_finance.use_cases.payment_config import GetPaymentConfig, SavePaymentConfig


router = APIRouter(tags=["Payment Config"])


@router.get(
    "/service-orders/{service_order_id}/payment-config",
    response_model=PaymentConfigResponseDTO,
    summary="Get payment config",
    responses={
        404: {"model": ErrorResponse, "description": "Service order has no payment config"},
        422: {"model": ErrorResponse, "description": "Invalid service order id"},
    },
)
def get_payment_config(
    service_order_id: str,
    use_case: GetPaymentConfig = Depends(get_payment_config_use_case),
) -> PaymentConfigResponseDTO:
    config = use_case.execute(service_order_id)
    return PaymentConfigMapper.to_response(config)


@router.put(
    "/service-orders/{service_order_id}/payment-config",
    response_model=PaymentConfigResponseDTO,
    summary="Save payment config",
    description="""
    Create or replace the payment settings of a service order.

    - `start_date` must be empty or an ISO date
    - `installment_days` must be non-negative
    - Payment methods without an `id` get a generated UUID
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def save_payment_config(
    service_order_id: str,
    payload: PaymentConfigDTO,
    use_case: SavePaymentConfig = Depends(save_payment_config_use_case),
) -> PaymentConfigResponseDTO:
    request = PaymentConfigMapper.to_save_request(service_order_id, payload)
    config = use_case.execute(request)
    return PaymentConfigMapper.to_response(config)
