from fastapi import APIRouter, Depends

from fieldops_finance.entrypoints.http.dependencies import get_resolve_statement_use_case
from fieldops_finance.entrypoints.http.dtos.credit_cards import (
    StatementRequestDTO,
    StatementResponseDTO,
)
from fieldops_finance.entrypoints.http.mappers.credit_card_mapper import CreditCardMapper
from fieldops_finance.use_cases.resolve_credit_card_statement import ResolveCreditCardStatement


router = APIRouter(tags=["Credit Cards"])


@router.post(
    "/credit-cards/statement",
    response_model=StatementResponseDTO,
    summary="Resolve credit card statement",
    description="""
    Find the statement that bills a purchase and the purchase window it covers.

    - Purchases after `closing_day` go to the next statement
    - The statement is due on `due_day` of the following month
    - Days past the end of a month are clamped (31 → 28/29/30)
    """,
)
def resolve_statement(
    payload: StatementRequestDTO,
    use_case: ResolveCreditCardStatement = Depends(get_resolve_statement_use_case),
) -> StatementResponseDTO:
    request = CreditCardMapper.to_domain_request(payload)
    result = use_case.execute(request)
    return CreditCardMapper.to_response(result)
