from fieldops_finance.entrypoints.http.dtos.credit_cards import (
    StatementRequestDTO,
    StatementResponseDTO,
)
from fieldops_finance.use_cases.resolve_credit_card_statement import (
    StatementRequest,
    StatementResult,
)


class CreditCardMapper:
    """Maps between REST DTOs and the statement use case."""

    @staticmethod
    def to_domain_request(dto: StatementRequestDTO) -> StatementRequest:
        return StatementRequest(
            purchase_date=dto.purchase_date,
            closing_day=dto.closing_day,
            due_day=dto.due_day,
        )

    @staticmethod
    def to_response(result: StatementResult) -> StatementResponseDTO:
        return StatementResponseDTO(
            due_date=result.due_date,
            period_start=result.period.start,
            period_end=result.period.end,
        )
