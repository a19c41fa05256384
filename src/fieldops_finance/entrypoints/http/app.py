from fastapi import FastAPI

from fieldops_finance.entrypoints.http.exception_handlers import register_exception_handlers
from fieldops_finance.entrypoints.http.routes.credit_cards import router as credit_cards_router
from fieldops_finance.entrypoints.http.routes.financials import router as financials_router
from fieldops_finance.entrypoints.http.routes.health import router as health_router
from fieldops_finance.entrypoints.http.routes.payment_config import router as payment_config_router
from fieldops_finance.infra.logging import configure_logging


def build_app() -> FastAPI:
    app = FastAPI(
        title="FieldOps Finance API",
        description="""
        Financial calculations for field-service orders.

        ## Features
        - Apply parts, services and whole-order discounts
        - Build installment schedules with cumulative due dates
        - Reconcile payment methods against the order total
        - Store each service order's payment config
        - Build the ledger webhook payload
        - Resolve credit card statement dates

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(financials_router, prefix="/v1")
    app.include_router(payment_config_router, prefix="/v1")
    app.include_router(credit_cards_router, prefix="/v1")

    return app


configure_logging()
app = build_app()
