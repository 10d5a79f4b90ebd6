from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cliquea_credit.entrypoints.http.dependencies import get_quote_executor
from cliquea_credit.entrypoints.http.exception_handlers import register_exception_handlers
from cliquea_credit.entrypoints.http.routes.banks import router as banks_router
from cliquea_credit.entrypoints.http.routes.credit import router as credit_router
from cliquea_credit.entrypoints.http.routes.health import router as health_router
from cliquea_credit.infra.db.session import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Only shut down the executor if a request ever created it
    if get_quote_executor.cache_info().currsize:
        executor = get_quote_executor()
        if executor is not None:
            executor.shutdown(wait=False)
        get_quote_executor.cache_clear()
    dispose_engine()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Cliquea Credit API",
        description="""
        Vehicle credit comparison across Mexican banks.

        ## Features
        - List active banks and their rates
        - Compare financing offers, ranked by monthly payment, total cost or CAT
        - Amortization table for a bank's offer

        ## Authentication
        Handled by the dealership application in front of this service.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation errors list every problem found, not just the first.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "Cliquea Team",
            "email": "dev@cliquea.mx",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(banks_router, prefix="/v1")
    app.include_router(credit_router, prefix="/v1")

    return app


app = build_app()
