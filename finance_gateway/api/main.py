"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_gateway.api.v1 import bills, budgets, goals, preferences, summary, transactions
from finance_gateway.domain.exceptions import RecordNotFoundError, RecordStoreError, RecordValidationError
from finance_gateway.infrastructure.database.session import init_db
from finance_gateway.infrastructure.observability.logging import setup_logging
from finance_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


async def record_store_error_handler(request: Request, exc: RecordStoreError) -> JSONResponse:
    logging.error(f"Record store error: {exc}", extra={"request_id": _request_id(request)})
    return JSONResponse(status_code=503, content={"detail": str(exc) or "Record store unavailable"})


async def validation_error_handler(request: Request, exc: RecordValidationError) -> JSONResponse:
    logging.warning(f"Validation failed: {exc}", extra={"request_id": _request_id(request)})
    return JSONResponse(status_code=422, content={"detail": exc.errors})


async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finance Gateway",
        description="Transactions, budgets, bills and savings goals for the finance tracker UI",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RecordStoreError, record_store_error_handler)
    app.add_exception_handler(RecordValidationError, validation_error_handler)
    app.add_exception_handler(RecordNotFoundError, not_found_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(summary.router, prefix="/v1", tags=["summary"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(budgets.router, prefix="/v1", tags=["budgets"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(bills.router, prefix="/v1", tags=["bills"])
    app.include_router(preferences.router, prefix="/v1", tags=["preferences"])

    return app


app = create_app()
