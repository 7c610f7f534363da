"""
Loan Gateway - Main Application Entry Point

A loan decision service that finds the largest loan amount and period
an applicant can be approved for.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from loan_gateway import __version__
from loan_gateway.core.config import settings
from loan_gateway.core.logging import setup_logging
from loan_gateway.core.metrics import get_metrics, get_metrics_content_type
from loan_gateway.presentation.api import api_router
from loan_gateway.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)
from loan_gateway.service.scoring import scoring_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging on startup and reports the active loan policy.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        loan_amount_range=[scoring_settings.min_loan_amount, scoring_settings.max_loan_amount],
        loan_period_range=[scoring_settings.min_loan_period, scoring_settings.max_loan_period],
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Loan Gateway",
    description="Loan Decision Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Redirect root to API documentation."""
    return RedirectResponse(url="/docs")


def run() -> None:
    """Run the service with uvicorn."""
    uvicorn.run(
        "loan_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
