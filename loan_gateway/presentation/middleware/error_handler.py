"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from loan_gateway.domain.exceptions import DomainException
from loan_gateway.service.scoring import Decision, DecisionError
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _unexpected_error_response() -> JSONResponse:
    decision = Decision.rejected(DecisionError.UNEXPECTED_ERROR)
    return JSONResponse(
        status_code=decision.status_code,
        content=decision.to_dict(),
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Loan rejections are ordinary responses; only collaborator failures and
    bugs reach these handlers, and all of them become the generic
    unexpected-error body.
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions that escaped the decision engine."""
        logger.error(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _unexpected_error_response()

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _unexpected_error_response()
