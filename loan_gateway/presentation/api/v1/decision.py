"""Decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from loan_gateway.application.dto import DecisionRequest
from loan_gateway.application.services import DecisionService
from loan_gateway.core.dependencies import get_decision_service
from loan_gateway.core.metrics import record_decision, track_decision_latency
from loan_gateway.presentation.schemas import (
    DecisionRequestSchema,
    DecisionResponseSchema,
)

decision_router = APIRouter(
    prefix="/loan",
    responses={
        400: {"model": DecisionResponseSchema, "description": "Invalid personal code, age, amount or period"},
        404: {"model": DecisionResponseSchema, "description": "No valid loan for the applicant"},
        500: {"model": DecisionResponseSchema, "description": "Unexpected error"},
    },
)


@decision_router.post(
    "/decision",
    response_model=DecisionResponseSchema,
    status_code=200,
    summary="Request Loan Decision",
    description="""Find the largest loan amount and period the applicant can be approved for""",
    responses={
        200: {"description": "Loan approved"},
    },
)
async def create_decision(
    request: DecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> JSONResponse:
    """
    Request a loan decision for an applicant.

    Returns the approved amount and period, or an error message with the
    status code matching the rejection reason.
    """
    dto = DecisionRequest(
        personal_code=request.personal_code,
        loan_amount=request.loan_amount,
        loan_period=request.loan_period,
        country=request.country,
    )

    with track_decision_latency():
        response = decision_service.make_decision(dto)

    # Record business metrics
    record_decision(response.error_code, response.loan_amount, response.loan_period)

    body = DecisionResponseSchema(
        loan_amount=response.loan_amount,
        loan_period=response.loan_period,
        error_message=response.error_message,
    )
    return JSONResponse(
        status_code=response.status_code,
        content=body.model_dump(by_alias=True),
    )
