"""Decision-related Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class DecisionRequestSchema(BaseModel):
    """Schema for POST /loan/decision request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "personalCode": "50307172740",
                    "loanAmount": 4000,
                    "loanPeriod": 12,
                    "country": "ESTONIA",
                }
            ]
        },
    )
    personal_code: str = Field(
        ...,
        alias="personalCode",
        description="Applicant's national personal code",
        examples=["50307172740"],
    )
    loan_amount: int = Field(
        ...,
        alias="loanAmount",
        description="Requested loan amount in euros",
        examples=[4000],
    )
    loan_period: int = Field(
        ...,
        alias="loanPeriod",
        description="Requested loan period in months",
        examples=[12],
    )
    # Free-form so that unknown countries reach the decision engine.
    country: str = Field(
        ...,
        description="Applicant's country (ESTONIA, LATVIA or LITHUANIA)",
        examples=["ESTONIA"],
    )


class DecisionResponseSchema(BaseModel):
    """Schema for POST /loan/decision response body, for success and failure alike."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "loanAmount": 2000,
                    "loanPeriod": 20,
                    "errorMessage": None,
                },
                {
                    "loanAmount": None,
                    "loanPeriod": None,
                    "errorMessage": "Invalid loan amount!",
                },
            ]
        },
    )

    loan_amount: Optional[int] = Field(
        None,
        alias="loanAmount",
        description="Approved loan amount (null on failure)",
    )
    loan_period: Optional[int] = Field(
        None,
        alias="loanPeriod",
        description="Approved loan period in months (null on failure)",
    )
    error_message: Optional[str] = Field(
        None,
        alias="errorMessage",
        description="Why the request failed (null on success)",
    )
