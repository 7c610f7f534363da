"""Data transfer objects for loan decision operations."""

from dataclasses import dataclass
from typing import Optional

from loan_gateway.service.scoring import Decision


@dataclass(frozen=True)
class DecisionRequest:
    """Input data for requesting a loan decision."""
    personal_code: str
    loan_amount: int
    loan_period: int
    country: str


@dataclass(frozen=True)
class DecisionResponse:
    """Response data for a loan decision."""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]
    error_code: Optional[str]
    status_code: int

    @property
    def approved(self) -> bool:
        return self.error_code is None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
            error_code=decision.error.value if decision.error else None,
            status_code=decision.status_code,
        )
