"""
Data models for the loan decision engine.

These models describe the inputs the engine understands (countries, credit
segments) and the single result type every step returns: a Decision that is
either an approved offer or one of a fixed set of rejection reasons.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Country(str, Enum):
    """Countries the lender operates in."""
    ESTONIA = "ESTONIA"
    LATVIA = "LATVIA"
    LITHUANIA = "LITHUANIA"
    # Anything else. Treated exactly like an out-of-range age.
    UNSUPPORTED = "UNSUPPORTED"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Country":
        """Map a free-form country name to a Country, case-insensitively."""
        if value is None:
            return cls.UNSUPPORTED
        normalized = value.strip().upper()
        for country in cls:
            if country is not cls.UNSUPPORTED and country.value == normalized:
                return country
        return cls.UNSUPPORTED


class CreditSegment(str, Enum):
    """Credit segment derived from the last four digits of a personal code."""
    DEBT = "debt"
    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"


class DecisionError(str, Enum):
    """
    Every reason a loan request can fail.

    The value is a stable machine-readable code; `message` is the text shown
    to the applicant and `status_code` the HTTP status used by the API.
    """
    INVALID_IDENTITY_CODE = "INVALID_IDENTITY_CODE"
    INVALID_AGE = "INVALID_AGE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_PERIOD = "INVALID_PERIOD"
    APPLICANT_HAS_DEBT = "APPLICANT_HAS_DEBT"
    NO_VALID_LOAN_FOUND = "NO_VALID_LOAN_FOUND"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def status_code(self) -> int:
        return _ERROR_STATUS_CODES[self]


_ERROR_MESSAGES = {
    DecisionError.INVALID_IDENTITY_CODE: "Invalid personal ID code!",
    DecisionError.INVALID_AGE: "Age doesn't match requirements for this country!",
    DecisionError.INVALID_AMOUNT: "Invalid loan amount!",
    DecisionError.INVALID_PERIOD: "Invalid loan period!",
    DecisionError.APPLICANT_HAS_DEBT: "Applicant has debt!",
    DecisionError.NO_VALID_LOAN_FOUND: "No valid loan found for the provided parameters.",
    DecisionError.UNEXPECTED_ERROR: "An unexpected error occurred",
}

_ERROR_STATUS_CODES = {
    DecisionError.INVALID_IDENTITY_CODE: 400,
    DecisionError.INVALID_AGE: 400,
    DecisionError.INVALID_AMOUNT: 400,
    DecisionError.INVALID_PERIOD: 400,
    DecisionError.APPLICANT_HAS_DEBT: 404,
    DecisionError.NO_VALID_LOAN_FOUND: 404,
    DecisionError.UNEXPECTED_ERROR: 500,
}


@dataclass(frozen=True)
class LoanOffer:
    """
    An approvable (amount, period) pair found by the offer search.

    Attributes:
        amount: Loan amount in euros
        period: Loan period in months
    """
    amount: int
    period: int


@dataclass(frozen=True)
class Decision:
    """
    The outcome of a loan request.

    Exactly one of (loan_amount and loan_period) or error is set.

    Attributes:
        loan_amount: Approved amount (None if rejected)
        loan_period: Approved period in months (None if rejected)
        error: Why the request was rejected (None if approved)
    """
    loan_amount: Optional[int]
    loan_period: Optional[int]
    error: Optional[DecisionError] = None

    @classmethod
    def approved(cls, offer: LoanOffer) -> "Decision":
        return cls(loan_amount=offer.amount, loan_period=offer.period)

    @classmethod
    def rejected(cls, error: DecisionError) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error=error)

    @property
    def is_approved(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def status_code(self) -> int:
        return self.error.status_code if self.error else 200

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "loanAmount": self.loan_amount,
            "loanPeriod": self.loan_period,
            "errorMessage": self.error_message,
        }
