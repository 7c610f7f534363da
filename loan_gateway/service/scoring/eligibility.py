"""
Eligibility Gate for the Loan Decision Engine.

Checks a loan request against the static policy before any scoring is done.
The checks run in a fixed order and the first failure wins:

1. Personal code syntax
2. Age parsed from the personal code
3. Country and age bounds (an unsupported country fails like a bad age)
4. Loan amount bounds
5. Loan period bounds
"""

from datetime import date
from typing import Optional

from loan_gateway.domain.exceptions import IdentityCodeParseException
from loan_gateway.domain.interfaces import IdentityCodeValidator

from .models import Country, DecisionError
from .settings import ScoringSettings, scoring_settings


def is_age_eligible(
    age: int,
    country: Country,
    settings: ScoringSettings = scoring_settings,
) -> bool:
    """
    Check an age against the country's age policy.

    Args:
        age: Applicant age in whole years
        country: Applicant's country
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        True if min_age <= age <= the country's maximum age.
        Always False for an unsupported country.
    """
    max_age = settings.max_age_by_country.get(country)
    if max_age is None:
        return False
    return settings.min_age <= age <= max_age


def is_amount_in_range(
    loan_amount: int,
    settings: ScoringSettings = scoring_settings,
) -> bool:
    return settings.min_loan_amount <= loan_amount <= settings.max_loan_amount


def is_period_in_range(
    loan_period: int,
    settings: ScoringSettings = scoring_settings,
) -> bool:
    return settings.min_loan_period <= loan_period <= settings.max_loan_period


def check_eligibility(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    country: Country,
    validator: IdentityCodeValidator,
    today: date,
    settings: ScoringSettings = scoring_settings,
) -> Optional[DecisionError]:
    """
    Run every eligibility check on a loan request.

    Args:
        personal_code: Applicant's personal code
        loan_amount: Requested loan amount
        loan_period: Requested loan period in months
        country: Applicant's country
        validator: Personal code validator
        today: Date the applicant's age is computed at
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        None if the request is eligible, otherwise the first failed check
    """
    if not validator.is_valid(personal_code):
        return DecisionError.INVALID_IDENTITY_CODE

    try:
        age = validator.get_age(personal_code, today)
    except IdentityCodeParseException:
        return DecisionError.INVALID_IDENTITY_CODE

    if not is_age_eligible(age, country, settings):
        return DecisionError.INVALID_AGE

    if not is_amount_in_range(loan_amount, settings):
        return DecisionError.INVALID_AMOUNT

    if not is_period_in_range(loan_period, settings):
        return DecisionError.INVALID_PERIOD

    return None
