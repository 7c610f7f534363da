"""
Decision Engine for the Loan Decision Engine.

This module orchestrates the complete decision-making process:
1. Run the eligibility gate
2. Resolve the applicant's credit modifier from their personal code
3. Reject applicants with debt
4. Search for the best approvable offer

This is the main entry point for the scoring module. It never raises for a
business outcome; every rejection comes back as a Decision.
"""

from datetime import date
from typing import Optional

from loan_gateway.domain.interfaces import IdentityCodeValidator

from .eligibility import check_eligibility
from .models import Country, Decision, DecisionError
from .offer_search import find_offer
from .segments import get_credit_modifier
from .settings import ScoringSettings, scoring_settings


def make_decision(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    country: Country,
    validator: IdentityCodeValidator,
    today: Optional[date] = None,
    settings: ScoringSettings = scoring_settings,
) -> Decision:
    """
    Decide the largest loan an applicant can be approved for.

    Args:
        personal_code: Applicant's personal code
        loan_amount: Requested loan amount
        loan_period: Requested loan period in months
        country: Applicant's country
        validator: Personal code validator
        today: Date ages are computed at (defaults to the current date)
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Decision with the approved amount and period, or the rejection reason
    """
    if today is None:
        today = date.today()

    error = check_eligibility(
        personal_code,
        loan_amount,
        loan_period,
        country,
        validator,
        today,
        settings,
    )
    if error is not None:
        return Decision.rejected(error)

    credit_modifier = get_credit_modifier(personal_code, settings)
    if credit_modifier == 0:
        return Decision.rejected(DecisionError.APPLICANT_HAS_DEBT)

    return find_offer(credit_modifier, loan_amount, loan_period, settings)
