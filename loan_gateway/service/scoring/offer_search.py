"""
Offer Search for the Loan Decision Engine.

Finds the most favorable approvable loan for an applicant. The search walks
the amount space in fixed steps and never leaves the configured bounds, so
the work per request is bounded by construction.

Approved request:
    Raise the amount step by step at the requested period and return the
    last approvable amount, capped at the maximum loan amount.

Rejected request:
    1. Lower the amount step by step at the requested period.
    2. Failing that, try each longer period in turn, lowering the amount
       from the maximum loan amount.
    The first approvable (amount, period) pair wins.
"""

from typing import Optional

from .credit_score import is_approvable
from .models import Decision, DecisionError, LoanOffer
from .settings import ScoringSettings, scoring_settings


def find_highest_amount(
    credit_modifier: int,
    start_amount: int,
    loan_period: int,
    settings: ScoringSettings = scoring_settings,
) -> LoanOffer:
    """
    Raise an approvable amount until the score drops below the baseline.

    Args:
        credit_modifier: The applicant's segment modifier
        start_amount: An amount already approvable at loan_period
        loan_period: Loan period in months, held fixed
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The largest approvable amount reached from start_amount
    """
    step = settings.amount_step
    amount = start_amount + step

    while amount <= settings.max_loan_amount:
        if not is_approvable(credit_modifier, amount, loan_period, settings):
            return LoanOffer(amount=amount - step, period=loan_period)
        amount += step

    # The next step would overshoot; the maximum itself may still be off-grid.
    if is_approvable(credit_modifier, settings.max_loan_amount, loan_period, settings):
        return LoanOffer(amount=settings.max_loan_amount, period=loan_period)
    return LoanOffer(amount=amount - step, period=loan_period)


def find_amount_for_period(
    credit_modifier: int,
    start_amount: int,
    loan_period: int,
    settings: ScoringSettings = scoring_settings,
) -> Optional[LoanOffer]:
    """
    Lower the amount from start_amount until one is approvable.

    Args:
        credit_modifier: The applicant's segment modifier
        start_amount: First amount to try (clamped to the maximum loan amount)
        loan_period: Loan period in months, held fixed
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The first approvable offer, or None if every amount down to the
        minimum loan amount fails
    """
    amount = min(start_amount, settings.max_loan_amount)

    while amount >= settings.min_loan_amount:
        if is_approvable(credit_modifier, amount, loan_period, settings):
            return LoanOffer(amount=amount, period=loan_period)
        amount -= settings.amount_step

    return None


def find_fallback_offer(
    credit_modifier: int,
    requested_amount: int,
    requested_period: int,
    settings: ScoringSettings = scoring_settings,
) -> Optional[LoanOffer]:
    """
    Search for an offer when the requested loan is not approvable.

    Args:
        credit_modifier: The applicant's segment modifier
        requested_amount: Requested loan amount
        requested_period: Requested loan period in months
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The first approvable offer, or None if nothing within bounds qualifies
    """
    offer = find_amount_for_period(
        credit_modifier,
        requested_amount - settings.amount_step,
        requested_period,
        settings,
    )
    if offer is not None:
        return offer

    for period in range(requested_period + 1, settings.max_loan_period + 1):
        offer = find_amount_for_period(
            credit_modifier,
            settings.max_loan_amount,
            period,
            settings,
        )
        if offer is not None:
            return offer

    return None


def find_offer(
    credit_modifier: int,
    requested_amount: int,
    requested_period: int,
    settings: ScoringSettings = scoring_settings,
) -> Decision:
    """
    Find the best approvable offer for a loan request.

    Args:
        credit_modifier: The applicant's segment modifier (non-zero)
        requested_amount: Requested loan amount, within bounds
        requested_period: Requested loan period in months, within bounds
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        An approved Decision, or one rejected with NO_VALID_LOAN_FOUND
    """
    if is_approvable(credit_modifier, requested_amount, requested_period, settings):
        offer = find_highest_amount(
            credit_modifier, requested_amount, requested_period, settings
        )
        return Decision.approved(offer)

    offer = find_fallback_offer(
        credit_modifier, requested_amount, requested_period, settings
    )
    if offer is None:
        return Decision.rejected(DecisionError.NO_VALID_LOAN_FOUND)
    return Decision.approved(offer)
