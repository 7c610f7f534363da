"""
Credit Score Calculation for the Loan Decision Engine.

The credit score of a loan is:

    (credit_modifier / loan_amount) * loan_period / score_divisor

A loan is approvable at exactly that (amount, period) when its score is at or
above the approval baseline.
"""

from .settings import ScoringSettings, scoring_settings


def calculate_credit_score(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """
    Calculate the credit score for a loan.

    Args:
        credit_modifier: The applicant's segment modifier
        loan_amount: Loan amount, must be positive
        loan_period: Loan period in months
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Unitless credit score
    """
    return (credit_modifier / loan_amount) * loan_period / settings.score_divisor


def is_approvable(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    settings: ScoringSettings = scoring_settings,
) -> bool:
    """Whether the loan's credit score reaches the approval baseline."""
    score = calculate_credit_score(credit_modifier, loan_amount, loan_period, settings)
    return score >= settings.approval_baseline
