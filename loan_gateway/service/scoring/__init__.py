"""
Scoring Module for the Loan Decision Engine
"""

from .models import Country, CreditSegment, Decision, DecisionError, LoanOffer
from .settings import ScoringSettings, scoring_settings
from .segments import get_segment_number, resolve_segment, get_credit_modifier
from .credit_score import calculate_credit_score, is_approvable
from .eligibility import (
    check_eligibility,
    is_age_eligible,
    is_amount_in_range,
    is_period_in_range,
)
from .offer_search import (
    find_highest_amount,
    find_amount_for_period,
    find_fallback_offer,
    find_offer,
)
from .decision import make_decision

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "Country",
    "CreditSegment",
    "Decision",
    "DecisionError",
    "LoanOffer",
    # Segments
    "get_segment_number",
    "resolve_segment",
    "get_credit_modifier",
    # Scoring
    "calculate_credit_score",
    "is_approvable",
    # Eligibility
    "check_eligibility",
    "is_age_eligible",
    "is_amount_in_range",
    "is_period_in_range",
    # Offer Search
    "find_highest_amount",
    "find_amount_for_period",
    "find_fallback_offer",
    "find_offer",
    # Decision
    "make_decision",
]
