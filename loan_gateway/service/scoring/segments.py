"""
Credit Segment Resolution for the Loan Decision Engine.

An applicant's credit segment is derived from the last four digits of their
personal code. The segment number is compared against three ascending
ceilings; every range is half-open on its upper bound:

    [0, first_ceiling)              -> debt (no loan possible)
    [first_ceiling, second_ceiling) -> segment 1
    [second_ceiling, third_ceiling) -> segment 2
    [third_ceiling, 10000)          -> segment 3
"""

from .models import CreditSegment
from .settings import ScoringSettings, scoring_settings


def get_segment_number(personal_code: str) -> int:
    """
    Extract the segment number from a personal code.

    Args:
        personal_code: A syntactically valid personal code

    Returns:
        The last four characters interpreted as an integer (0-9999)
    """
    return int(personal_code[-4:])


def resolve_segment(
    segment_number: int,
    settings: ScoringSettings = scoring_settings,
) -> CreditSegment:
    """
    Classify a segment number into a credit segment.

    Args:
        segment_number: Integer from 0 to 9999
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The credit segment the number falls into
    """
    if segment_number < settings.first_segment_ceiling:
        return CreditSegment.DEBT
    elif segment_number < settings.second_segment_ceiling:
        return CreditSegment.SEGMENT_1
    elif segment_number < settings.third_segment_ceiling:
        return CreditSegment.SEGMENT_2
    else:
        return CreditSegment.SEGMENT_3


def get_credit_modifier(
    personal_code: str,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Get the credit modifier for the applicant identified by a personal code.

    Args:
        personal_code: A syntactically valid personal code
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The segment's credit modifier (0 = applicant has debt)
    """
    segment = resolve_segment(get_segment_number(personal_code), settings)
    return settings.credit_modifiers[segment]
