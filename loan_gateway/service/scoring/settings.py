"""
Scoring Settings for the Loan Decision Engine.

This module contains every policy constant the decision engine depends on:
loan amount and period bounds, credit segment ceilings and modifiers, the
credit score formula parameters and the country age policy.

Environment variables use the SCORING_ prefix:
    SCORING_MAX_LOAN_AMOUNT=12000
    SCORING_APPROVAL_BASELINE=0.1
    SCORING_LATVIA_MAX_AGE=75

Usage:
    from loan_gateway.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    ceiling = scoring_settings.max_loan_amount

    # Or create custom settings for testing
    custom = ScoringSettings(max_loan_period=60)
"""

from functools import lru_cache
from typing import Dict, List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Country, CreditSegment


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the loan decision engine.

    All settings can be overridden via environment variables with SCORING_ prefix.
    Amounts are whole euros, periods are whole months, ages are whole years.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Loan Bounds ===
    min_loan_amount: int = Field(
        default=2000,
        ge=1,
        description="Smallest loan amount that can be requested or offered",
    )
    max_loan_amount: int = Field(
        default=10000,
        ge=1,
        description="Largest loan amount that can be requested or offered",
    )
    min_loan_period: int = Field(
        default=12,
        ge=1,
        description="Shortest loan period in months",
    )
    max_loan_period: int = Field(
        default=48,
        ge=1,
        description="Longest loan period in months",
    )
    amount_step: int = Field(
        default=100,
        gt=0,
        description="Increment used when searching the amount space",
    )

    # === Credit Segments ===
    # Ranges are half-open on the upper bound, the last one ends at 10000.
    first_segment_ceiling: int = Field(
        default=2500,
        ge=0,
        le=10000,
        description="Segment numbers below this have debt",
    )
    second_segment_ceiling: int = Field(
        default=5000,
        ge=0,
        le=10000,
        description="Segment numbers below this (and not debt) are segment 1",
    )
    third_segment_ceiling: int = Field(
        default=7500,
        ge=0,
        le=10000,
        description="Segment numbers below this (and not segment 1) are segment 2",
    )
    segment_1_credit_modifier: int = Field(
        default=100,
        gt=0,
        description="Credit modifier for segment 1 applicants",
    )
    segment_2_credit_modifier: int = Field(
        default=300,
        gt=0,
        description="Credit modifier for segment 2 applicants",
    )
    segment_3_credit_modifier: int = Field(
        default=1000,
        gt=0,
        description="Credit modifier for segment 3 applicants",
    )

    # === Credit Score ===
    approval_baseline: float = Field(
        default=0.1,
        description="Minimum credit score required for approval",
    )
    score_divisor: float = Field(
        default=10.0,
        description="Divisor applied in the credit score formula",
    )

    # === Age Policy ===
    min_age: int = Field(
        default=21,
        ge=0,
        description="Minimum applicant age in every country",
    )
    estonia_max_age: int = Field(
        default=80,
        ge=0,
        description="Maximum applicant age in Estonia",
    )
    latvia_max_age: int = Field(
        default=75,
        ge=0,
        description="Maximum applicant age in Latvia",
    )
    lithuania_max_age: int = Field(
        default=85,
        ge=0,
        description="Maximum applicant age in Lithuania",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "ScoringSettings":
        """Validate that bounds and segment ceilings are consistent."""
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError(
                f"min_loan_amount ({self.min_loan_amount}) > "
                f"max_loan_amount ({self.max_loan_amount})"
            )
        if self.min_loan_period > self.max_loan_period:
            raise ValueError(
                f"min_loan_period ({self.min_loan_period}) > "
                f"max_loan_period ({self.max_loan_period})"
            )
        ceilings = self.segment_ceilings
        if not ceilings[0] < ceilings[1] < ceilings[2]:
            raise ValueError(f"Segment ceilings must be strictly ascending: {ceilings}")
        if self.score_divisor == 0:
            raise ValueError("score_divisor cannot be zero")
        return self

    @property
    def segment_ceilings(self) -> List[int]:
        """Ascending ceilings separating debt, segment 1, 2 and 3."""
        return [
            self.first_segment_ceiling,
            self.second_segment_ceiling,
            self.third_segment_ceiling,
        ]

    @property
    def credit_modifiers(self) -> Dict[CreditSegment, int]:
        """Credit modifier per segment. Debt carries no modifier."""
        return {
            CreditSegment.DEBT: 0,
            CreditSegment.SEGMENT_1: self.segment_1_credit_modifier,
            CreditSegment.SEGMENT_2: self.segment_2_credit_modifier,
            CreditSegment.SEGMENT_3: self.segment_3_credit_modifier,
        }

    @property
    def max_age_by_country(self) -> Dict[Country, int]:
        """Maximum eligible age for every supported country."""
        return {
            Country.ESTONIA: self.estonia_max_age,
            Country.LATVIA: self.latvia_max_age,
            Country.LITHUANIA: self.lithuania_max_age,
        }


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
