"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from loan_gateway.application.services import DecisionService
from loan_gateway.domain.interfaces import IdentityCodeValidator
from loan_gateway.infrastructure.identity import EstonianPersonalCodeValidator
from loan_gateway.service.scoring import ScoringSettings, scoring_settings


# Collaborator dependencies
def get_identity_validator() -> IdentityCodeValidator:
    """Get an IdentityCodeValidator instance."""
    return EstonianPersonalCodeValidator()


def get_scoring_settings() -> ScoringSettings:
    """Get the process-wide scoring settings."""
    return scoring_settings


# Service dependencies
def get_decision_service(
    validator: Annotated[IdentityCodeValidator, Depends(get_identity_validator)],
    settings: Annotated[ScoringSettings, Depends(get_scoring_settings)],
) -> DecisionService:
    """Get a DecisionService instance with all dependencies."""
    return DecisionService(
        identity_validator=validator,
        settings=settings,
    )
