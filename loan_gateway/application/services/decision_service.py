"""Decision service - orchestrates the loan decision use case."""

from datetime import date
from typing import Callable

import structlog

from loan_gateway.application.dto import DecisionRequest, DecisionResponse
from loan_gateway.domain.interfaces import IdentityCodeValidator
from loan_gateway.service.scoring import (
    Country,
    ScoringSettings,
    make_decision,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class DecisionService:
    """
    Application service for loan decision use cases.

    Holds no per-request state; a single instance may serve concurrent
    requests.
    """

    def __init__(
        self,
        identity_validator: IdentityCodeValidator,
        settings: ScoringSettings = scoring_settings,
        today_provider: Callable[[], date] = date.today,
    ):
        self._identity_validator = identity_validator
        self._settings = settings
        self._today_provider = today_provider

    def make_decision(self, request: DecisionRequest) -> DecisionResponse:
        """
        Process a loan decision request.

        Args:
            request: The decision request

        Returns:
            DecisionResponse with the approved loan or the rejection reason
        """
        country = Country.parse(request.country)

        log = logger.bind(
            loan_amount=request.loan_amount,
            loan_period=request.loan_period,
            country=country.value,
        )
        log.info("decision_requested")

        decision = make_decision(
            personal_code=request.personal_code,
            loan_amount=request.loan_amount,
            loan_period=request.loan_period,
            country=country,
            validator=self._identity_validator,
            today=self._today_provider(),
            settings=self._settings,
        )

        if decision.is_approved:
            log.info(
                "decision_made",
                approved=True,
                approved_amount=decision.loan_amount,
                approved_period=decision.loan_period,
            )
        else:
            log.info(
                "decision_made",
                approved=False,
                reason=decision.error.value,
            )

        return DecisionResponse.from_decision(decision)
