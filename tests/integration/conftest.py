"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Decision service pinned to a fixed date
- Validators that misbehave, for error handling tests
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from loan_gateway.main import app
from loan_gateway.application.services import DecisionService
from loan_gateway.core.dependencies import get_decision_service
from loan_gateway.domain.exceptions import IdentityCodeParseException
from loan_gateway.domain.interfaces import IdentityCodeValidator
from loan_gateway.infrastructure.identity import EstonianPersonalCodeValidator


TODAY = date(2026, 10, 19)


# =============================================================================
# Mock Validators
# =============================================================================

class BrokenValidator(IdentityCodeValidator):
    """Validator that fails in a way the decision engine does not expect."""

    def is_valid(self, personal_code: str) -> bool:
        raise RuntimeError("validator backend unavailable")

    def get_age(self, personal_code: str, today: date) -> int:
        raise RuntimeError("validator backend unavailable")


class ContractViolatingValidator(IdentityCodeValidator):
    """Validator that reports a code as valid but cannot parse it."""

    def is_valid(self, personal_code: str) -> bool:
        return True

    def get_age(self, personal_code: str, today: date) -> int:
        raise IdentityCodeParseException(personal_code)


# =============================================================================
# App Client Fixtures
# =============================================================================

def _override_service(validator: IdentityCodeValidator) -> None:
    def override_get_decision_service() -> DecisionService:
        return DecisionService(
            identity_validator=validator,
            today_provider=lambda: TODAY,
        )

    app.dependency_overrides[get_decision_service] = override_get_decision_service


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the real personal code validator.

    Ages are computed at a fixed date so results do not drift over time.
    """
    _override_service(EstonianPersonalCodeValidator())

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_broken_validator() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose validator raises unexpected errors."""
    _override_service(BrokenValidator())

    # Let the app render its 500 response instead of re-raising in the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_contract_violating_validator() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose validator accepts codes it cannot parse."""
    _override_service(ContractViolatingValidator())

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def segment_1_request() -> dict:
    """Request body for a segment 1 applicant."""
    return {
        "personalCode": "50307172740",
        "loanAmount": 4000,
        "loanPeriod": 12,
        "country": "ESTONIA",
    }


@pytest.fixture
def segment_2_request() -> dict:
    """Request body for a segment 2 applicant."""
    return {
        "personalCode": "38411266610",
        "loanAmount": 4000,
        "loanPeriod": 12,
        "country": "ESTONIA",
    }


@pytest.fixture
def segment_3_request() -> dict:
    """Request body for a segment 3 applicant (76 years old)."""
    return {
        "personalCode": "35006069515",
        "loanAmount": 4000,
        "loanPeriod": 12,
        "country": "ESTONIA",
    }


@pytest.fixture
def debtor_request() -> dict:
    """Request body for an applicant with debt."""
    return {
        "personalCode": "37605030299",
        "loanAmount": 4000,
        "loanPeriod": 12,
        "country": "ESTONIA",
    }
