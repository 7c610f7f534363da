"""
Integration tests for the Decision API endpoints.

These tests verify:
1. POST /loan/decision - approved offers for every credit segment
2. Status codes and error messages for every rejection reason
3. Error handling for misbehaving collaborators
4. Health check and request tracing
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# POST /loan/decision Approval Tests
# =============================================================================

class TestApprovedDecisions:
    """Tests for approved loan decisions."""

    @pytest.mark.asyncio
    async def test_segment_1_gets_longer_period(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        """Segment 1 cannot borrow 4000 over 12 months; 2000 over 20 months fits."""
        response = await client.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 200
        assert response.json() == {
            "loanAmount": 2000,
            "loanPeriod": 20,
            "errorMessage": None,
        }

    @pytest.mark.asyncio
    async def test_segment_2_gets_lower_amount(
        self,
        client: AsyncClient,
        segment_2_request: dict,
    ):
        response = await client.post("/loan/decision", json=segment_2_request)

        assert response.status_code == 200
        data = response.json()
        assert data["loanAmount"] == 3600
        assert data["loanPeriod"] == 12
        assert data["errorMessage"] is None

    @pytest.mark.asyncio
    async def test_segment_3_gets_maximum(
        self,
        client: AsyncClient,
        segment_3_request: dict,
    ):
        response = await client.post("/loan/decision", json=segment_3_request)

        assert response.status_code == 200
        data = response.json()
        assert data["loanAmount"] == 10000
        assert data["loanPeriod"] == 12

    @pytest.mark.asyncio
    async def test_country_is_case_insensitive(
        self,
        client: AsyncClient,
        segment_2_request: dict,
    ):
        segment_2_request["country"] = "estonia"
        response = await client.post("/loan/decision", json=segment_2_request)

        assert response.status_code == 200
        assert response.json()["loanAmount"] == 3600


# =============================================================================
# POST /loan/decision Rejection Tests
# =============================================================================

class TestRejectedDecisions:
    """Tests for rejected loan decisions and their status codes."""

    @pytest.mark.asyncio
    async def test_invalid_personal_code(
        self,
        client: AsyncClient,
        segment_1_request: dict,
    ):
        segment_1_request["personalCode"] = "12345678901"
        response = await client.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 400
        assert response.json() == {
            "loanAmount": None,
            "loanPeriod": None,
            "errorMessage": "Invalid personal ID code!",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("personal_code", ["50307172740 ", "503071727 40"])
    async def test_personal_code_with_whitespace(
        self,
        client: AsyncClient,
        segment_1_request: dict,
        personal_code: str,
    ):
        segment_1_request["personalCode"] = personal_code
        response = await client.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Invalid personal ID code!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [1999, 10001])
    async def test_invalid_amount(
        self,
        client: AsyncClient,
        segment_1_request: dict,
        amount: int,
    ):
        segment_1_request["loanAmount"] = amount
        response = await client.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Invalid loan amount!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("period", [11, 49])
    async def test_invalid_period(
        self,
        client: AsyncClient,
        segment_1_request: dict,
        period: int,
    ):
        segment_1_request["loanPeriod"] = period
        response = await client.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Invalid loan period!"

    @pytest.mark.asyncio
    async def test_underage_applicant(
        self,
        client: AsyncClient,
    ):
        response = await client.post("/loan/decision", json={
            "personalCode": "50901010000",
            "loanAmount": 4000,
            "loanPeriod": 12,
            "country": "LITHUANIA",
        })

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Age doesn't match requirements for this country!"

    @pytest.mark.asyncio
    async def test_age_above_country_maximum(
        self,
        client: AsyncClient,
        segment_3_request: dict,
    ):
        """A 76 year old is too old for Latvia (75)."""
        segment_3_request["country"] = "LATVIA"
        response = await client.post("/loan/decision", json=segment_3_request)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Age doesn't match requirements for this country!"

    @pytest.mark.asyncio
    async def test_unsupported_country_is_age_error(
        self,
        client: AsyncClient,
        segment_2_request: dict,
    ):
        segment_2_request["country"] = "FINLAND"
        response = await client.post("/loan/decision", json=segment_2_request)

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Age doesn't match requirements for this country!"

    @pytest.mark.asyncio
    async def test_debtor(
        self,
        client: AsyncClient,
        debtor_request: dict,
    ):
        response = await client.post("/loan/decision", json=debtor_request)

        assert response.status_code == 404
        assert response.json() == {
            "loanAmount": None,
            "loanPeriod": None,
            "errorMessage": "Applicant has debt!",
        }

    @pytest.mark.asyncio
    async def test_missing_field_is_request_validation_error(
        self,
        client: AsyncClient,
    ):
        response = await client.post("/loan/decision", json={
            "personalCode": "50307172740",
            "loanAmount": 4000,
        })

        assert response.status_code == 422


# =============================================================================
# Error Handling Tests
# =============================================================================

class TestErrorHandling:
    """Tests for collaborator failures."""

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_500(
        self,
        client_with_broken_validator: AsyncClient,
        segment_1_request: dict,
    ):
        response = await client_with_broken_validator.post("/loan/decision", json=segment_1_request)

        assert response.status_code == 500
        assert response.json() == {
            "loanAmount": None,
            "loanPeriod": None,
            "errorMessage": "An unexpected error occurred",
        }

    @pytest.mark.asyncio
    async def test_unparseable_code_is_invalid_code(
        self,
        client_with_contract_violating_validator: AsyncClient,
        segment_1_request: dict,
    ):
        response = await client_with_contract_violating_validator.post(
            "/loan/decision", json=segment_1_request
        )

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Invalid personal ID code!"


# =============================================================================
# Health and Tracing Tests
# =============================================================================

class TestServiceEndpoints:
    """Tests for health check and request tracing."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(
        self,
        client: AsyncClient,
        segment_2_request: dict,
    ):
        response = await client.post(
            "/loan/decision",
            json=segment_2_request,
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")
