"""
Shared pytest fixtures for paystack-sdk tests.

This module provides common fixtures used across all test files,
including sample response envelopes and a mock transport.
"""

import json

import pytest


API_KEY = "sk_test_0123456789abcdef"


@pytest.fixture
def api_key():
    """Secret key used by every test client."""
    return API_KEY


@pytest.fixture
def make_envelope():
    """Build a raw JSON response envelope around a data payload."""

    def _make(data=None, status=True, message="Request successful", **extra):
        payload = {"status": status, "message": message, **extra}
        if data is not None:
            payload["data"] = data
        return json.dumps(payload)

    return _make


@pytest.fixture
def sample_initialize_data():
    """Data of a successful transaction initialization."""
    return {
        "authorization_url": "https://checkout.paystack.com/0peioxfhpn",
        "access_code": "0peioxfhpn",
        "reference": "ref1",
    }


@pytest.fixture
def sample_transaction_data():
    """A transaction as returned by verify and fetch calls."""
    return {
        "id": 4099260516,
        "domain": "test",
        "status": "success",
        "reference": "re4lyvq3s3",
        "amount": 40333,
        "gateway_response": "Successful",
        "paid_at": "2024-08-22T09:15:02.000Z",
        "created_at": "2024-08-22T09:14:24.000Z",
        "channel": "card",
        "currency": "NGN",
        "fees": 10283,
        "customer": {
            "id": 181873746,
            "first_name": None,
            "last_name": None,
            "email": "demo@test.com",
            "customer_code": "CUS_1rkzaqsv4rrhqo6",
            "phone": None,
            "metadata": None,
            "risk_action": "default",
        },
        "authorization": {
            "authorization_code": "AUTH_uh8bcl3zbn",
            "bin": "408408",
            "last4": "4081",
            "exp_month": "12",
            "exp_year": "2030",
            "channel": "card",
            "card_type": "visa ",
            "bank": "TEST BANK",
            "country_code": "NG",
            "brand": "visa",
            "reusable": True,
            "signature": "SIG_yEXu7dLBeqG0kU7g95Ke",
            "account_name": None,
        },
    }


@pytest.fixture
def sample_plan_data():
    """A plan as returned by the plans endpoints."""
    return {
        "id": 28,
        "name": "Monthly retainer",
        "plan_code": "PLN_gx2wn530m0i3w3m",
        "amount": 500000,
        "interval": "monthly",
        "description": None,
        "currency": "NGN",
        "integration": 100032,
        "domain": "test",
        "send_invoices": True,
        "send_sms": True,
        "hosted_page": False,
        "invoice_limit": 0,
        "createdAt": "2016-03-29T22:42:50.811Z",
        "updatedAt": "2016-03-29T22:42:50.811Z",
    }


@pytest.fixture
def mock_http():
    """Create a mock HttpClient for testing endpoint groups."""
    from unittest.mock import AsyncMock, MagicMock

    http = MagicMock()
    http.get = AsyncMock()
    http.post = AsyncMock()
    http.put = AsyncMock()
    http.delete = AsyncMock()
    return http
