"""
Tests for paystack_sdk.client module.

Tests the PaystackClient facade: construction of the endpoint groups,
transport sharing and ownership, settings-based construction and an
end-to-end call through httpx.MockTransport.
"""

import json
import pytest
from unittest.mock import AsyncMock

import httpx

from paystack_sdk import PaystackClient, PaystackSettings
from paystack_sdk.endpoints import EndpointGroup
from paystack_sdk.exceptions import StatusCodeError, TransactionError
from paystack_sdk.models import TransactionRequest
from paystack_sdk.transport_httpx import HttpxClient


GROUPS = [
    "transactions",
    "subaccounts",
    "transaction_splits",
    "customers",
    "terminals",
    "virtual_terminals",
    "dedicated_virtual_accounts",
    "plans",
    "apple_pay",
]


class TestPaystackClientInit:
    """Tests for PaystackClient initialization."""

    def test_basic_init(self, api_key):
        """Test that the default transport is created."""
        client = PaystackClient(api_key)
        assert client.base_url == "https://api.paystack.co"
        assert isinstance(client.http, HttpxClient)
        assert client.http.timeout == 30.0

    def test_custom_timeout(self, api_key):
        """Test that the timeout reaches the default transport."""
        client = PaystackClient(api_key, timeout=5.0)
        assert client.http.timeout == 5.0

    def test_removes_trailing_slash(self, api_key, mock_http):
        """Test that trailing slash is removed from base_url."""
        client = PaystackClient(api_key, http=mock_http, base_url="http://localhost:8080/")
        assert client.base_url == "http://localhost:8080"
        assert client.plans.base_url == "http://localhost:8080/plan"

    def test_groups_share_one_transport(self, api_key, mock_http):
        """Test that every group holds the same transport and key."""
        client = PaystackClient(api_key, http=mock_http)

        for name in GROUPS:
            group = getattr(client, name)
            assert isinstance(group, EndpointGroup)
            assert group.http is mock_http
            assert group.key == api_key

    def test_group_paths(self, api_key, mock_http):
        """Test the resource URL of each group."""
        client = PaystackClient(api_key, http=mock_http)

        assert client.transactions.base_url == "https://api.paystack.co/transaction"
        assert client.transaction_splits.base_url == "https://api.paystack.co/split"
        assert client.dedicated_virtual_accounts.base_url == (
            "https://api.paystack.co/dedicated_account"
        )
        assert client.apple_pay.base_url == "https://api.paystack.co/apple-pay/domain"

    def test_repr_hides_key(self, api_key, mock_http):
        """Test that the key does not leak through repr."""
        assert api_key not in repr(PaystackClient(api_key, http=mock_http))


class TestPaystackClientSettings:
    """Tests for building a client from settings."""

    def test_from_settings(self, mock_http):
        """Test building a client from explicit settings."""
        settings = PaystackSettings(
            api_key="sk_test_settings",
            base_url="http://localhost:9000",
            timeout=12.5,
        )

        client = PaystackClient.from_settings(settings, http=mock_http)

        assert client.base_url == "http://localhost:9000"
        assert client.transactions.key == "sk_test_settings"

    def test_from_env(self, monkeypatch):
        """Test building a client from environment variables."""
        monkeypatch.setenv("PAYSTACK_API_KEY", "sk_test_env")
        monkeypatch.setenv("PAYSTACK_TIMEOUT", "7")

        client = PaystackClient.from_env()

        assert client.customers.key == "sk_test_env"
        assert client.http.timeout == 7.0


class TestPaystackClientContextManager:
    """Tests for closing the transport."""

    async def test_closes_owned_transport(self, api_key):
        """Test that a transport created by the client is closed."""
        async with PaystackClient(api_key) as client:
            http = client.http
        assert http._http.is_closed

    async def test_leaves_injected_transport_open(self, api_key):
        """Test that an injected transport is not closed."""
        http = AsyncMock()

        async with PaystackClient(api_key, http=http):
            pass

        http.close.assert_not_awaited()


class TestPaystackClientEndToEnd:
    """Tests for calls going through the real httpx transport."""

    @pytest.fixture
    def requests(self):
        return []

    @pytest.fixture
    def client(self, api_key, requests, make_envelope, sample_initialize_data):
        """Create a client whose httpx client answers from a handler."""

        def handler(request):
            requests.append(request)
            if request.url.path == "/transaction/initialize":
                return httpx.Response(200, text=make_envelope(sample_initialize_data))
            return httpx.Response(
                401, text=json.dumps({"status": False, "message": "Invalid key"})
            )

        http = HttpxClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        return PaystackClient(api_key, http=http)

    async def test_initialize_transaction(self, client, requests, api_key):
        """Test a full initialize call."""
        request = TransactionRequest.builder().amount("10000").email("a@b.c").build()

        response = await client.transactions.initialize_transaction(request)

        assert response.data.reference == "ref1"
        sent = requests[0]
        assert sent.url == "https://api.paystack.co/transaction/initialize"
        assert sent.headers["Authorization"] == f"Bearer {api_key}"
        assert json.loads(sent.content) == {"amount": "10000", "email": "a@b.c"}

    async def test_rejected_status(self, client):
        """Test that a 401 surfaces as a TransactionError with its status."""
        with pytest.raises(TransactionError) as exc_info:
            await client.transactions.verify_transaction("ref1")

        assert isinstance(exc_info.value.cause, StatusCodeError)
        assert exc_info.value.status_code == 401
        assert "Invalid key" in exc_info.value.body
