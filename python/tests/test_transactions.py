"""
Tests for paystack_sdk.endpoints.transactions module.

Tests the transactions endpoint group against a mock HttpClient: URLs,
query defaults, bodies and error wrapping.
"""

import pytest

from paystack_sdk.endpoints import TransactionsEndpoints
from paystack_sdk.exceptions import (
    DeserializationError,
    NetworkError,
    PaystackAPIError,
    StatusCodeError,
    TransactionError,
)
from paystack_sdk.models import (
    ChargeRequest,
    PartialDebitTransactionRequest,
    TransactionRequest,
)
from paystack_sdk.types import Currency, Status


BASE = "https://api.paystack.co/transaction"


@pytest.fixture
def transactions(api_key, mock_http):
    """Create a transactions group on a mock transport."""
    return TransactionsEndpoints(api_key, mock_http)


@pytest.fixture
def transaction_request():
    """A minimal transaction request."""
    return (
        TransactionRequest.builder()
        .amount("10000")
        .email("a@b.c")
        .currency(Currency.NGN)
        .build()
    )


class TestInitializeTransaction:
    """Tests for initialize_transaction."""

    async def test_success(
        self, transactions, mock_http, api_key, make_envelope,
        sample_initialize_data, transaction_request,
    ):
        """Test a successful initialization."""
        mock_http.post.return_value = make_envelope(sample_initialize_data)

        response = await transactions.initialize_transaction(transaction_request)

        assert response.status is True
        assert response.data.reference == "ref1"
        mock_http.post.assert_awaited_once_with(
            f"{BASE}/initialize",
            api_key,
            {"amount": "10000", "email": "a@b.c", "currency": "NGN"},
        )

    async def test_unauthorized(self, transactions, mock_http, transaction_request):
        """Test that a 401 is wrapped in a TransactionError."""
        cause = StatusCodeError(401, '{"status": false, "message": "Invalid key"}')
        mock_http.post.side_effect = cause

        with pytest.raises(TransactionError) as exc_info:
            await transactions.initialize_transaction(transaction_request)

        error = exc_info.value
        assert isinstance(error, PaystackAPIError)
        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.status_code == 401
        assert error.body == '{"status": false, "message": "Invalid key"}'
        assert str(error).startswith("Transaction Error: status code: 401")

    async def test_network_failure(self, transactions, mock_http, transaction_request):
        """Test that network failures are wrapped with their cause."""
        mock_http.post.side_effect = NetworkError("POST", f"{BASE}/initialize", "refused")

        with pytest.raises(TransactionError) as exc_info:
            await transactions.initialize_transaction(transaction_request)

        assert isinstance(exc_info.value.cause, NetworkError)
        assert exc_info.value.status_code is None

    async def test_malformed_response(self, transactions, mock_http, transaction_request):
        """Test that undecodable bodies are wrapped as TransactionError."""
        mock_http.post.return_value = '{"status": true, "message": "ok", "da'

        with pytest.raises(TransactionError) as exc_info:
            await transactions.initialize_transaction(transaction_request)

        assert isinstance(exc_info.value.cause, DeserializationError)


class TestListTransactions:
    """Tests for list_transactions."""

    async def test_default_query(self, transactions, mock_http, api_key, make_envelope):
        """Test that omitted filters fall back to perPage=10 and status=success."""
        mock_http.get.return_value = make_envelope([], meta={"total": 0})

        response = await transactions.list_transactions()

        assert response.data == []
        mock_http.get.assert_awaited_once_with(
            BASE, api_key, [("perPage", "10"), ("status", "success")]
        )

    async def test_explicit_query(
        self, transactions, mock_http, make_envelope, sample_transaction_data
    ):
        """Test that explicit filters are passed through."""
        mock_http.get.return_value = make_envelope([sample_transaction_data])

        response = await transactions.list_transactions(per_page=5, status=Status.FAILED)

        assert response.data[0].reference == "re4lyvq3s3"
        assert mock_http.get.await_args.args[2] == [("perPage", "5"), ("status", "failed")]


class TestTransactionLookups:
    """Tests for verify, fetch, timeline and totals."""

    async def test_verify(self, transactions, mock_http, make_envelope, sample_transaction_data):
        """Test verifying by reference."""
        mock_http.get.return_value = make_envelope(sample_transaction_data)

        response = await transactions.verify_transaction("re4lyvq3s3")

        assert response.data.status == "success"
        assert mock_http.get.await_args.args[0] == f"{BASE}/verify/re4lyvq3s3"

    async def test_fetch(self, transactions, mock_http, make_envelope, sample_transaction_data):
        """Test fetching by id."""
        mock_http.get.return_value = make_envelope(sample_transaction_data)

        response = await transactions.fetch_transaction(4099260516)

        assert response.data.id == 4099260516
        assert mock_http.get.await_args.args[0] == f"{BASE}/4099260516"

    async def test_timeline_by_id(self, transactions, mock_http, make_envelope):
        """Test viewing a timeline by transaction id."""
        mock_http.get.return_value = make_envelope({
            "time_spent": 9,
            "attempts": 1,
            "history": [{"type": "action", "message": "Attempted to pay", "time": 9}],
        })

        response = await transactions.view_transaction_timeline(transaction_id=42)

        assert response.data.history[0].action_type == "action"
        assert mock_http.get.await_args.args[0] == f"{BASE}/timeline/42"

    async def test_timeline_by_reference(self, transactions, mock_http, make_envelope):
        """Test viewing a timeline by reference."""
        mock_http.get.return_value = make_envelope({"attempts": 1})

        await transactions.view_transaction_timeline(reference="ref1")

        assert mock_http.get.await_args.args[0] == f"{BASE}/timeline/ref1"

    @pytest.mark.parametrize(
        "kwargs", [{}, {"transaction_id": 42, "reference": "ref1"}]
    )
    async def test_timeline_needs_one_identifier(self, transactions, mock_http, kwargs):
        """Test that the timeline needs exactly one identifier."""
        with pytest.raises(TransactionError):
            await transactions.view_transaction_timeline(**kwargs)

        mock_http.get.assert_not_awaited()

    async def test_totals(self, transactions, mock_http, make_envelope):
        """Test fetching totals."""
        mock_http.get.return_value = make_envelope({
            "total_transactions": 42670,
            "total_volume_by_currency": [{"currency": "NGN", "amount": 6617829946}],
        })

        response = await transactions.total_transactions()

        assert response.data.total_volume_by_currency[0].amount == 6617829946
        assert mock_http.get.await_args.args[0] == f"{BASE}/totals"


class TestExportTransaction:
    """Tests for export_transaction."""

    async def test_default_query(self, transactions, mock_http, api_key, make_envelope):
        """Test the export defaults."""
        mock_http.get.return_value = make_envelope({
            "path": "https://files.paystack.co/exports/transactions.csv",
            "expiresAt": "2024-08-22 09:19:02",
        })

        response = await transactions.export_transaction()

        assert response.data.expires_at == "2024-08-22 09:19:02"
        mock_http.get.assert_awaited_once_with(
            f"{BASE}/export",
            api_key,
            [("status", "success"), ("currency", "NGN"), ("settled", "")],
        )

    async def test_explicit_query(self, transactions, mock_http, make_envelope):
        """Test explicit export filters."""
        mock_http.get.return_value = make_envelope({"path": "https://x"})

        await transactions.export_transaction(
            status=Status.ABANDONED, currency=Currency.GHS, settled=True
        )

        assert mock_http.get.await_args.args[2] == [
            ("status", "abandoned"),
            ("currency", "GHS"),
            ("settled", "true"),
        ]


class TestCharges:
    """Tests for charge_authorization and partial_debit."""

    async def test_charge_authorization(
        self, transactions, mock_http, make_envelope, sample_transaction_data
    ):
        """Test charging an authorization."""
        mock_http.post.return_value = make_envelope(sample_transaction_data)
        charge = (
            ChargeRequest.builder()
            .email("demo@test.com")
            .amount("40333")
            .authorization_code("AUTH_uh8bcl3zbn")
            .build()
        )

        response = await transactions.charge_authorization(charge)

        assert response.data.authorization.authorization_code == "AUTH_uh8bcl3zbn"
        url, _, body = mock_http.post.await_args.args
        assert url == f"{BASE}/charge_authorization"
        assert body["authorization_code"] == "AUTH_uh8bcl3zbn"

    async def test_partial_debit(
        self, transactions, mock_http, make_envelope, sample_transaction_data
    ):
        """Test a partial debit."""
        mock_http.post.return_value = make_envelope(sample_transaction_data)
        debit = (
            PartialDebitTransactionRequest.builder()
            .authorization_code("AUTH_uh8bcl3zbn")
            .currency(Currency.NGN)
            .amount("10000")
            .email("demo@test.com")
            .build()
        )

        await transactions.partial_debit(debit)

        url, _, body = mock_http.post.await_args.args
        assert url == f"{BASE}/partial_debit"
        assert body["currency"] == "NGN"


class TestEndpointGroup:
    """Tests for the shared endpoint group behaviour."""

    def test_base_url_override(self, api_key, mock_http):
        """Test that a custom base URL is joined with the resource path."""
        group = TransactionsEndpoints(api_key, mock_http, "http://localhost:8080/")
        assert group.base_url == "http://localhost:8080/transaction"

    def test_repr_hides_key(self, transactions, api_key):
        """Test that the key does not appear in the repr."""
        assert api_key not in repr(transactions)
