"""
Location: python/paystack_sdk/endpoints/transactions.py

Summary:
    Operations on the /transaction resource: initializing, verifying,
    listing and charging transactions, plus timelines, totals, exports
    and partial debits.

Example:
    async with PaystackClient("sk_test_...") as client:
        request = (
            TransactionRequest.builder()
            .amount("10000")
            .email("customer@example.com")
            .build()
        )
        response = await client.transactions.initialize_transaction(request)
        print(response.data.authorization_url)
"""

from typing import Optional, Union

from ..exceptions import TransactionError
from ..models.transaction import (
    ChargeRequest,
    ExportTransactionData,
    PartialDebitTransactionRequest,
    TransactionRequest,
    TransactionResponseData,
    TransactionStatusData,
    TransactionTimelineData,
    TransactionTotalData,
)
from ..response import Response
from ..types import Currency, Status
from .base import EndpointGroup


class TransactionsEndpoints(EndpointGroup):
    """Endpoint group for transactions."""

    path = "transaction"
    error_class = TransactionError

    async def initialize_transaction(
        self, transaction_request: TransactionRequest
    ) -> Response:
        """
        Initialize a transaction from your backend.

        Args:
            transaction_request: Built TransactionRequest

        Returns:
            Response[TransactionResponseData] with the authorization URL
        """
        return await self._send(
            "POST",
            self._url("initialize"),
            TransactionResponseData,
            body=transaction_request.to_body(),
        )

    async def verify_transaction(self, reference: str) -> Response:
        """Confirm the status of a transaction by its reference."""
        return await self._send(
            "GET", self._url("verify", reference), TransactionStatusData
        )

    async def list_transactions(
        self,
        per_page: Optional[int] = None,
        status: Optional[Status] = None,
    ) -> Response:
        """
        List transactions carried out on the integration.

        Args:
            per_page: Records per page (default 10)
            status: Filter by status (default success)

        Returns:
            Response[list[TransactionStatusData]]
        """
        query = [
            ("perPage", str(per_page if per_page is not None else 10)),
            ("status", (status or Status.SUCCESS).value),
        ]
        return await self._send(
            "GET", self._url(), list[TransactionStatusData], query=query
        )

    async def fetch_transaction(self, transaction_id: int) -> Response:
        """Get the details of a transaction by its id."""
        return await self._send(
            "GET", self._url(transaction_id), TransactionStatusData
        )

    async def charge_authorization(self, charge_request: ChargeRequest) -> Response:
        """Charge a reusable authorization."""
        return await self._send(
            "POST",
            self._url("charge_authorization"),
            TransactionStatusData,
            body=charge_request.to_body(),
        )

    async def view_transaction_timeline(
        self,
        transaction_id: Optional[int] = None,
        reference: Optional[str] = None,
    ) -> Response:
        """
        View the timeline of a transaction.

        Exactly one of transaction_id or reference must be given.

        Raises:
            TransactionError: If neither or both identifiers are given
        """
        if (transaction_id is None) == (reference is None):
            raise TransactionError(
                "Transaction Id or Reference is needed to view transaction timeline"
            )
        identifier: Union[int, str] = (
            transaction_id if transaction_id is not None else reference
        )
        return await self._send(
            "GET", self._url("timeline", identifier), TransactionTimelineData
        )

    async def total_transactions(self) -> Response:
        """Total amount received on the integration."""
        return await self._send("GET", self._url("totals"), TransactionTotalData)

    async def export_transaction(
        self,
        status: Optional[Status] = None,
        currency: Optional[Currency] = None,
        settled: Optional[bool] = None,
    ) -> Response:
        """
        Export transactions carried out on the integration.

        Args:
            status: Status of the transactions to export (default success)
            currency: Currency of the transactions to export (default NGN)
            settled: Settlement state to filter on (default no filter)

        Returns:
            Response[ExportTransactionData] with the file path
        """
        query = [
            ("status", (status or Status.SUCCESS).value),
            ("currency", (currency or Currency.NGN).value),
            ("settled", "" if settled is None else str(settled).lower()),
        ]
        return await self._send(
            "GET", self._url("export"), ExportTransactionData, query=query
        )

    async def partial_debit(
        self, partial_debit_request: PartialDebitTransactionRequest
    ) -> Response:
        """Retrieve part of a payment from a customer."""
        return await self._send(
            "POST",
            self._url("partial_debit"),
            TransactionStatusData,
            body=partial_debit_request.to_body(),
        )
