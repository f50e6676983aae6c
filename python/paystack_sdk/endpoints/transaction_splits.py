"""
Location: python/paystack_sdk/endpoints/transaction_splits.py

Summary:
    Operations on the /split resource. A transaction split shares every
    payment between the main account and one or more subaccounts.

Example:
    share = SubaccountBody.builder().subaccount("ACCT_xyz").share(20).build()
    request = (
        TransactionSplitRequest.builder()
        .name("Co-founders")
        .split_type(SplitType.PERCENTAGE)
        .currency(Currency.NGN)
        .subaccounts([share])
        .bearer_type(BearerType.SUBACCOUNT)
        .bearer_subaccount("ACCT_xyz")
        .build()
    )
    response = await client.transaction_splits.create_transaction_split(request)
"""

from typing import Optional

from ..exceptions import TransactionSplitError
from ..models.subaccount import DeleteSubaccountBody, SubaccountBody
from ..models.transaction_split import (
    TransactionSplitRequest,
    TransactionSplitResponseData,
    UpdateTransactionSplitRequest,
)
from ..response import EmptyData, Response
from .base import EndpointGroup


class TransactionSplitsEndpoints(EndpointGroup):
    """Endpoint group for transaction splits."""

    path = "split"
    error_class = TransactionSplitError

    async def create_transaction_split(
        self, split_body: TransactionSplitRequest
    ) -> Response:
        """Create a split payment on the integration."""
        return await self._send(
            "POST", self._url(), TransactionSplitResponseData, body=split_body.to_body()
        )

    async def list_transaction_splits(
        self,
        split_name: Optional[str] = None,
        split_active: Optional[bool] = None,
    ) -> Response:
        """
        List the transaction splits available on the integration.

        Args:
            split_name: Name of the split to retrieve (default no filter)
            split_active: Active state to filter on (default no filter)

        Returns:
            Response[list[TransactionSplitResponseData]]
        """
        query = [
            ("name", split_name or ""),
            ("active", "" if split_active is None else str(split_active).lower()),
        ]
        return await self._send(
            "GET", self._url(), list[TransactionSplitResponseData], query=query
        )

    async def fetch_transaction_split(self, split_id: str) -> Response:
        """Get the details of a split by its id."""
        return await self._send(
            "GET", self._url(split_id), TransactionSplitResponseData
        )

    async def update_transaction_split(
        self, split_id: str, update_body: UpdateTransactionSplitRequest
    ) -> Response:
        """Update a split's name, active state or bearer."""
        return await self._send(
            "PUT",
            self._url(split_id),
            TransactionSplitResponseData,
            body=update_body.to_body(),
        )

    async def add_or_update_subaccount_split(
        self, split_id: str, body: SubaccountBody
    ) -> Response:
        """Add a subaccount to a split, or update its share if already present."""
        return await self._send(
            "POST",
            self._url(split_id, "subaccount", "add"),
            TransactionSplitResponseData,
            body=body.to_body(),
        )

    async def remove_subaccount_from_transaction_split(
        self, split_id: str, subaccount: DeleteSubaccountBody
    ) -> Response:
        """Remove a subaccount from a split."""
        return await self._send(
            "POST",
            self._url(split_id, "subaccount", "remove"),
            EmptyData,
            body=subaccount.to_body(),
        )
