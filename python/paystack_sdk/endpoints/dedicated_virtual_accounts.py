"""
Location: python/paystack_sdk/endpoints/dedicated_virtual_accounts.py

Summary:
    Operations on the /dedicated_account resource.
"""

from ..exceptions import DedicatedVirtualAccountError
from ..models.dedicated_virtual_account import (
    DedicatedVirtualAccountRequest,
    DedicatedVirtualAccountResponseData,
)
from ..response import Response
from .base import EndpointGroup


class DedicatedVirtualAccountsEndpoints(EndpointGroup):
    """Endpoint group for dedicated virtual accounts."""

    path = "dedicated_account"
    error_class = DedicatedVirtualAccountError

    async def create_dedicated_virtual_account(
        self, create_request: DedicatedVirtualAccountRequest
    ) -> Response:
        """
        Create a dedicated virtual account for an existing customer.

        Args:
            create_request: Built DedicatedVirtualAccountRequest

        Returns:
            Response[DedicatedVirtualAccountResponseData]
        """
        return await self._send(
            "POST",
            self._url(),
            DedicatedVirtualAccountResponseData,
            body=create_request.to_body(),
        )

    async def fetch_dedicated_virtual_account(self, dedicated_account_id: int) -> Response:
        """Get the details of a dedicated virtual account."""
        return await self._send(
            "GET", self._url(dedicated_account_id), DedicatedVirtualAccountResponseData
        )

    async def deactivate_dedicated_virtual_account(
        self, dedicated_account_id: int
    ) -> Response:
        """Deactivate a dedicated virtual account. The request carries no body."""
        return await self._send(
            "DELETE",
            self._url(dedicated_account_id),
            DedicatedVirtualAccountResponseData,
            body=None,
        )
