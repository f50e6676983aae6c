"""
Location: python/paystack_sdk/endpoints/subaccounts.py

Summary:
    Operations on the /subaccount resource. Subaccounts receive a share
    of payments made through the integration.
"""

from typing import Optional

from ..exceptions import SubaccountError
from ..models.subaccount import SubaccountRequest, SubaccountsResponseData
from ..response import Response
from .base import EndpointGroup


class SubaccountsEndpoints(EndpointGroup):
    """Endpoint group for subaccounts."""

    path = "subaccount"
    error_class = SubaccountError

    async def create_subaccount(self, subaccount_request: SubaccountRequest) -> Response:
        """Create a subaccount on the integration."""
        return await self._send(
            "POST",
            self._url(),
            SubaccountsResponseData,
            body=subaccount_request.to_body(),
        )

    async def list_subaccounts(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        from_: Optional[str] = None,
        to: Optional[str] = None,
    ) -> Response:
        """
        List subaccounts available on the integration.

        Args:
            per_page: Records per page (default 50)
            page: Page to retrieve (default 1)
            from_: Start date of the listing, e.g. 2016-09-24T00:00:05.000Z
            to: End date of the listing

        Returns:
            Response[list[SubaccountsResponseData]]
        """
        query = [
            ("perPage", str(per_page if per_page is not None else 50)),
            ("page", str(page if page is not None else 1)),
            ("from", from_ or ""),
            ("to", to or ""),
        ]
        return await self._send(
            "GET", self._url(), list[SubaccountsResponseData], query=query
        )

    async def fetch_subaccount(self, id_or_code: str) -> Response:
        """Get the details of a subaccount by id or code."""
        return await self._send("GET", self._url(id_or_code), SubaccountsResponseData)

    async def update_subaccount(
        self, id_or_code: str, subaccount_request: SubaccountRequest
    ) -> Response:
        """Update a subaccount's details."""
        return await self._send(
            "PUT",
            self._url(id_or_code),
            SubaccountsResponseData,
            body=subaccount_request.to_body(),
        )
