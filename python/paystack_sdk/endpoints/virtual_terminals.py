"""
Location: python/paystack_sdk/endpoints/virtual_terminals.py

Summary:
    Operations on the /virtual_terminal resource.
"""

from typing import Optional

from ..exceptions import VirtualTerminalError
from ..models.virtual_terminal import VirtualTerminalRequest, VirtualTerminalResponseData
from ..response import EmptyData, Response
from .base import EndpointGroup


class VirtualTerminalsEndpoints(EndpointGroup):
    """Endpoint group for Virtual Terminals."""

    path = "virtual_terminal"
    error_class = VirtualTerminalError

    async def create_virtual_terminal(
        self, virtual_terminal_request: VirtualTerminalRequest
    ) -> Response:
        """Create a Virtual Terminal on the integration."""
        return await self._send(
            "POST",
            self._url(),
            VirtualTerminalResponseData,
            body=virtual_terminal_request.to_body(),
        )

    async def list_virtual_terminals(self, per_page: Optional[int] = None) -> Response:
        """List the Virtual Terminals, 50 per page unless given."""
        query = [("perPage", str(per_page if per_page is not None else 50))]
        return await self._send(
            "GET", self._url(), list[VirtualTerminalResponseData], query=query
        )

    async def fetch_virtual_terminal(self, code: str) -> Response:
        """Get the details of a Virtual Terminal by its code."""
        return await self._send("GET", self._url(code), VirtualTerminalResponseData)

    async def deactivate_virtual_terminal(self, code: str) -> Response:
        """Deactivate a Virtual Terminal. The request carries no body."""
        return await self._send(
            "PUT", self._url(code, "deactivate"), EmptyData, body=None
        )
