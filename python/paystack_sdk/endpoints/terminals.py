"""
Location: python/paystack_sdk/endpoints/terminals.py

Summary:
    Operations on the /terminal resource: pushing events to a Paystack
    Terminal, checking its availability and managing the device.
"""

from typing import Optional

from ..exceptions import TerminalError
from ..models.terminal import (
    CommissionDeviceRequest,
    EventRequest,
    FetchEventStatusResponseData,
    FetchTerminalStatusResponseData,
    SendEventResponseData,
    TerminalData,
    UpdateTerminalRequest,
)
from ..response import EmptyData, Response
from .base import EndpointGroup


class TerminalsEndpoints(EndpointGroup):
    """Endpoint group for Paystack Terminals."""

    path = "terminal"
    error_class = TerminalError

    async def send_event(self, terminal_id: str, event_request: EventRequest) -> Response:
        """
        Send an event from the integration to a Terminal.

        Args:
            terminal_id: Id of the Terminal the event is sent to
            event_request: Built EventRequest

        Returns:
            Response[SendEventResponseData] with the event id
        """
        return await self._send(
            "POST",
            self._url(terminal_id, "event"),
            SendEventResponseData,
            body=event_request.to_body(),
        )

    async def fetch_event_status(self, terminal_id: str, event_id: str) -> Response:
        """Check whether a Terminal received an event."""
        return await self._send(
            "GET",
            self._url(terminal_id, "event", event_id),
            FetchEventStatusResponseData,
        )

    async def fetch_terminal_status(self, terminal_id: str) -> Response:
        """Check the availability of a Terminal before sending it an event."""
        return await self._send(
            "GET", self._url(terminal_id, "presence"), FetchTerminalStatusResponseData
        )

    async def list_terminals(self, per_page: Optional[int] = None) -> Response:
        """List the Terminals on the integration, 50 per page unless given."""
        query = [("perPage", str(per_page if per_page is not None else 50))]
        return await self._send("GET", self._url(), list[TerminalData], query=query)

    async def fetch_terminal(self, terminal_id: str) -> Response:
        """Get the details of a Terminal."""
        return await self._send("GET", self._url(terminal_id), TerminalData)

    async def update_terminal(
        self, terminal_id: str, update_request: UpdateTerminalRequest
    ) -> Response:
        """Update the name or address of a Terminal."""
        return await self._send(
            "PUT", self._url(terminal_id), EmptyData, body=update_request.to_body()
        )

    async def commission_terminal(self, serial_number: str) -> Response:
        """
        Activate a debug device by its serial number.

        Raises:
            TerminalError: If serial_number is missing or the call fails
        """
        request = self._build(CommissionDeviceRequest, serial_number=serial_number)
        return await self._send(
            "POST", self._url("commission_device"), EmptyData, body=request.to_body()
        )

    async def decommission_terminal(self, serial_number: str) -> Response:
        """Unassign a device from the integration."""
        request = self._build(CommissionDeviceRequest, serial_number=serial_number)
        return await self._send(
            "POST", self._url("decommission_device"), EmptyData, body=request.to_body()
        )
