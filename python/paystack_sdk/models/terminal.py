"""
Location: python/paystack_sdk/models/terminal.py

Summary:
    Request and response models for the Paystack Terminal endpoint.

Usage:
    For invoice events pass the invoice id and offline reference as the
    event data; for transaction events only the transaction id is needed.

Example:
    from paystack_sdk.models import EventRequest, EventRequestData
    from paystack_sdk.types import EventType, TerminalAction

    data = EventRequestData.builder().id("7895939").reference("4634337895939").build()
    event = (
        EventRequest.builder()
        .event_type(EventType.INVOICE)
        .action(TerminalAction.PROCESS)
        .data(data)
        .build()
    )
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload
from ..types import EventType, TerminalAction


class EventRequestData(RequestPayload):
    """Parameters needed by the Terminal to perform an action."""
    payload_name: ClassVar[str] = "terminal event data"

    id: str
    reference: Optional[str] = None


class EventRequest(RequestPayload):
    """
    Body for pushing an event to a Terminal.

    Attributes:
        event_type: Invoice or transaction (sent as "type")
        action: Action the Terminal should perform
        data: Parameters of the action
    """
    payload_name: ClassVar[str] = "terminal event"

    event_type: EventType = Field(alias="type")
    action: TerminalAction
    data: EventRequestData


class UpdateTerminalRequest(RequestPayload):
    """Body for updating a Terminal's details."""
    payload_name: ClassVar[str] = "terminal update"

    name: Optional[str] = None
    address: Optional[str] = None


class CommissionDeviceRequest(RequestPayload):
    """Body identifying a Terminal device by its serial number."""
    payload_name: ClassVar[str] = "terminal device"

    serial_number: str


class SendEventResponseData(BaseModel):
    """Id of the event pushed to a Terminal."""
    id: str


class FetchEventStatusResponseData(BaseModel):
    """Whether an event has been delivered to the Terminal."""
    delivered: bool


class FetchTerminalStatusResponseData(BaseModel):
    """Availability of a Terminal."""
    online: bool
    available: bool


class TerminalData(BaseModel):
    """A Terminal registered on the integration."""
    id: int
    serial_number: str
    device_make: Optional[str] = None
    terminal_id: str
    integration: Optional[int] = None
    domain: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None
