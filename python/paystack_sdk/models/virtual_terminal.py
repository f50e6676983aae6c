"""
Location: python/paystack_sdk/models/virtual_terminal.py

Summary:
    Request and response models for the Virtual Terminal endpoint, which
    accepts in-person payments without a POS device.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload
from ..types import Currency


class DestinationRequest(RequestPayload):
    """
    A notification recipient for payments to a Virtual Terminal.

    Attributes:
        target: WhatsApp phone number to notify
        name: Descriptive label
    """
    payload_name: ClassVar[str] = "destination"

    target: str
    name: str


class CustomField(RequestPayload):
    """
    A custom field shown on the Virtual Terminal form.

    Attributes:
        display_name: Label displayed on the page
        variable_name: Name used to reference the field programmatically
    """
    payload_name: ClassVar[str] = "custom field"

    display_name: str
    variable_name: str


class VirtualTerminalRequest(RequestPayload):
    """
    Body for creating a Virtual Terminal.

    Attributes:
        name: Name of the Virtual Terminal
        destinations: Notification recipients
        metadata: Stringified JSON object of custom data
        currency: Currencies accepted, defaults to the integration currency
        custom_fields: Extra fields to display on the form
    """
    payload_name: ClassVar[str] = "virtual terminal"

    name: str
    destinations: list[DestinationRequest]
    metadata: Optional[str] = None
    currency: Optional[list[Currency]] = None
    custom_fields: Optional[list[CustomField]] = None


class DestinationResponse(BaseModel):
    """A notification recipient as returned by the API."""
    target: Optional[str] = None
    destination_type: Optional[str] = Field(None, alias="type")
    name: Optional[str] = None
    created_at: Optional[str] = None

    model_config = {"populate_by_name": True}


class VirtualTerminalResponseData(BaseModel):
    """A Virtual Terminal as returned by the API."""
    id: int
    name: str
    code: str
    integration: Optional[int] = None
    domain: Optional[str] = None
    payment_methods: Optional[list[str]] = Field(None, alias="paymentMethods")
    active: Optional[bool] = None
    metadata: Optional[str] = None
    destinations: Optional[list[DestinationResponse]] = None
    currency: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}
