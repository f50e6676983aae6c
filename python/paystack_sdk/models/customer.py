"""
Location: python/paystack_sdk/models/customer.py

Summary:
    Request and response models for the customers endpoint.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload


class CreateCustomerRequest(RequestPayload):
    """
    Body for creating a customer. Build with CreateCustomerRequest.builder().

    Attributes:
        email: Customer's email address
        first_name: Customer's first name
        last_name: Customer's last name
        phone: Customer's phone number
        metadata: Key/value pairs stored on the customer
    """
    payload_name: ClassVar[str] = "customer"

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


class CustomerResponseData(BaseModel):
    """
    A Paystack customer as returned by the API.

    Attributes:
        customer_code: Unique customer code, e.g. "CUS_xnxdt6s1zg1f4nx"
        identified: Whether the customer's identity has been validated
        risk_action: "default", "allow" or "deny"
    """
    id: Optional[int] = None
    customer_code: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[Any] = None
    risk_action: Optional[str] = None
    international_format_phone: Optional[str] = None
    integration: Optional[int] = None
    domain: Optional[str] = None
    identified: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}
