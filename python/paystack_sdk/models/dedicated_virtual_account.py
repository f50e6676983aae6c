"""
Location: python/paystack_sdk/models/dedicated_virtual_account.py

Summary:
    Request and response models for the Dedicated Virtual Account endpoint,
    which manages unique payment accounts for Nigerian and Ghanaian
    customers.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel

from ..builder import RequestPayload
from .customer import CustomerResponseData


class DedicatedVirtualAccountRequest(RequestPayload):
    """
    Body for creating a dedicated virtual account for an existing customer.

    Attributes:
        customer: Customer id or code
        preferred_bank: Bank slug, see the List Providers endpoint
        subaccount: Subaccount code to split payments with
        split_code: Split code to split payments with
    """
    payload_name: ClassVar[str] = "dedicated virtual account"

    customer: str
    preferred_bank: Optional[str] = None
    subaccount: Optional[str] = None
    split_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class Bank(BaseModel):
    """Bank holding a dedicated virtual account."""
    id: int
    name: str
    slug: str


class Assignment(BaseModel):
    """Assignment details of a dedicated virtual account."""
    integration: Optional[int] = None
    assignee_id: Optional[int] = None
    assignee_type: Optional[str] = None
    expired: Optional[bool] = None
    account_type: Optional[str] = None
    assigned_at: Optional[str] = None


class DedicatedVirtualAccountResponseData(BaseModel):
    """A dedicated virtual account as returned by the API."""
    id: int
    account_name: str
    account_number: str
    bank: Bank
    assigned: Optional[bool] = None
    currency: Optional[str] = None
    metadata: Optional[Any] = None
    active: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    assignment: Optional[Assignment] = None
    customer: Optional[CustomerResponseData] = None
