"""
Location: python/paystack_sdk/models/plan.py

Summary:
    Request and response models for the plans endpoint.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload
from ..types import Currency, Interval


class PlanRequest(RequestPayload):
    """
    Body for creating or updating a plan.

    Attributes:
        name: Name of the plan
        amount: Amount in the subunit of the currency
        interval: Billing interval
        description: Description of the plan
        send_invoices: Send invoices to customers
        send_sms: Send SMS to customers
        currency: Currency of the amount
        invoice_limit: Number of invoices to raise during the subscription
    """
    payload_name: ClassVar[str] = "plan"

    name: str
    amount: str
    interval: Interval
    description: Optional[str] = None
    send_invoices: Optional[bool] = None
    send_sms: Optional[bool] = None
    currency: Optional[Currency] = None
    invoice_limit: Optional[int] = None


class PlanResponseData(BaseModel):
    """A plan as returned by the API."""
    id: int
    name: str
    plan_code: str
    amount: int
    interval: str
    description: Optional[str] = None
    currency: Optional[str] = None
    integration: Optional[int] = None
    domain: Optional[str] = None
    send_invoices: Optional[bool] = None
    send_sms: Optional[bool] = None
    hosted_page: Optional[bool] = None
    invoice_limit: Optional[int] = None
    is_archived: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}
