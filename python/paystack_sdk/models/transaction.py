"""
Location: python/paystack_sdk/models/transaction.py

Summary:
    Request and response models for the transactions endpoint, including
    the charge authorization and partial debit bodies.

Usage:
    Amounts are strings in the subunit of the currency (kobo, pesewas,
    cents) to avoid any precision loss on the way to the API.

Example:
    from paystack_sdk.models import TransactionRequest

    request = (
        TransactionRequest.builder()
        .amount("10000")
        .email("customer@example.com")
        .build()
    )
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload
from ..types import Authorization, BearerType, Channel, Currency
from .customer import CustomerResponseData


class TransactionRequest(RequestPayload):
    """
    Body for initializing a transaction.

    Attributes:
        amount: Amount in the subunit of the currency
        email: Customer's email address
        currency: Transaction currency, defaults to the integration currency
        reference: Unique reference, only -, ., = and alphanumerics allowed
        callback_url: Overrides the dashboard callback URL for this transaction
        plan: Plan code to subscribe the customer to; invalidates amount
        invoice_limit: Number of times to charge during the subscription
        metadata: Stringified JSON object of custom data
        channels: Payment channels to offer the customer
        split_code: Transaction split code, e.g. "SPL_98WF13Eb3w"
        subaccount: Subaccount code that owns the payment
        transaction_charge: Flat amount overriding the split configuration
        bearer: Who bears the charges, account or subaccount
    """
    payload_name: ClassVar[str] = "transaction"

    amount: str
    email: str
    currency: Optional[Currency] = None
    reference: Optional[str] = None
    callback_url: Optional[str] = None
    plan: Optional[str] = None
    invoice_limit: Optional[int] = None
    metadata: Optional[str] = None
    channels: Optional[list[Channel]] = None
    split_code: Optional[str] = None
    subaccount: Optional[str] = None
    transaction_charge: Optional[str] = None
    bearer: Optional[BearerType] = None


class PartialDebitTransactionRequest(RequestPayload):
    """
    Body for retrieving part of a payment from a customer.

    Attributes:
        authorization_code: Authorization code to debit
        currency: NGN or GHS
        amount: Amount in the subunit of the currency
        email: Email attached to the authorization code
        reference: Unique transaction reference
        at_least: Minimum amount to charge
    """
    payload_name: ClassVar[str] = "partial debit transaction"

    authorization_code: str
    currency: Currency
    amount: str
    email: str
    reference: Optional[str] = None
    at_least: Optional[str] = None


class ChargeRequest(RequestPayload):
    """
    Body for charging a reusable authorization.

    Attributes:
        email: Customer's email address
        amount: Amount in the subunit of the currency
        authorization_code: Valid authorization code to charge
        queue: Queue the charge when making scheduled charge calls
    """
    payload_name: ClassVar[str] = "charge"

    email: str
    amount: str
    authorization_code: str
    reference: Optional[str] = None
    currency: Optional[Currency] = None
    metadata: Optional[str] = None
    channels: Optional[list[Channel]] = None
    subaccount: Optional[str] = None
    transaction_charge: Optional[int] = None
    bearer: Optional[BearerType] = None
    queue: Optional[bool] = None


class TransactionResponseData(BaseModel):
    """Data returned when a transaction is initialized."""
    authorization_url: str
    access_code: str
    reference: str


class TransactionStatusData(BaseModel):
    """
    A transaction as returned by verify, fetch, list and charge calls.

    Attributes:
        status: "success", "abandoned" or "failed"
        amount: Amount in the subunit of the currency
        gateway_response: Response from the payment gateway
        customer: Customer the transaction belongs to
        authorization: Authorization created or used by the transaction
    """
    id: Optional[int] = None
    domain: Optional[str] = None
    status: Optional[str] = None
    reference: Optional[str] = None
    amount: Optional[int] = None
    message: Optional[str] = None
    gateway_response: Optional[str] = None
    paid_at: Optional[str] = None
    created_at: Optional[str] = None
    channel: Optional[str] = None
    currency: Optional[str] = None
    ip_address: Optional[str] = None
    metadata: Optional[Any] = None
    fees: Optional[int] = None
    customer: Optional[CustomerResponseData] = None
    authorization: Optional[Authorization] = None


class TransactionHistory(BaseModel):
    """One step in a transaction timeline."""
    action_type: str = Field(alias="type")
    message: str
    time: int

    model_config = {"populate_by_name": True}


class TransactionTimelineData(BaseModel):
    """
    Timeline of a transaction.

    Attributes:
        time_spent: Time spent on the transaction in ms
        attempts: Number of attempts
        history: Ordered steps taken during the transaction
    """
    time_spent: Optional[int] = None
    attempts: Optional[int] = None
    authentication: Optional[str] = None
    errors: Optional[int] = None
    success: Optional[bool] = None
    mobile: Optional[bool] = None
    input: Optional[list[Any]] = None
    channel: Optional[str] = None
    history: Optional[list[TransactionHistory]] = None


class VolumeByCurrency(BaseModel):
    """Amount in the subunit of one currency."""
    currency: str
    amount: int


class TransactionTotalData(BaseModel):
    """Totals received on the integration."""
    total_transactions: Optional[int] = None
    unique_customers: Optional[int] = None
    total_volume: Optional[int] = None
    total_volume_by_currency: Optional[list[VolumeByCurrency]] = None
    pending_transfers: Optional[int] = None
    pending_transfers_by_currency: Optional[list[VolumeByCurrency]] = None


class ExportTransactionData(BaseModel):
    """Location of an exported transactions file."""
    path: str
    expires_at: Optional[str] = Field(None, alias="expiresAt")

    model_config = {"populate_by_name": True}
