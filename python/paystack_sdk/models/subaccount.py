"""
Location: python/paystack_sdk/models/subaccount.py

Summary:
    Request and response models for the subaccounts endpoint, plus the
    subaccount share bodies used by transaction splits.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload


class SubaccountRequest(RequestPayload):
    """
    Body for creating or updating a subaccount.

    Attributes:
        business_name: Name of the business for the subaccount
        settlement_bank: Bank code, see the List Banks endpoint
        account_number: Bank account number
        percentage_charge: Default percentage charged on behalf of the subaccount
        description: Description of the subaccount
        metadata: Stringified JSON object of custom fields
    """
    payload_name: ClassVar[str] = "subaccount"

    business_name: str
    settlement_bank: str
    account_number: str
    percentage_charge: float
    description: str
    primary_contact_email: Optional[str] = None
    primary_contact_name: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    metadata: Optional[str] = None


class SubaccountBody(RequestPayload):
    """
    A subaccount and its share in a transaction split.

    Attributes:
        subaccount: Subaccount code, e.g. "ACCT_8f4s1eq7ml6rlzj"
        share: Share of the split assigned to the subaccount
    """
    payload_name: ClassVar[str] = "subaccount share"

    subaccount: str
    share: float


class DeleteSubaccountBody(RequestPayload):
    """Body identifying a subaccount to remove from a transaction split."""
    payload_name: ClassVar[str] = "subaccount removal"

    subaccount: str


class SubaccountsResponseData(BaseModel):
    """
    A subaccount as returned by the API.

    Attributes:
        subaccount_code: Code of the subaccount
        percentage_charge: Percentage charged on transactions of the subaccount
        is_verified: Verification status
        settlement_schedule: Settlement schedule, e.g. "AUTO"
    """
    id: int
    subaccount_code: str
    business_name: str
    settlement_bank: Optional[str] = None
    account_number: Optional[str] = None
    integration: Optional[int] = None
    domain: Optional[str] = None
    description: Optional[str] = None
    primary_contact_name: Optional[str] = None
    primary_contact_email: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    metadata: Optional[Any] = None
    percentage_charge: Optional[float] = None
    is_verified: Optional[bool] = None
    settlement_schedule: Optional[str] = None
    active: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class SubaccountData(BaseModel):
    """A subaccount together with its share inside a transaction split."""
    subaccount: SubaccountsResponseData
    share: float
