"""
Location: python/paystack_sdk/models/transaction_split.py

Summary:
    Request and response models for the transaction splits endpoint.

Example:
    from paystack_sdk.models import SubaccountBody, TransactionSplitRequest
    from paystack_sdk.types import BearerType, Currency, SplitType

    share = SubaccountBody.builder().subaccount("ACCT_z3x6z3nbo14xsil").share(20).build()
    request = (
        TransactionSplitRequest.builder()
        .name("Co-founders account")
        .split_type(SplitType.PERCENTAGE)
        .currency(Currency.NGN)
        .subaccounts([share])
        .bearer_type(BearerType.SUBACCOUNT)
        .bearer_subaccount("ACCT_z3x6z3nbo14xsil")
        .build()
    )
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from ..builder import RequestPayload
from ..types import BearerType, Currency, SplitType
from .subaccount import SubaccountBody, SubaccountData


class TransactionSplitRequest(RequestPayload):
    """
    Body for creating a transaction split.

    Attributes:
        name: Name of the split
        split_type: Percentage or flat split (sent as "type")
        currency: Currency of the split
        subaccounts: Subaccount codes and their shares
        bearer_type: Who bears the Paystack charges
        bearer_subaccount: Subaccount code bearing the charges
    """
    payload_name: ClassVar[str] = "transaction split"

    name: str
    split_type: SplitType = Field(alias="type")
    currency: Currency
    subaccounts: list[SubaccountBody]
    bearer_type: BearerType
    bearer_subaccount: str


class UpdateTransactionSplitRequest(RequestPayload):
    """
    Body for updating a transaction split.

    bearer_subaccount should only be given when bearer_type is subaccount.
    """
    payload_name: ClassVar[str] = "transaction split update"

    name: str
    active: bool
    bearer_type: Optional[BearerType] = None
    bearer_subaccount: Optional[str] = None


class TransactionSplitResponseData(BaseModel):
    """
    A transaction split as returned by the API.

    Attributes:
        split_code: Code of the split, e.g. "SPL_e7jnRLtzla"
        split_type: "percentage" or "flat"
        subaccounts: Subaccounts in the split with their shares
        total_subaccounts: Number of subaccounts in the split
    """
    id: int
    name: str
    split_type: str = Field(alias="type")
    currency: str
    integration: Optional[int] = None
    domain: Optional[str] = None
    split_code: str
    active: Optional[bool] = None
    bearer_type: Optional[str] = None
    bearer_subaccount: Optional[int] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    is_dynamic: Optional[bool] = None
    subaccounts: list[SubaccountData] = []
    total_subaccounts: Optional[int] = None

    model_config = {"populate_by_name": True}
