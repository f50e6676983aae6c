"""
Location: python/paystack_sdk/types.py

Summary:
    Shared option enums and nested response models for the paystack-sdk.
    Enum values are the exact strings the Paystack API sends and expects.

Usage:
    Imported by the request/response models in paystack_sdk.models and by
    the endpoint groups when building query strings. All enums subclass
    str, so they serialize to their wire value inside pydantic models.

Example:
    from paystack_sdk.types import Channel, Currency

    request = (
        TransactionRequest.builder()
        .amount("10000")
        .email("customer@example.com")
        .currency(Currency.GHS)
        .channels([Channel.CARD, Channel.BANK_TRANSFER])
        .build()
    )
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Currency(str, Enum):
    """Currencies supported by Paystack."""
    NGN = "NGN"
    GHS = "GHS"
    USD = "USD"
    ZAR = "ZAR"
    KES = "KES"


class Channel(str, Enum):
    """Payment channels a customer can be offered."""
    CARD = "card"
    BANK = "bank"
    USSD = "ussd"
    QR = "qr"
    MOBILE_MONEY = "mobile_money"
    BANK_TRANSFER = "bank_transfer"
    EFT = "eft"
    APPLE_PAY = "apple_pay"


class Status(str, Enum):
    """Transaction status filter."""
    SUCCESS = "success"
    ABANDONED = "abandoned"
    FAILED = "failed"


class BearerType(str, Enum):
    """Who bears the Paystack charges of a split transaction."""
    SUBACCOUNT = "subaccount"
    ACCOUNT = "account"
    ALL_PROPORTIONAL = "all-proportional"
    ALL = "all"


class SplitType(str, Enum):
    """Whether a transaction split is by percentage or flat amount."""
    PERCENTAGE = "percentage"
    FLAT = "flat"


class Domain(str, Enum):
    """Integration environment."""
    TEST = "test"
    LIVE = "live"


class Interval(str, Enum):
    """Billing interval of a plan."""
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUALLY = "biannually"
    ANNUALLY = "annually"


class EventType(str, Enum):
    """Kind of event pushed to a Paystack Terminal."""
    INVOICE = "invoice"
    TRANSACTION = "transaction"


class TerminalAction(str, Enum):
    """
    Action a Terminal should perform for an event.

    Invoice events accept PROCESS or VIEW; transaction events accept
    PROCESS or PRINT.
    """
    PROCESS = "process"
    VIEW = "view"
    PRINT = "print"


class Authorization(BaseModel):
    """
    Reusable card or bank authorization attached to a transaction.

    Attributes:
        authorization_code: Code used to charge this authorization again
        bin: First digits of the card
        last4: Last four digits of the card
        channel: "card" or "bank"
        reusable: Whether the authorization can be charged again
    """
    authorization_code: Optional[str] = None
    bin: Optional[str] = None
    last4: Optional[str] = None
    exp_month: Optional[str] = None
    exp_year: Optional[str] = None
    channel: Optional[str] = None
    card_type: Optional[str] = None
    bank: Optional[str] = None
    country_code: Optional[str] = None
    brand: Optional[str] = None
    reusable: Optional[bool] = None
    signature: Optional[str] = None
    account_name: Optional[str] = None
