"""
Location: python/paystack_sdk/models/__init__.py

Summary:
    Request payloads and response data models, one module per Paystack
    resource.
"""

from .apple_pay import ApplePayDomainRequest, ApplePayResponseData
from .customer import CreateCustomerRequest, CustomerResponseData
from .dedicated_virtual_account import (
    Assignment,
    Bank,
    DedicatedVirtualAccountRequest,
    DedicatedVirtualAccountResponseData,
)
from .plan import PlanRequest, PlanResponseData
from .subaccount import (
    DeleteSubaccountBody,
    SubaccountBody,
    SubaccountData,
    SubaccountRequest,
    SubaccountsResponseData,
)
from .terminal import (
    CommissionDeviceRequest,
    EventRequest,
    EventRequestData,
    FetchEventStatusResponseData,
    FetchTerminalStatusResponseData,
    SendEventResponseData,
    TerminalData,
    UpdateTerminalRequest,
)
from .transaction import (
    ChargeRequest,
    ExportTransactionData,
    PartialDebitTransactionRequest,
    TransactionHistory,
    TransactionRequest,
    TransactionResponseData,
    TransactionStatusData,
    TransactionTimelineData,
    TransactionTotalData,
    VolumeByCurrency,
)
from .transaction_split import (
    TransactionSplitRequest,
    TransactionSplitResponseData,
    UpdateTransactionSplitRequest,
)
from .virtual_terminal import (
    CustomField,
    DestinationRequest,
    DestinationResponse,
    VirtualTerminalRequest,
    VirtualTerminalResponseData,
)

__all__ = [
    # Apple Pay
    "ApplePayDomainRequest",
    "ApplePayResponseData",
    # Customers
    "CreateCustomerRequest",
    "CustomerResponseData",
    # Dedicated virtual accounts
    "Assignment",
    "Bank",
    "DedicatedVirtualAccountRequest",
    "DedicatedVirtualAccountResponseData",
    # Plans
    "PlanRequest",
    "PlanResponseData",
    # Subaccounts
    "DeleteSubaccountBody",
    "SubaccountBody",
    "SubaccountData",
    "SubaccountRequest",
    "SubaccountsResponseData",
    # Terminals
    "CommissionDeviceRequest",
    "EventRequest",
    "EventRequestData",
    "FetchEventStatusResponseData",
    "FetchTerminalStatusResponseData",
    "SendEventResponseData",
    "TerminalData",
    "UpdateTerminalRequest",
    # Transactions
    "ChargeRequest",
    "ExportTransactionData",
    "PartialDebitTransactionRequest",
    "TransactionHistory",
    "TransactionRequest",
    "TransactionResponseData",
    "TransactionStatusData",
    "TransactionTimelineData",
    "TransactionTotalData",
    "VolumeByCurrency",
    # Transaction splits
    "TransactionSplitRequest",
    "TransactionSplitResponseData",
    "UpdateTransactionSplitRequest",
    # Virtual terminals
    "CustomField",
    "DestinationRequest",
    "DestinationResponse",
    "VirtualTerminalRequest",
    "VirtualTerminalResponseData",
]
