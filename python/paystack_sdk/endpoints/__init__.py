"""
Location: python/paystack_sdk/endpoints/__init__.py

Summary:
    Endpoint groups, one per Paystack resource. PaystackClient creates one
    of each and hands them all the same transport.
"""

from .apple_pay import ApplePayEndpoints
from .base import PAYSTACK_BASE_URL, EndpointGroup
from .customers import CustomersEndpoints
from .dedicated_virtual_accounts import DedicatedVirtualAccountsEndpoints
from .plans import PlansEndpoints
from .subaccounts import SubaccountsEndpoints
from .terminals import TerminalsEndpoints
from .transaction_splits import TransactionSplitsEndpoints
from .transactions import TransactionsEndpoints
from .virtual_terminals import VirtualTerminalsEndpoints

__all__ = [
    "PAYSTACK_BASE_URL",
    "EndpointGroup",
    "ApplePayEndpoints",
    "CustomersEndpoints",
    "DedicatedVirtualAccountsEndpoints",
    "PlansEndpoints",
    "SubaccountsEndpoints",
    "TerminalsEndpoints",
    "TransactionSplitsEndpoints",
    "TransactionsEndpoints",
    "VirtualTerminalsEndpoints",
]
