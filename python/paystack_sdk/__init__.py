"""
Location: python/paystack_sdk/__init__.py

Summary:
    Main package initialization for paystack-sdk. Exports the client,
    settings, transport, response envelope and error types for
    convenient importing.

Usage:
    from paystack_sdk import PaystackClient, PaystackSettings, TransactionError

    # Request and response models live in their own package
    from paystack_sdk.models import TransactionRequest, PlanRequest
    from paystack_sdk.types import Currency, Channel

Version: 0.1.0
"""

import logging

from .builder import RequestBuilder, RequestPayload
from .client import PaystackClient
from .config import PaystackSettings
from .endpoints import PAYSTACK_BASE_URL
from .exceptions import (
    ApplePayError,
    CustomerError,
    DedicatedVirtualAccountError,
    DeserializationError,
    NetworkError,
    PaystackAPIError,
    PaystackError,
    PlanError,
    StatusCodeError,
    SubaccountError,
    TerminalError,
    TransactionError,
    TransactionSplitError,
    TransportError,
    ValidationError,
    VirtualTerminalError,
)
from .response import EmptyData, Meta, Response, decode_response
from .transport import HttpClient
from .transport_httpx import HttpxClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PaystackClient",
    "PaystackSettings",
    "PAYSTACK_BASE_URL",
    # Builders
    "RequestBuilder",
    "RequestPayload",
    # Response envelope
    "Response",
    "Meta",
    "EmptyData",
    "decode_response",
    # Transport
    "HttpClient",
    "HttpxClient",
    # Exceptions
    "PaystackError",
    "ValidationError",
    "TransportError",
    "NetworkError",
    "StatusCodeError",
    "DeserializationError",
    "PaystackAPIError",
    "TransactionError",
    "SubaccountError",
    "TransactionSplitError",
    "CustomerError",
    "TerminalError",
    "VirtualTerminalError",
    "DedicatedVirtualAccountError",
    "PlanError",
    "ApplePayError",
]
