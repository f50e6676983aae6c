"""
Location: python/paystack_sdk/exceptions.py

Summary:
    Exception hierarchy for the paystack-sdk. Every error the library
    raises derives from PaystackError.

Usage:
    - ValidationError: raised by RequestBuilder.build() before any I/O
    - NetworkError / StatusCodeError: raised by HttpClient implementations
    - DeserializationError: raised by decode_response()
    - PaystackAPIError and its subclasses: raised by endpoint groups,
      wrapping any of the above with the resource they came from

Example:
    from paystack_sdk.exceptions import NetworkError, TransactionError

    try:
        await client.transactions.verify_transaction("ref_123")
    except TransactionError as exc:
        if isinstance(exc.cause, NetworkError):
            ...  # the request never completed, safe to retry later
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    import httpx


class PaystackError(Exception):
    """Base exception for every error raised by paystack-sdk."""
    pass


class ValidationError(PaystackError, ValueError):
    """
    Raised when a request payload cannot be built.

    Attributes:
        field: Name of the first missing (or invalid) field
        payload_name: Human readable name of the payload type
        missing: Every missing required field, in declaration order
    """

    def __init__(
        self,
        field: str,
        payload_name: str,
        missing: Optional[list[str]] = None,
        detail: Optional[str] = None,
    ):
        self.field = field
        self.payload_name = payload_name
        self.missing = list(missing or [])
        super().__init__(detail or f"{field} is required for {payload_name}")


class TransportError(PaystackError):
    """Base exception for failures inside an HttpClient."""
    pass


class NetworkError(TransportError):
    """
    The request could not be completed (connection refused, timeout,
    DNS or TLS failure). No response was received.

    Attributes:
        method: HTTP method of the failed request
        url: Target URL of the failed request
    """

    def __init__(self, method: str, url: str, detail: str):
        self.method = method
        self.url = url
        super().__init__(f"request: {method} {url} failed: {detail}")


class StatusCodeError(TransportError):
    """
    The request completed but Paystack answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code returned
        body: Raw response body
        response: The underlying httpx response, when available
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        response: Optional["httpx.Response"] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.response = response
        super().__init__(f"status code: {status_code} body: {body}")


class DeserializationError(PaystackError):
    """
    A response body was received but does not match the expected shape.

    Attributes:
        body: The raw response text that failed to decode
    """

    def __init__(self, message: str, body: str):
        self.body = body
        super().__init__(message)


class PaystackAPIError(PaystackError):
    """
    Error raised by an endpoint group.

    Wraps a builder, transport or decoding error with the resource it
    came from. The message reads "<label>: <underlying message>".

    Attributes:
        detail: Underlying error message
        cause: The wrapped exception, if any
        status_code: HTTP status when the cause is a StatusCodeError
        body: Raw response body when one was received
    """

    label = "Generic Error"

    def __init__(self, detail: str, cause: Optional[Exception] = None):
        self.detail = detail
        self.cause = cause
        self.status_code: Optional[int] = getattr(cause, "status_code", None)
        self.body: Optional[str] = getattr(cause, "body", None)
        super().__init__(f"{self.label}: {detail}")


class TransactionError(PaystackAPIError):
    """Error from the transactions endpoints."""
    label = "Transaction Error"


class SubaccountError(PaystackAPIError):
    """Error from the subaccounts endpoints."""
    label = "Subaccount Error"


class TransactionSplitError(PaystackAPIError):
    """Error from the transaction splits endpoints."""
    label = "Transaction Split Error"


class CustomerError(PaystackAPIError):
    """Error from the customers endpoints."""
    label = "Customer Error"


class TerminalError(PaystackAPIError):
    """Error from the terminal endpoints."""
    label = "Terminal Error"


class VirtualTerminalError(PaystackAPIError):
    """Error from the virtual terminal endpoints."""
    label = "Virtual Terminal Error"


class DedicatedVirtualAccountError(PaystackAPIError):
    """Error from the dedicated virtual account endpoints."""
    label = "Dedicated Virtual Account Error"


class PlanError(PaystackAPIError):
    """Error from the plans endpoints."""
    label = "Plan Error"


class ApplePayError(PaystackAPIError):
    """Error from the Apple Pay endpoints."""
    label = "Apple Pay Error"
