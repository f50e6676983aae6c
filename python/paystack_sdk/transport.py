"""
Location: python/paystack_sdk/transport.py

Summary:
    Defines the HttpClient protocol (interface) every transport must
    satisfy so endpoint groups never depend on a concrete HTTP stack.

Usage:
    Endpoint groups receive an HttpClient at construction. HttpxClient in
    transport_httpx.py is the default implementation; tests and
    applications can inject any object with the same four coroutines.

Example:
    from paystack_sdk.transport import HttpClient

    class RecordingClient:
        async def get(self, url, api_key, query=None):
            ...
        async def post(self, url, api_key, body):
            ...
        async def put(self, url, api_key, body):
            ...
        async def delete(self, url, api_key, body=None):
            ...

    assert isinstance(RecordingClient(), HttpClient)
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from .exceptions import NetworkError, StatusCodeError, TransportError


# Ordered (key, value) pairs appended to the URL of a GET request
Query = Sequence[tuple[str, str]]


@runtime_checkable
class HttpClient(Protocol):
    """
    Protocol for the four HTTP verbs used by the Paystack API.

    Every call must:
    - send the API key as "Authorization: Bearer <api_key>"
    - send "Content-Type: application/json"
    - return the response body text only for 2xx statuses
    - raise StatusCodeError for any other status, even with a body
    - raise NetworkError when the request could not be completed

    Bodies are JSON-compatible values that are sent as-is. A body of None
    means the request carries no body at all, which is not the same as
    an empty object.
    """

    async def get(
        self,
        url: str,
        api_key: str,
        query: Optional[Query] = None,
    ) -> str:
        """
        Send a GET request.

        Args:
            url: Full URL to request
            api_key: Paystack secret key
            query: Optional ordered query parameters

        Returns:
            Raw response body
        """
        ...

    async def post(self, url: str, api_key: str, body: Any) -> str:
        """
        Send a POST request with a JSON body.

        Args:
            url: Full URL to request
            api_key: Paystack secret key
            body: JSON-compatible body, or None for no body

        Returns:
            Raw response body
        """
        ...

    async def put(self, url: str, api_key: str, body: Any) -> str:
        """
        Send a PUT request with a JSON body.

        Args:
            url: Full URL to request
            api_key: Paystack secret key
            body: JSON-compatible body, or None for no body

        Returns:
            Raw response body
        """
        ...

    async def delete(self, url: str, api_key: str, body: Any = None) -> str:
        """
        Send a DELETE request, optionally with a JSON body.

        Args:
            url: Full URL to request
            api_key: Paystack secret key
            body: JSON-compatible body, or None for no body

        Returns:
            Raw response body
        """
        ...


__all__ = [
    "HttpClient",
    "Query",
    "TransportError",
    "NetworkError",
    "StatusCodeError",
]
