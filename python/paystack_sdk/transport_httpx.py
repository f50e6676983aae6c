"""
Location: python/paystack_sdk/transport_httpx.py

Summary:
    Default HttpClient implementation built on httpx.AsyncClient. Adds the
    bearer and content-type headers, dispatches the request and maps the
    outcome onto the transport error types.

Usage:
    PaystackClient creates one HttpxClient and shares it with every
    endpoint group, so all calls reuse the same connection pool. Pass an
    existing httpx.AsyncClient to control pooling, proxies or to plug in
    an httpx.MockTransport in tests.

Example:
    from paystack_sdk.transport_httpx import HttpxClient

    async with HttpxClient(timeout=10.0) as http:
        text = await http.get(
            "https://api.paystack.co/transaction",
            "sk_test_...",
            query=[("perPage", "10")],
        )
"""

import json
import logging
from typing import Any, Optional

import httpx

from .exceptions import NetworkError, StatusCodeError
from .transport import Query


logger = logging.getLogger(__name__)


class HttpxClient:
    """
    HttpClient backed by a single httpx.AsyncClient.

    The underlying client is safe for concurrent use, so one instance
    can serve any number of in-flight requests.

    Attributes:
        timeout: Request timeout in seconds used when the client is created here
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default 30)
            client: Optional pre-configured httpx.AsyncClient. When given,
                the caller keeps ownership and timeout is not applied.
        """
        self.timeout = timeout
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "HttpxClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context manager and close resources."""
        await self.close()

    async def get(
        self,
        url: str,
        api_key: str,
        query: Optional[Query] = None,
    ) -> str:
        params = list(query) if query is not None else None
        return await self._send("GET", url, api_key, params=params)

    async def post(self, url: str, api_key: str, body: Any) -> str:
        return await self._send("POST", url, api_key, body=body)

    async def put(self, url: str, api_key: str, body: Any) -> str:
        return await self._send("PUT", url, api_key, body=body)

    async def delete(self, url: str, api_key: str, body: Any = None) -> str:
        return await self._send("DELETE", url, api_key, body=body)

    async def _send(
        self,
        method: str,
        url: str,
        api_key: str,
        params: Optional[list[tuple[str, str]]] = None,
        body: Any = None,
    ) -> str:
        """
        Dispatch one request and branch on the outcome.

        Args:
            method: HTTP method
            url: Full URL
            api_key: Bearer token
            params: Query parameters (GET only)
            body: JSON-compatible body, None sends no body

        Returns:
            Response body text for 2xx statuses

        Raises:
            NetworkError: If the request could not be completed
            StatusCodeError: If the response status is not 2xx
        """
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        content = json.dumps(body) if body is not None else None

        logger.debug("Making request: %s %s", method, url)
        try:
            response = await self._http.request(
                method,
                url,
                params=params,
                content=content,
                headers=headers,
            )
        except httpx.RequestError as exc:
            logger.warning("Request %s %s failed: %s", method, url, exc)
            raise NetworkError(method, url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.warning(
                "Request %s %s returned status %s", method, url, response.status_code
            )
            raise StatusCodeError(response.status_code, response.text, response)

        return response.text
