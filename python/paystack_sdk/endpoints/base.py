"""
Location: python/paystack_sdk/endpoints/base.py

Summary:
    Shared base for the endpoint groups. A group is bound to one resource
    path and one error class; every operation goes through _send(), which
    calls the transport, decodes the envelope and rewraps any failure as
    the group's error.

Usage:
    Subclass EndpointGroup, set path and error_class, and implement one
    async method per remote operation:

        class PlansEndpoints(EndpointGroup):
            path = "plan"
            error_class = PlanError

            async def fetch_plan(self, code):
                return await self._send("GET", self._url(code), PlanResponseData)
"""

import logging
from typing import Any, ClassVar, Optional, TypeVar

from ..builder import RequestPayload
from ..exceptions import (
    DeserializationError,
    PaystackAPIError,
    TransportError,
    ValidationError,
)
from ..response import Response, decode_response
from ..transport import HttpClient, Query


logger = logging.getLogger(__name__)

P = TypeVar("P", bound=RequestPayload)

PAYSTACK_BASE_URL = "https://api.paystack.co"


class EndpointGroup:
    """
    Facade over one Paystack resource.

    Attributes:
        key: Secret API key sent as the bearer token
        base_url: Full URL of the resource, e.g. https://api.paystack.co/plan
        http: Transport shared with every other group of the client
    """

    path: ClassVar[str] = ""
    error_class: ClassVar[type[PaystackAPIError]] = PaystackAPIError

    def __init__(self, key: str, http: HttpClient, base_url: str = PAYSTACK_BASE_URL):
        self.key = key
        self.http = http
        self.base_url = f"{base_url.rstrip('/')}/{self.path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _url(self, *segments: Any) -> str:
        """Join the resource URL with extra path segments."""
        parts = [self.base_url, *(str(segment).strip("/") for segment in segments)]
        return "/".join(parts)

    async def _send(
        self,
        method: str,
        url: str,
        data_type: Any,
        query: Optional[Query] = None,
        body: Any = None,
    ) -> Response:
        """
        Perform one remote operation and decode its envelope.

        Args:
            method: GET, POST, PUT or DELETE
            url: Full URL of the operation
            data_type: Expected type of the envelope's data field
            query: Query pairs for GET requests
            body: JSON-compatible body, None sends no body

        Returns:
            The decoded Response[data_type]

        Raises:
            PaystackAPIError: The group's subclass, wrapping the transport
                or decoding error as its cause
        """
        try:
            if method == "GET":
                text = await self.http.get(url, self.key, query)
            elif method == "POST":
                text = await self.http.post(url, self.key, body)
            elif method == "PUT":
                text = await self.http.put(url, self.key, body)
            elif method == "DELETE":
                text = await self.http.delete(url, self.key, body)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")
            return decode_response(text, data_type)
        except (TransportError, DeserializationError) as exc:
            logger.debug("%s %s failed: %s", method, url, exc)
            raise self.error_class(str(exc), cause=exc) from exc

    def _build(self, payload_type: type[P], **values: Any) -> P:
        """Build a payload from keyword values, raising the group's error if invalid."""
        builder = payload_type.builder()
        for name, value in values.items():
            builder.set(name, value)
        try:
            return builder.build()
        except ValidationError as exc:
            raise self.error_class(str(exc), cause=exc) from exc
