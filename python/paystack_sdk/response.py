"""
Location: python/paystack_sdk/response.py

Summary:
    The uniform response envelope every Paystack call is decoded into,
    the pagination Meta object, and the EmptyData marker for operations
    that only confirm success.

Usage:
    Endpoint groups call decode_response() on the raw text returned by the
    transport, parameterized with the payload model of the operation.
    Failures to decode raise DeserializationError, which is distinct from
    every transport-level error.

Example:
    from paystack_sdk.response import decode_response
    from paystack_sdk.models import TransactionResponseData

    envelope = decode_response(text, TransactionResponseData)
    if envelope.status:
        print(envelope.data.authorization_url)
"""

import json
from typing import Any, Generic, Optional, TypeVar

import pydantic
from pydantic import BaseModel, Field

from .exceptions import DeserializationError


T = TypeVar("T")


class EmptyData(BaseModel):
    """Data slot of operations whose response carries no payload."""

    model_config = {"extra": "ignore"}


class Meta(BaseModel):
    """
    Pagination context returned alongside list responses.

    Paystack sends these counters as numbers or numeric strings
    depending on the endpoint; both are accepted.

    Attributes:
        total: Total number of records
        skipped: Records skipped before the first returned one
        per_page: Maximum records returned per request
        page: Current page
        page_count: Number of pages available at per_page
    """
    total: Optional[int] = None
    skipped: Optional[int] = None
    per_page: Optional[int] = Field(None, alias="perPage")
    page: Optional[int] = None
    page_count: Optional[int] = Field(None, alias="pageCount")
    next: Optional[str] = None
    previous: Optional[str] = None

    model_config = {"populate_by_name": True}


class Response(BaseModel, Generic[T]):
    """
    Envelope of every Paystack response.

    When status is False the remote operation failed; message holds the
    reason and data must not be trusted.

    Attributes:
        status: Whether the request was successful
        message: Summary of the response
        data: Operation specific payload
        meta: Pagination info on list responses
        response_type: Error category sent on some failures
        code: Error code sent on some failures
    """
    status: bool
    message: str
    data: Optional[T] = None
    meta: Optional[Meta] = None
    response_type: Optional[str] = Field(None, alias="type")
    code: Optional[str] = None

    model_config = {"populate_by_name": True}


def decode_response(text: str, data_type: Any) -> Response:
    """
    Decode a raw response body into Response[data_type].

    Args:
        text: Raw body returned by the transport
        data_type: Payload type of the operation (a model, a list of
            models, or EmptyData)

    Returns:
        The decoded envelope

    Raises:
        DeserializationError: If the text is not JSON, does not match the
            envelope schema, or reports success without a payload
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"invalid JSON in response: {exc}", text) from exc

    if not isinstance(payload, dict):
        raise DeserializationError("response is not a JSON object", text)

    if payload.get("status") is False:
        # data of a failed operation is not decoded
        payload = {**payload, "data": None}
    elif data_type is EmptyData:
        payload = {**payload, "data": {}}

    try:
        envelope = Response[data_type].model_validate(payload)
    except pydantic.ValidationError as exc:
        raise DeserializationError(f"unexpected response shape: {exc}", text) from exc

    if envelope.status and envelope.data is None:
        raise DeserializationError("successful response is missing data", text)

    return envelope
