"""
Location: python/paystack_sdk/builder.py

Summary:
    Validated request builders. Every request body sent to Paystack is an
    immutable RequestPayload that can only be produced through its
    RequestBuilder, which checks required fields before anything touches
    the network.

Usage:
    Request models in paystack_sdk.models subclass RequestPayload. Endpoint
    groups receive the built payloads and serialize them with to_body().

Example:
    from paystack_sdk.models import TransactionRequest
    from paystack_sdk.types import Currency

    request = (
        TransactionRequest.builder()
        .amount("10000")
        .email("customer@example.com")
        .currency(Currency.NGN)
        .build()
    )
"""

from typing import Any, Callable, ClassVar, Generic, TypeVar

import pydantic
from pydantic import BaseModel

from .exceptions import ValidationError


P = TypeVar("P", bound="RequestPayload")


class RequestPayload(BaseModel):
    """
    Immutable JSON body for one remote operation.

    Subclasses declare required fields without defaults and optional fields
    with a None default. The serialized body drops every None field.
    """

    payload_name: ClassVar[str] = "request"

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def builder(cls: type[P]) -> "RequestBuilder[P]":
        """Return a fresh builder for this payload type."""
        return RequestBuilder(cls)

    def to_body(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RequestBuilder(Generic[P]):
    """
    Chainable accumulator for a RequestPayload.

    Each payload field is available as a setter method returning the
    builder, so calls can be chained. Setting a field again replaces the
    previous value. Builders are single-use and not meant to be shared
    between concurrent requests.
    """

    def __init__(self, payload_type: type[P]):
        self._payload_type = payload_type
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], "RequestBuilder[P]"]:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._payload_type.model_fields:
            raise AttributeError(
                f"{self._payload_type.payload_name} has no field named {name!r}"
            )

        def setter(value: Any) -> "RequestBuilder[P]":
            return self.set(name, value)

        return setter

    def set(self, name: str, value: Any) -> "RequestBuilder[P]":
        """
        Set a field by name.

        Args:
            name: Python field name on the payload model
            value: Value to store (last write wins)

        Returns:
            The builder itself for chaining
        """
        if name not in self._payload_type.model_fields:
            raise AttributeError(
                f"{self._payload_type.payload_name} has no field named {name!r}"
            )
        self._values[name] = value
        return self

    def missing_fields(self) -> list[str]:
        """Required fields not yet set, in declaration order."""
        return [
            name
            for name, field in self._payload_type.model_fields.items()
            if field.is_required() and name not in self._values
        ]

    def build(self) -> P:
        """
        Produce the immutable payload.

        Returns:
            The validated payload with unset optional fields left as None

        Raises:
            ValidationError: If a required field is missing or a value
                does not validate against the payload model
        """
        payload_name = self._payload_type.payload_name
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing[0], payload_name, missing)

        try:
            return self._payload_type(**self._values)
        except pydantic.ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or payload_name
            raise ValidationError(
                field,
                payload_name,
                detail=f"{field} is invalid for {payload_name}: {first['msg']}",
            ) from exc
