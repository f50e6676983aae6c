"""
Location: python/paystack_sdk/models/apple_pay.py

Summary:
    Request and response models for the Apple Pay domain endpoint.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from ..builder import RequestPayload


class ApplePayDomainRequest(RequestPayload):
    """Body naming the domain to register or unregister (sent as "domainName")."""
    payload_name: ClassVar[str] = "apple pay domain"

    domain_name: str = Field(alias="domainName")


class ApplePayResponseData(BaseModel):
    """Domains registered for Apple Pay on the integration."""
    domain_names: list[str] = Field(alias="domainNames")

    model_config = {"populate_by_name": True}
