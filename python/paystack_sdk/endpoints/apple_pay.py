"""
Location: python/paystack_sdk/endpoints/apple_pay.py

Summary:
    Operations on the /apple-pay/domain resource, which controls the
    domains allowed to offer Apple Pay through the integration.

Example:
    await client.apple_pay.register_domain("example.com")
    response = await client.apple_pay.list_domains()
    print(response.data.domain_names)
"""

from ..exceptions import ApplePayError
from ..models.apple_pay import ApplePayDomainRequest, ApplePayResponseData
from ..response import EmptyData, Response
from .base import EndpointGroup


class ApplePayEndpoints(EndpointGroup):
    """Endpoint group for Apple Pay domains."""

    path = "apple-pay/domain"
    error_class = ApplePayError

    async def register_domain(self, domain_name: str) -> Response:
        """
        Register a top-level domain or subdomain for Apple Pay.

        Raises:
            ApplePayError: If domain_name is missing or the call fails
        """
        request = self._build(ApplePayDomainRequest, domain_name=domain_name)
        return await self._send("POST", self._url(), EmptyData, body=request.to_body())

    async def list_domains(self) -> Response:
        """List the domains registered for Apple Pay."""
        return await self._send("GET", self._url(), ApplePayResponseData)

    async def unregister_domain(self, domain_name: str) -> Response:
        """Unregister a domain. The domain name is sent in the DELETE body."""
        request = self._build(ApplePayDomainRequest, domain_name=domain_name)
        return await self._send("DELETE", self._url(), EmptyData, body=request.to_body())
