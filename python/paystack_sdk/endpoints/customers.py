"""
Location: python/paystack_sdk/endpoints/customers.py

Summary:
    Operations on the /customer resource.
"""

from typing import Optional

from ..exceptions import CustomerError
from ..models.customer import CreateCustomerRequest, CustomerResponseData
from ..response import Response
from .base import EndpointGroup


class CustomersEndpoints(EndpointGroup):
    """Endpoint group for customers."""

    path = "customer"
    error_class = CustomerError

    async def create_customer(self, create_customer_request: CreateCustomerRequest) -> Response:
        """Create a customer on the integration."""
        return await self._send(
            "POST",
            self._url(),
            CustomerResponseData,
            body=create_customer_request.to_body(),
        )

    async def list_customers(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
    ) -> Response:
        """List customers, 50 per page starting at page 1 unless given."""
        query = [
            ("perPage", str(per_page if per_page is not None else 50)),
            ("page", str(page if page is not None else 1)),
        ]
        return await self._send(
            "GET", self._url(), list[CustomerResponseData], query=query
        )

    async def fetch_customer(self, email_or_code: str) -> Response:
        """Get the details of a customer by email or code."""
        return await self._send("GET", self._url(email_or_code), CustomerResponseData)
