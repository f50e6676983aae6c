"""
Location: python/paystack_sdk/client.py

Summary:
    Main PaystackClient class for the paystack-sdk. Bundles one endpoint
    group per Paystack resource around a single shared transport.

Usage:
    The primary entry point for using the SDK. Create a PaystackClient
    with your secret key, then call the operations of its endpoint
    groups. Every group shares the same HttpClient, so all calls reuse
    one connection pool.

Example:
    from paystack_sdk import PaystackClient
    from paystack_sdk.models import TransactionRequest

    async with PaystackClient("sk_test_...") as client:
        request = (
            TransactionRequest.builder()
            .amount("10000")
            .email("customer@example.com")
            .build()
        )
        response = await client.transactions.initialize_transaction(request)
        print(response.data.authorization_url)
"""

import logging
from typing import Optional

from .config import PaystackSettings
from .endpoints import (
    PAYSTACK_BASE_URL,
    ApplePayEndpoints,
    CustomersEndpoints,
    DedicatedVirtualAccountsEndpoints,
    PlansEndpoints,
    SubaccountsEndpoints,
    TerminalsEndpoints,
    TransactionSplitsEndpoints,
    TransactionsEndpoints,
    VirtualTerminalsEndpoints,
)
from .transport import HttpClient
from .transport_httpx import HttpxClient


logger = logging.getLogger(__name__)


class PaystackClient:
    """
    Paystack API client.

    Attributes:
        base_url: Root URL of the Paystack API
        http: Transport shared by every endpoint group
        transactions: Transactions endpoints
        subaccounts: Subaccounts endpoints
        transaction_splits: Transaction split endpoints
        customers: Customer endpoints
        terminals: Terminal endpoints
        virtual_terminals: Virtual Terminal endpoints
        dedicated_virtual_accounts: Dedicated virtual account endpoints
        plans: Plan endpoints
        apple_pay: Apple Pay domain endpoints
    """

    def __init__(
        self,
        api_key: str,
        http: Optional[HttpClient] = None,
        base_url: str = PAYSTACK_BASE_URL,
        timeout: float = 30.0,
    ):
        """
        Initialize the PaystackClient.

        Args:
            api_key: Paystack secret key
            http: Optional transport. When given, the caller keeps
                ownership and close() leaves it open.
            base_url: Root URL of the API (trailing slash removed)
            timeout: Request timeout in seconds for the default transport
        """
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self.http: HttpClient = http if http is not None else HttpxClient(timeout=timeout)

        self.transactions = TransactionsEndpoints(api_key, self.http, self.base_url)
        self.subaccounts = SubaccountsEndpoints(api_key, self.http, self.base_url)
        self.transaction_splits = TransactionSplitsEndpoints(api_key, self.http, self.base_url)
        self.customers = CustomersEndpoints(api_key, self.http, self.base_url)
        self.terminals = TerminalsEndpoints(api_key, self.http, self.base_url)
        self.virtual_terminals = VirtualTerminalsEndpoints(api_key, self.http, self.base_url)
        self.dedicated_virtual_accounts = DedicatedVirtualAccountsEndpoints(
            api_key, self.http, self.base_url
        )
        self.plans = PlansEndpoints(api_key, self.http, self.base_url)
        self.apple_pay = ApplePayEndpoints(api_key, self.http, self.base_url)

        logger.debug("Created PaystackClient for %s", self.base_url)

    @classmethod
    def from_settings(
        cls,
        settings: PaystackSettings,
        http: Optional[HttpClient] = None,
    ) -> "PaystackClient":
        """Build a client from loaded PaystackSettings."""
        return cls(
            settings.api_key,
            http=http,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @classmethod
    def from_env(cls, http: Optional[HttpClient] = None) -> "PaystackClient":
        """
        Build a client from PAYSTACK_* environment variables (or .env).

        Raises:
            pydantic.ValidationError: If PAYSTACK_API_KEY is not set
        """
        return cls.from_settings(PaystackSettings(), http=http)

    def __repr__(self) -> str:
        return f"PaystackClient(base_url={self.base_url!r})"

    async def close(self) -> None:
        """
        Close the transport and release resources.

        A transport passed in by the caller is left open.
        """
        if self._owns_http:
            await self.http.close()

    async def __aenter__(self) -> "PaystackClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context manager and close resources."""
        await self.close()
