"""
Location: python/paystack_sdk/endpoints/plans.py

Summary:
    Operations on the /plan resource used for recurring subscriptions.
"""

from typing import Optional

from ..exceptions import PlanError
from ..models.plan import PlanRequest, PlanResponseData
from ..response import EmptyData, Response
from ..types import Interval
from .base import EndpointGroup


class PlansEndpoints(EndpointGroup):
    """Endpoint group for plans."""

    path = "plan"
    error_class = PlanError

    async def create_plan(self, plan_request: PlanRequest) -> Response:
        """Create a plan on the integration."""
        return await self._send(
            "POST", self._url(), PlanResponseData, body=plan_request.to_body()
        )

    async def list_plans(
        self,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        status: Optional[str] = None,
        interval: Optional[Interval] = None,
        amount: Optional[int] = None,
    ) -> Response:
        """
        List plans available on the integration.

        Args:
            per_page: Records per page (default 50)
            page: Page to retrieve (default 1)
            status: Only plans with this status
            interval: Only plans with this interval
            amount: Only plans with this amount, in the subunit of the currency

        Returns:
            Response[list[PlanResponseData]]
        """
        query = [
            ("perPage", str(per_page if per_page is not None else 50)),
            ("page", str(page if page is not None else 1)),
        ]
        if status is not None:
            query.append(("status", status))
        if interval is not None:
            query.append(("interval", interval.value))
        if amount is not None:
            query.append(("amount", str(amount)))

        return await self._send("GET", self._url(), list[PlanResponseData], query=query)

    async def fetch_plan(self, id_or_code: str) -> Response:
        """Get the details of a plan by id or code."""
        return await self._send("GET", self._url(id_or_code), PlanResponseData)

    async def update_plan(self, id_or_code: str, plan_request: PlanRequest) -> Response:
        """Update a plan's details. Paystack returns no data on success."""
        return await self._send(
            "PUT", self._url(id_or_code), EmptyData, body=plan_request.to_body()
        )
