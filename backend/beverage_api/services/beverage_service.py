"""
Beverage API: Beverage Service (Order Composition)
==================================================

What:  Turns a validated beverage order into the response payload.
How:   Pure function of its inputs: no I/O, no shared state, nothing to await.
Who:   Called by the POST /api/beverages/{drink} route handler.

Composition Flow:
    ┌──────────────┐    ┌──────────────────┐    ┌────────────────────────┐
    │ params/query │───▶│  with = [milk?,  │───▶│ {"drink": "kind drink",│
    │ /body models │    │          sugar?] │    │  "with": [...]}        │
    └──────────────┘    └──────────────────┘    └────────────────────────┘

Extras are always listed milk first, then sugar, independent of the order the
client wrote them in the query string.
"""

import logging
from typing import List

from beverage_api.schemas.beverage import (
    BeverageOrder,
    BeverageOrderResponse,
    BeverageParams,
    BeverageQuery,
)

logger = logging.getLogger(__name__)

# Extras in the order they appear in a composed order
EXTRAS = ("milk", "sugar")


class BeverageService:
    """
    Business logic for beverage orders.

    Responsibilities:
        - prepare_order(): Compose the order description and the list of extras

    The inputs are already validated by the route layer, so this method cannot fail.
    """

    def prepare_order(
        self,
        params: BeverageParams,
        query: BeverageQuery,
        order: BeverageOrder,
    ) -> BeverageOrderResponse:
        """
        Compose a beverage order.

        Example:
            params=BeverageParams(drink="coffee"),
            query=BeverageQuery(milk="yes", sugar="yes"),
            order=BeverageOrder(kind="black")
            → {"drink": "black coffee", "with": ["milk", "sugar"]}
        """
        extras = self._requested_extras(query)

        logger.debug(
            "Composing order: drink=%s kind=%s extras=%s",
            params.drink,
            order.kind,
            extras,
        )

        return BeverageOrderResponse(
            drink=f"{order.kind} {params.drink}",
            with_=extras,
        )

    @staticmethod
    def _requested_extras(query: BeverageQuery) -> List[str]:
        """Extras whose query flag is exactly "yes", in EXTRAS order."""
        return [extra for extra in EXTRAS if getattr(query, extra) == "yes"]


# ── Singleton Instance ────────────────────────────────────────────────────
# BeverageService is stateless; one instance serves every request
beverage_service = BeverageService()
