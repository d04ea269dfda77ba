"""
Beverage API: Beverage Order Route Handler
==========================================

What:  Handles POST /api/beverages/{drink}.
How:   FastAPI validates path, query and body against the schemas in
       schemas/beverage.py, then the handler hands the validated models to
       BeverageService and returns its result with 201 Created.

Request Flow:
    1. Path {drink} must be tea, coffee or chai
    2. Query may contain only milk and sugar, each "yes" or "no"
    3. Query keys may not repeat (?milk=yes&milk=no is rejected)
    4. Body must be {"kind": <string>} with no other keys
    5. Any mismatch → 400 validation_error (handler is never called)
    6. Otherwise → 201 {"drink": "<kind> <drink>", "with": [...]}

Example:
    POST /api/beverages/coffee?sugar=yes&milk=yes  {"kind": "black"}
    → 201 {"drink": "black coffee", "with": ["milk", "sugar"]}
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request

from beverage_api.exceptions import ValidationError
from beverage_api.schemas.beverage import (
    BeverageOrder,
    BeverageOrderResponse,
    BeverageParams,
    BeverageQuery,
    Drink,
)
from beverage_api.schemas.common import ErrorResponse
from beverage_api.services.beverage_service import beverage_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Beverages"])


def reject_repeated_query_keys(request: Request) -> None:
    """
    Each query key may appear at most once.

    `?milk=yes&milk=no` is a list of values, not "yes" or "no", so it is
    rejected like any other invalid value instead of letting one occurrence win.
    """
    params = request.query_params
    repeated = sorted({key for key in params.keys() if len(params.getlist(key)) > 1})
    if repeated:
        raise ValidationError.from_pydantic_errors(
            {
                "loc": ("query", key),
                "msg": "Query parameter must be given at most once",
                "type": "multiple_values",
            }
            for key in repeated
        )


@router.post(
    "/beverages/{drink}",
    status_code=201,
    response_model=BeverageOrderResponse,
    responses={
        201: {"description": "Order composed", "model": BeverageOrderResponse},
        400: {"description": "Path, query or body failed validation", "model": ErrorResponse},
    },
    dependencies=[Depends(reject_repeated_query_keys)],
    summary="Order a beverage",
    description=(
        "Order tea, coffee or chai. The optional milk and sugar query parameters "
        "accept 'yes' or 'no'; the body names the kind of drink. Extras are always "
        "listed milk first, then sugar."
    ),
)
async def order_beverage(
    drink: Annotated[Drink, Path(description="Beverage to order: tea, coffee or chai")],
    query: Annotated[BeverageQuery, Query()],
    order: BeverageOrder,
) -> BeverageOrderResponse:
    """Compose a beverage order from validated input."""
    result = beverage_service.prepare_order(
        params=BeverageParams(drink=drink),
        query=query,
        order=order,
    )

    logger.info("Beverage ordered: %s with %s", result.drink, result.with_ or "nothing")

    return result
