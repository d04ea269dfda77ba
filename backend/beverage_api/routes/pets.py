"""
Beverage API: Pet Route Handler
===============================

What:  POST /api/pets, a placeholder endpoint.
How:   Accepts any JSON body (or none) and answers 204 No Content.

Behavior contract:
    - The body is NOT validated against PetCreate. The schema only documents
      the expected shape in the OpenAPI description.
    - Nothing is created or stored, and no response body is sent.
    - A body that is not valid JSON is still rejected (400) by the framework's
      JSON decoding, before this handler runs.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Response

from beverage_api.schemas.pet import PetCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Pets"])


@router.post(
    "/pets",
    status_code=204,
    response_class=Response,
    summary="Submit a pet (no-op)",
    description=(
        "Accepts a pet description shaped as {name, kind: cat|dog}. "
        "The payload is not validated or stored; the endpoint always answers 204."
    ),
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": PetCreate.model_json_schema()}},
        }
    },
)
async def create_pet(pet: Any = Body(default=None)) -> Response:
    """
    Receive a pet payload and do nothing with it.

    The payload is bound and logged at DEBUG only, so clients built against
    this endpoint keep working while pet creation does not exist.
    """
    logger.debug("Pet payload received (%s); pet creation is not implemented", type(pet).__name__)
    return Response(status_code=204)
