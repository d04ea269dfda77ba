"""
Beverage API: Greeting Route Handlers
=====================================

What:  GET /api/hello and GET /api/good-bye.
How:   Fixed payloads; no input, no validation, always 200.
"""

from fastapi import APIRouter

from beverage_api.schemas.common import GoodbyeResponse, HelloResponse

router = APIRouter(prefix="/api", tags=["Greetings"])


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Say hello",
)
async def hello() -> HelloResponse:
    return HelloResponse(hello="World!")


@router.get(
    "/good-bye",
    response_model=GoodbyeResponse,
    summary="Say good bye",
)
async def good_bye() -> GoodbyeResponse:
    return GoodbyeResponse(message="Good Bye Visitor!")
