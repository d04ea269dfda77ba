"""
Beverage API: Health Check Route
================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The service has no downstream dependencies, so a process that can answer
       this request is healthy. Reports version and uptime.
Who:   Called by container health checks, load balancers, and monitoring systems.
"""

import time

from fastapi import APIRouter

from beverage_api import __version__
from beverage_api.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])

# Process start, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status, version and uptime of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
