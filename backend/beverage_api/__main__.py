"""
Beverage API: Command-line entry point.

    python -m beverage_api

Starts uvicorn on the host and port from Settings (BACKEND_HOST / BACKEND_PORT).
"""

import uvicorn

from beverage_api.config import settings


def main() -> None:
    uvicorn.run(
        "beverage_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
