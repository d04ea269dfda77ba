# Middleware package init
"""
Beverage API: Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → Route Handler

    1. CORS: FastAPI's CORSMiddleware answers preflight requests first
    2. Request ID: Generate correlation ID for logging and error bodies
    3. Logging: Log request details with the generated request ID

    Responses travel back through the same chain in reverse, which is where
    the X-Request-ID header is added and the request duration is measured.
"""
