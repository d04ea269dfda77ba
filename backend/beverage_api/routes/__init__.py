# Routes package init
"""
Beverage API: API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - greetings.py:  GET  /api/hello
                     GET  /api/good-bye
    - pets.py:       POST /api/pets               (no-op, 204)
    - beverages.py:  POST /api/beverages/{drink}  (validated order, 201)
    - health.py:     GET  /health

Design Principle:
    Routes are THIN: they declare the request contract, call a service and
    set the status code. Business logic lives in services/.
"""
