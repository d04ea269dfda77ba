"""
Beverage API: Application Package Initializer
=============================================

What: Marks the `beverage_api` directory as a Python package.
Who:  Imported by uvicorn (`beverage_api.main:app`), pytest, and `python -m beverage_api`.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Order composition
    ├─────────────────────────────────────┤
    │         Schemas (API Contracts)     │  ← Pydantic request/response models
    └─────────────────────────────────────┘

    Routes never contain business rules, and services never see raw HTTP data.
    There is no persistence layer: every request is answered from its own input.
"""

__version__ = "1.0.0"
