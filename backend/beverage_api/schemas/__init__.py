# Schemas package init
"""
Beverage API: Pydantic Schemas Package
======================================

What:  API contracts for every route.

Schema Inventory:
    - beverage.py: BeverageParams, BeverageQuery, BeverageOrder, BeverageOrderResponse
    - pet.py:      PetCreate (documentation only)
    - common.py:   HelloResponse, GoodbyeResponse, ErrorResponse, HealthResponse
"""
