"""
Beverage API: Pet Schemas
=========================

What:  Shape of the POST /api/pets body.

PetCreate is published in the OpenAPI document as the expected request body,
but the route does not enforce it: the endpoint is a no-op (see routes/pets.py).
"""

from typing import Literal

from pydantic import BaseModel, Field


class PetCreate(BaseModel):
    name: str = Field(description="Pet name")
    kind: Literal["cat", "dog"] = Field(description="Pet species: cat or dog")
