"""
Beverage API: Beverage Order Schemas
====================================

What:  Pydantic models for POST /api/beverages/{drink}.
How:   FastAPI validates the path parameter, the query string and the JSON body
       against these models before the route handler runs. A request that does
       not match is rejected with 400 (see exceptions.py); the handler only ever
       receives fully validated values.

Schema contract (JSON Schema equivalent):
    params:  {"type": "object", "properties": {"drink": {"enum": ["tea", "coffee", "chai"]}},
              "required": ["drink"], "additionalProperties": false}
    query:   {"type": "object", "properties": {"milk": {"enum": ["yes", "no"]},
                                               "sugar": {"enum": ["yes", "no"]}},
              "additionalProperties": false}
    body:    {"type": "object", "properties": {"kind": {"type": "string"}},
              "required": ["kind"], "additionalProperties": false}

`additionalProperties: false` is expressed as `extra="forbid"` on each model.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# Allowed values for the {drink} path segment
Drink = Literal["tea", "coffee", "chai"]

# Allowed values for the milk / sugar query parameters
YesNo = Literal["yes", "no"]


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BeverageParams(BaseModel):
    """Path parameters of the beverage order route."""

    drink: Drink = Field(description="Beverage to order: tea, coffee or chai")

    model_config = {"extra": "forbid"}


class BeverageQuery(BaseModel):
    """
    What:  Query string of the beverage order route.
    How:   Both keys are optional. When present each must be exactly "yes" or "no";
           any other key in the query string is rejected.
    """

    milk: Optional[YesNo] = Field(default=None, description="Add milk: yes or no")
    sugar: Optional[YesNo] = Field(default=None, description="Add sugar: yes or no")

    model_config = {"extra": "forbid"}


class BeverageOrder(BaseModel):
    """JSON body of the beverage order route."""

    kind: str = Field(description="Variety of the drink, e.g. 'green' or 'black'")

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {"examples": [{"kind": "green"}]},
    }


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BeverageOrderResponse(BaseModel):
    """
    What:  Composed beverage order returned with HTTP 201.

    Fields:
        drink: "<kind> <drink>", e.g. "green tea"
        with:  Extras in fixed order, "milk" before "sugar"; empty when none requested

    `with` is a Python keyword, so the attribute is `with_` and the wire name is
    set through the alias. FastAPI serializes response models by alias.
    """

    drink: str = Field(description="Kind and drink, space separated")
    with_: List[str] = Field(
        default_factory=list,
        alias="with",
        description="Requested extras: milk, then sugar",
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{"drink": "black coffee", "with": ["milk", "sugar"]}]},
    }
