from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


MAX_PRICE = Decimal("99999999.99")


class AddFoodItemRequest(CamelBaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: Decimal = Field(ge=0, le=MAX_PRICE, allow_inf_nan=False)
    category: str = Field(min_length=1)


class PlaceOrderLineRequest(CamelBaseModel):
    food_id: int
    quantity: int


class PlaceOrderRequest(CamelBaseModel):
    customer_name: str = ""
    customer_address: str = ""
    customer_phone: str = ""
    lines: list[PlaceOrderLineRequest] = Field(default_factory=list)
