from __future__ import annotations

from typing import NewType

FoodItemId = NewType("FoodItemId", int)
OrderId = NewType("OrderId", int)
