from __future__ import annotations

from dataclasses import dataclass, replace

from foodorder.domain.common.ids import FoodItemId
from foodorder.domain.common.money import Money


@dataclass(frozen=True)
class FoodItem:
    item_id: FoodItemId
    name: str
    description: str
    category: str
    price: Money
    available: bool = True

    def __post_init__(self) -> None:
        if self.item_id < 1:
            raise ValueError("item_id must be >= 1")
        if not self.name.strip():
            raise ValueError("name must be non-empty")

    def with_availability(self, available: bool) -> FoodItem:
        return replace(self, available=available)
