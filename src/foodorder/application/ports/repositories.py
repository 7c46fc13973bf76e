from __future__ import annotations

from typing import Protocol

from foodorder.domain.common.ids import FoodItemId, OrderId
from foodorder.domain.menu.entities import FoodItem
from foodorder.domain.order.entities import Order, OrderStatus


class MenuRepository(Protocol):
    def next_id(self) -> FoodItemId: ...

    def add(self, item: FoodItem) -> None: ...

    def get(self, item_id: FoodItemId) -> FoodItem | None: ...

    def list(self) -> list[FoodItem]: ...

    def set_availability(self, item_id: FoodItemId, available: bool) -> bool: ...

    def remove(self, item_id: FoodItemId) -> bool: ...

    def count(self) -> int: ...


class OrderRepository(Protocol):
    def next_id(self) -> OrderId: ...

    def add(self, order: Order) -> None: ...

    def get(self, order_id: OrderId) -> Order | None: ...

    def list(self) -> list[Order]: ...

    def update_status(self, order_id: OrderId, status: OrderStatus) -> Order | None: ...

    def remove(self, order_id: OrderId) -> bool: ...

    def count(self) -> int: ...
