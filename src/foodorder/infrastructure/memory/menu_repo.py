from __future__ import annotations

import itertools
import threading

from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.common.ids import FoodItemId
from foodorder.domain.menu.entities import FoodItem


class InMemoryMenuRepository(MenuRepository):
    def __init__(self) -> None:
        self._items: dict[FoodItemId, FoodItem] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> FoodItemId:
        with self._lock:
            return FoodItemId(next(self._ids))

    def add(self, item: FoodItem) -> None:
        with self._lock:
            if item.item_id in self._items:
                raise ValueError(f"food item {item.item_id} already exists")
            self._items[item.item_id] = item

    def get(self, item_id: FoodItemId) -> FoodItem | None:
        with self._lock:
            return self._items.get(item_id)

    def list(self) -> list[FoodItem]:
        with self._lock:
            return [self._items[item_id] for item_id in sorted(self._items)]

    def set_availability(self, item_id: FoodItemId, available: bool) -> bool:
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return False
            self._items[item_id] = item.with_availability(available)
            return True

    def remove(self, item_id: FoodItemId) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._items)
