from __future__ import annotations

import itertools
import threading

from foodorder.application.ports.repositories import OrderRepository
from foodorder.domain.common.ids import OrderId
from foodorder.domain.order.entities import Order, OrderStatus


class InMemoryOrderRepository(OrderRepository):
    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> OrderId:
        with self._lock:
            return OrderId(next(self._ids))

    def add(self, order: Order) -> None:
        with self._lock:
            if order.order_id in self._orders:
                raise ValueError(f"order {order.order_id} already exists")
            self._orders[order.order_id] = order

    def get(self, order_id: OrderId) -> Order | None:
        with self._lock:
            return self._orders.get(order_id)

    def list(self) -> list[Order]:
        with self._lock:
            return [self._orders[order_id] for order_id in sorted(self._orders)]

    def update_status(self, order_id: OrderId, status: OrderStatus) -> Order | None:
        """Swap in a copy of the order carrying ``status``; returns the previous order."""
        with self._lock:
            current = self._orders.get(order_id)
            if current is None:
                return None
            self._orders[order_id] = current.with_status(status)
            return current

    def remove(self, order_id: OrderId) -> bool:
        with self._lock:
            return self._orders.pop(order_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._orders)
