from __future__ import annotations

from foodorder.application.ports.repositories import OrderRepository
from foodorder.domain.order.entities import Order


class ListOrders:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self) -> list[Order]:
        return self._order_repository.list()
