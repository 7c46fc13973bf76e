from __future__ import annotations

from foodorder.application.ports.repositories import OrderRepository
from foodorder.domain.common.ids import OrderId


class DeleteOrder:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId) -> bool:
        return self._order_repository.remove(order_id)
