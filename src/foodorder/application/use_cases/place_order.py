from __future__ import annotations

import logging
from datetime import datetime, timezone

from foodorder.application.dto.requests import PlaceOrderRequest
from foodorder.application.metrics.order_lifecycle import (
    record_order_placed,
    record_order_rejected,
)
from foodorder.application.ports.repositories import MenuRepository, OrderRepository
from foodorder.domain.common.ids import FoodItemId
from foodorder.domain.order.entities import Order, OrderItem, create_pending_order

logger = logging.getLogger(__name__)


class NoItemsSelectedError(Exception):
    pass


class PlaceOrder:
    def __init__(
        self,
        menu_repository: MenuRepository,
        order_repository: OrderRepository,
    ) -> None:
        self._menu_repository = menu_repository
        self._order_repository = order_repository

    def execute(self, request_dto: PlaceOrderRequest) -> Order:
        items: list[OrderItem] = []
        for request_line in request_dto.lines:
            if request_line.quantity < 1:
                continue

            # Snapshot read; an item deleted concurrently just drops its line.
            food_item = self._menu_repository.get(FoodItemId(request_line.food_id))
            if food_item is None or not food_item.available:
                continue

            items.append(
                OrderItem(
                    food_id=food_item.item_id,
                    food_name=food_item.name,
                    quantity=request_line.quantity,
                    unit_price=food_item.price,
                )
            )

        if not items:
            record_order_rejected("no_items_selected")
            raise NoItemsSelectedError("no available menu items were selected")

        order = create_pending_order(
            order_id=self._order_repository.next_id(),
            customer_name=request_dto.customer_name,
            customer_address=request_dto.customer_address,
            customer_phone=request_dto.customer_phone,
            items=items,
            now=datetime.now(timezone.utc),
        )
        self._order_repository.add(order)
        record_order_placed()
        logger.info("order_placed", extra={"order_id": order.order_id})
        return order
