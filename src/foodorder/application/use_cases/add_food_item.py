from __future__ import annotations

import logging

from foodorder.application.dto.requests import AddFoodItemRequest
from foodorder.application.metrics.order_lifecycle import record_menu_item_added
from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.common.money import Money
from foodorder.domain.menu.entities import FoodItem

logger = logging.getLogger(__name__)


class AddFoodItem:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, request_dto: AddFoodItemRequest) -> FoodItem:
        item = FoodItem(
            item_id=self._menu_repository.next_id(),
            name=request_dto.name,
            description=request_dto.description,
            category=request_dto.category,
            price=Money.from_decimal(request_dto.price),
        )
        self._menu_repository.add(item)
        record_menu_item_added()
        logger.info("food_item_added", extra={"food_item_id": item.item_id})
        return item
