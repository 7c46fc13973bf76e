from __future__ import annotations

import logging

from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.common.ids import FoodItemId

logger = logging.getLogger(__name__)


class UpdateFoodAvailability:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, item_id: FoodItemId, available: bool) -> bool:
        updated = self._menu_repository.set_availability(item_id, available)
        if not updated:
            logger.info("food_item_not_found", extra={"food_item_id": item_id})
        return updated
