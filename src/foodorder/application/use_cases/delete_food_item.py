from __future__ import annotations

from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.common.ids import FoodItemId


class DeleteFoodItem:
    """Removes a menu entry. Orders that copied it are left untouched."""

    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, item_id: FoodItemId) -> bool:
        return self._menu_repository.remove(item_id)
