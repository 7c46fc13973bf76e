from __future__ import annotations

from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.menu.entities import FoodItem


class GetMenu:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, available_only: bool = False) -> list[FoodItem]:
        items = self._menu_repository.list()
        if available_only:
            return [item for item in items if item.available]
        return items
