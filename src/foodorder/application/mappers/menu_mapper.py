from __future__ import annotations

from foodorder.application.dto.responses import FoodItemResponse, MenuListResponse, MoneyResponse
from foodorder.domain.common.money import Money
from foodorder.domain.menu.entities import FoodItem


def to_money_response(money: Money) -> MoneyResponse:
    return MoneyResponse(amountCents=money.amount_cents, currency=money.currency)


def to_food_item_response(item: FoodItem) -> FoodItemResponse:
    return FoodItemResponse(
        itemId=int(item.item_id),
        name=item.name,
        description=item.description,
        category=item.category,
        price=to_money_response(item.price),
        available=item.available,
    )


def to_menu_list_response(items: list[FoodItem]) -> MenuListResponse:
    return MenuListResponse(items=[to_food_item_response(item) for item in items])
