from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodorder.application.dto.requests import PlaceOrderLineRequest, PlaceOrderRequest
from foodorder.application.use_cases.delete_food_item import DeleteFoodItem
from foodorder.application.use_cases.place_order import NoItemsSelectedError, PlaceOrder
from foodorder.domain.common.ids import FoodItemId
from foodorder.infrastructure.memory.stores import Stores, build_stores


def _request(*lines: tuple[int, int]) -> PlaceOrderRequest:
    return PlaceOrderRequest(
        customer_name="Ada",
        customer_address="1 Main St",
        customer_phone="555-0100",
        lines=[PlaceOrderLineRequest(food_id=food_id, quantity=qty) for food_id, qty in lines],
    )


def _use_case(stores: Stores) -> PlaceOrder:
    return PlaceOrder(menu_repository=stores.menu, order_repository=stores.orders)


def test_place_order_single_line_total() -> None:
    stores = build_stores()
    order = _use_case(stores).execute(_request((1, 3)))

    assert order.total.format() == "38.97"
    assert len(order.items) == 1
    assert order.items[0].food_name == "Pizza Margherita"
    assert order.items[0].line_total.format() == "38.97"
    assert stores.orders.get(order.order_id) == order


def test_place_order_drops_missing_unavailable_and_non_positive_lines() -> None:
    stores = build_stores()
    stores.menu.set_availability(FoodItemId(2), False)

    order = _use_case(stores).execute(_request((2, 1), (999, 1), (3, 0), (4, -2), (6, 2)))

    assert [item.food_id for item in order.items] == [6]
    assert order.total.amount_cents == 1198


def test_place_order_with_nothing_orderable_stores_nothing() -> None:
    stores = build_stores()
    stores.menu.set_availability(FoodItemId(1), False)

    with pytest.raises(NoItemsSelectedError):
        _use_case(stores).execute(_request((1, 2), (42, 1)))
    with pytest.raises(NoItemsSelectedError):
        _use_case(stores).execute(_request())

    assert stores.orders.count() == 0
    order = _use_case(stores).execute(_request((3, 1)))
    assert order.order_id == 1


def test_deleting_menu_item_keeps_copied_order_items() -> None:
    stores = build_stores()
    order = _use_case(stores).execute(_request((5, 2)))

    assert DeleteFoodItem(menu_repository=stores.menu).execute(FoodItemId(5)) is True

    stored = stores.orders.get(order.order_id)
    assert stored is not None
    assert stored.items[0].food_name == "Spaghetti Carbonara"
    assert stored.items[0].unit_price.amount_cents == 1499
    assert stored.total.amount_cents == 2998
