from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodorder.domain.common.ids import FoodItemId
from foodorder.domain.common.money import Money
from foodorder.domain.menu.entities import FoodItem


def test_money_invariants() -> None:
    with pytest.raises(ValueError):
        Money(amount_cents=-1)
    with pytest.raises(ValueError):
        Money(amount_cents=100, currency="usd")


def test_money_from_decimal_rounds_half_up_to_cents() -> None:
    assert Money.from_decimal(Decimal("12.99")).amount_cents == 1299
    assert Money.from_decimal(Decimal("3.5")).amount_cents == 350
    assert Money.from_decimal(Decimal("0.125")).amount_cents == 13
    assert Money(amount_cents=700).format() == "7.00"
    assert Money(amount_cents=3897).as_decimal() == Decimal("38.97")


def test_food_item_name_must_be_non_empty() -> None:
    with pytest.raises(ValueError):
        FoodItem(
            item_id=FoodItemId(1),
            name="  ",
            description="x",
            category="x",
            price=Money(amount_cents=100),
        )


def test_with_availability_returns_copy() -> None:
    item = FoodItem(
        item_id=FoodItemId(1),
        name="Taco",
        description="x",
        category="Mexican",
        price=Money(amount_cents=350),
    )
    disabled = item.with_availability(False)
    assert item.available is True
    assert disabled.available is False
    assert disabled.item_id == item.item_id
