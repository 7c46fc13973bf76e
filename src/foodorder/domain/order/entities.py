from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from foodorder.domain.common.ids import FoodItemId, OrderId
from foodorder.domain.common.money import Money


class OrderStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> OrderStatus:
        normalized = value.strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        raise UnknownOrderStatusError(f"unknown order status: {value!r}")


@dataclass(frozen=True)
class OrderItem:
    """A menu item as it was priced when the order was placed.

    ``food_id`` is a plain value, not a live link: the menu entry may later be
    changed or deleted without affecting the order.
    """

    food_id: FoodItemId
    food_name: str
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("quantity must be >= 1")

    @property
    def line_total(self) -> Money:
        return self.unit_price.times(self.quantity)


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    customer_name: str
    customer_address: str
    customer_phone: str
    status: OrderStatus
    items: list[OrderItem]
    total: Money
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("order must contain at least one item")
        expected_total = sum(item.line_total.amount_cents for item in self.items)
        if self.total.amount_cents != expected_total:
            raise ValueError("order total must equal sum of line totals")

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)


def create_pending_order(
    order_id: OrderId,
    customer_name: str,
    customer_address: str,
    customer_phone: str,
    items: list[OrderItem],
    now: datetime,
) -> Order:
    if not items:
        raise ValueError("order must contain at least one item")

    total = Money(
        amount_cents=sum(item.line_total.amount_cents for item in items),
        currency=items[0].unit_price.currency,
    )
    return Order(
        order_id=order_id,
        customer_name=customer_name,
        customer_address=customer_address,
        customer_phone=customer_phone,
        status=OrderStatus.PENDING,
        items=list(items),
        total=total,
        created_at=now,
    )


class UnknownOrderStatusError(ValueError):
    pass
