from __future__ import annotations

from prometheus_client import Counter

from foodorder.domain.order.entities import OrderStatus

ORDERS_PLACED_TOTAL = Counter(
    "foodorder_orders_placed_total",
    "Total number of orders placed.",
)

ORDER_PLACEMENT_REJECTED_TOTAL = Counter(
    "foodorder_order_placement_rejected_total",
    "Total number of order placements rejected before anything was stored.",
    ["reason"],
)

ORDER_STATUS_UPDATES_TOTAL = Counter(
    "foodorder_order_status_updates_total",
    "Total number of order status updates by target status.",
    ["status"],
)

MENU_ITEMS_ADDED_TOTAL = Counter(
    "foodorder_menu_items_added_total",
    "Total number of food items added to the menu.",
)


def record_order_placed() -> None:
    ORDERS_PLACED_TOTAL.inc()


def record_order_rejected(reason: str) -> None:
    ORDER_PLACEMENT_REJECTED_TOTAL.labels(reason=reason).inc()


def record_status_update(status: OrderStatus) -> None:
    ORDER_STATUS_UPDATES_TOTAL.labels(status=status.value).inc()


def record_menu_item_added() -> None:
    MENU_ITEMS_ADDED_TOTAL.inc()
