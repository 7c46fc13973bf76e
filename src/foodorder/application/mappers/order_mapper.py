from __future__ import annotations

from foodorder.application.dto.responses import (
    OrderItemResponse,
    OrderListResponse,
    OrderResponse,
)
from foodorder.application.mappers.menu_mapper import to_money_response
from foodorder.domain.order.entities import Order


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        orderId=int(order.order_id),
        customerName=order.customer_name,
        customerAddress=order.customer_address,
        customerPhone=order.customer_phone,
        status=order.status.value,
        items=[
            OrderItemResponse(
                foodId=int(item.food_id),
                foodName=item.food_name,
                quantity=item.quantity,
                unitPrice=to_money_response(item.unit_price),
                lineTotal=to_money_response(item.line_total),
            )
            for item in order.items
        ],
        total=to_money_response(order.total),
        createdAt=order.created_at,
    )


def to_order_list_response(orders: list[Order]) -> OrderListResponse:
    return OrderListResponse(orders=[to_order_response(order) for order in orders])
