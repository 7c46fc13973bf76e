from __future__ import annotations

from fastapi import APIRouter, Depends

from foodorder.api.dependencies import get_stores
from foodorder.application.dto.responses import MenuListResponse, OrderListResponse, OrderResponse
from foodorder.application.mappers.menu_mapper import to_menu_list_response
from foodorder.application.mappers.order_mapper import to_order_list_response, to_order_response
from foodorder.application.use_cases.get_menu import GetMenu
from foodorder.application.use_cases.get_order import GetOrder
from foodorder.application.use_cases.list_orders import ListOrders
from foodorder.domain.common.ids import OrderId
from foodorder.infrastructure.memory.stores import Stores

router = APIRouter(prefix="/api")


@router.get("/menu", response_model=MenuListResponse)
def get_menu(stores: Stores = Depends(get_stores)) -> MenuListResponse:
    return to_menu_list_response(GetMenu(menu_repository=stores.menu).execute())


@router.get("/orders", response_model=OrderListResponse)
def list_orders(stores: Stores = Depends(get_stores)) -> OrderListResponse:
    return to_order_list_response(ListOrders(order_repository=stores.orders).execute())


@router.get("/orders/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, stores: Stores = Depends(get_stores)) -> OrderResponse:
    order = GetOrder(order_repository=stores.orders).execute(OrderId(order_id))
    return to_order_response(order)
