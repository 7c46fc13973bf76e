from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from foodorder.api.dependencies import get_stores
from foodorder.api.form_codec import parse_form, split_values
from foodorder.api.params import require_int
from foodorder.api.templating import templates
from foodorder.application.dto.requests import PlaceOrderLineRequest, PlaceOrderRequest
from foodorder.application.use_cases.delete_order import DeleteOrder
from foodorder.application.use_cases.get_menu import GetMenu
from foodorder.application.use_cases.list_orders import ListOrders
from foodorder.application.use_cases.place_order import NoItemsSelectedError, PlaceOrder
from foodorder.application.use_cases.update_order_status import UpdateOrderStatus
from foodorder.domain.common.ids import OrderId
from foodorder.infrastructure.memory.stores import Stores

logger = logging.getLogger(__name__)

router = APIRouter()


def _back_to_orders() -> RedirectResponse:
    return RedirectResponse(url="/orders", status_code=status.HTTP_303_SEE_OTHER)


def _requested_lines(form: dict[str, str]) -> list[PlaceOrderLineRequest]:
    """Pairs each checked ``foodId`` with its ``quantity_<id>`` field.

    Lines whose id or quantity is not an integer are dropped here; the
    use case drops the ones that do not resolve to an orderable item.
    """
    lines: list[PlaceOrderLineRequest] = []
    for raw_food_id in split_values(form.get("foodId")):
        try:
            food_id = int(raw_food_id)
            quantity = int(form.get(f"quantity_{food_id}", "").strip())
        except ValueError:
            continue
        lines.append(PlaceOrderLineRequest(food_id=food_id, quantity=quantity))
    return lines


@router.get("/orders", response_class=HTMLResponse)
def orders_page(request: Request, stores: Stores = Depends(get_stores)) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "orders.html",
        {
            "orders": ListOrders(order_repository=stores.orders).execute(),
            "orderable_items": GetMenu(menu_repository=stores.menu).execute(available_only=True),
        },
    )


@router.post("/orders/place")
async def place_order(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    form = parse_form((await request.body()).decode("utf-8", errors="replace"))
    request_dto = PlaceOrderRequest(
        customer_name=form.get("customerName", ""),
        customer_address=form.get("customerAddress", ""),
        customer_phone=form.get("customerPhone", ""),
        lines=_requested_lines(form),
    )
    use_case = PlaceOrder(menu_repository=stores.menu, order_repository=stores.orders)
    try:
        use_case.execute(request_dto)
    except NoItemsSelectedError:
        logger.info("order_rejected_no_items")
    return _back_to_orders()


@router.get("/orders/update")
def update_order(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    params = parse_form(request.url.query)
    order_id = OrderId(require_int(params, "id"))
    UpdateOrderStatus(order_repository=stores.orders).execute(
        order_id=order_id,
        status=params.get("status", ""),
    )
    return _back_to_orders()


@router.get("/orders/delete")
def delete_order(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    params = parse_form(request.url.query)
    DeleteOrder(order_repository=stores.orders).execute(OrderId(require_int(params, "id")))
    return _back_to_orders()
