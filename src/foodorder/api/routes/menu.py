from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from foodorder.api.dependencies import get_stores
from foodorder.api.form_codec import parse_form
from foodorder.api.params import parse_bool, require_int
from foodorder.api.templating import templates
from foodorder.application.dto.requests import AddFoodItemRequest
from foodorder.application.use_cases.add_food_item import AddFoodItem
from foodorder.application.use_cases.delete_food_item import DeleteFoodItem
from foodorder.application.use_cases.get_menu import GetMenu
from foodorder.application.use_cases.update_food_availability import UpdateFoodAvailability
from foodorder.domain.common.ids import FoodItemId
from foodorder.infrastructure.memory.stores import Stores

router = APIRouter()


def _back_to_menu() -> RedirectResponse:
    return RedirectResponse(url="/menu", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/menu", response_class=HTMLResponse)
def menu_page(request: Request, stores: Stores = Depends(get_stores)) -> HTMLResponse:
    items = GetMenu(menu_repository=stores.menu).execute()
    return templates.TemplateResponse(request, "menu.html", {"items": items})


@router.post("/menu/add")
async def add_food_item(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    form = parse_form((await request.body()).decode("utf-8", errors="replace"))
    request_dto = AddFoodItemRequest.model_validate(form)
    AddFoodItem(menu_repository=stores.menu).execute(request_dto)
    return _back_to_menu()


@router.get("/menu/update")
def update_food_item(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    params = parse_form(request.url.query)
    item_id = FoodItemId(require_int(params, "id"))
    UpdateFoodAvailability(menu_repository=stores.menu).execute(
        item_id=item_id,
        available=parse_bool(params.get("available")),
    )
    return _back_to_menu()


@router.get("/menu/delete")
def delete_food_item(request: Request, stores: Stores = Depends(get_stores)) -> RedirectResponse:
    params = parse_form(request.url.query)
    DeleteFoodItem(menu_repository=stores.menu).execute(FoodItemId(require_int(params, "id")))
    return _back_to_menu()
