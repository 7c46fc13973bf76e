from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from foodorder.api.dependencies import get_stores
from foodorder.api.templating import templates
from foodorder.infrastructure.memory.stores import Stores

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request, stores: Stores = Depends(get_stores)) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "port": request.app.state.port,
            "menu_count": stores.menu.count(),
            "order_count": stores.orders.count(),
        },
    )
