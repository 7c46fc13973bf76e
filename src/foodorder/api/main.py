from __future__ import annotations

from fastapi import FastAPI

from foodorder.api.error_handling import register_exception_handlers
from foodorder.api.middleware.request_context import AccessLogMiddleware, RequestIDMiddleware
from foodorder.api.routes.health import router as health_router
from foodorder.api.routes.home import router as home_router
from foodorder.api.routes.json_api import router as json_api_router
from foodorder.api.routes.menu import router as menu_router
from foodorder.api.routes.metrics import router as metrics_router
from foodorder.api.routes.orders import router as orders_router
from foodorder.infrastructure.memory.stores import Stores, build_stores
from foodorder.infrastructure.observability.logging_config import configure_logging
from foodorder.infrastructure.observability.otel import configure_otel


def create_app(stores: Stores | None = None, port: int | None = None) -> FastAPI:
    """Build the web application around ``stores``.

    When no stores are given a fresh pair seeded with the sample menu is
    created. ``port`` is only used for display on the landing page. Serve it
    directly with ``uvicorn --factory foodorder.api.main:create_app``.
    """
    configure_logging()

    app = FastAPI(
        title="Online Food Ordering",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.stores = stores if stores is not None else build_stores()
    app.state.port = port

    register_exception_handlers(app)
    app.include_router(home_router)
    app.include_router(menu_router)
    app.include_router(orders_router)
    app.include_router(json_api_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    configure_otel(app)
    return app

