from __future__ import annotations

from fastapi import Request

from foodorder.infrastructure.memory.stores import Stores


def get_stores(request: Request) -> Stores:
    return request.app.state.stores
