from __future__ import annotations

from dataclasses import dataclass, field

from foodorder.infrastructure.memory.menu_repo import InMemoryMenuRepository
from foodorder.infrastructure.memory.order_repo import InMemoryOrderRepository
from foodorder.tools.seed import seed_sample_menu


@dataclass(frozen=True)
class Stores:
    """Process-lifetime state shared by every request handler."""

    menu: InMemoryMenuRepository = field(default_factory=InMemoryMenuRepository)
    orders: InMemoryOrderRepository = field(default_factory=InMemoryOrderRepository)


def build_stores(seed: bool = True) -> Stores:
    stores = Stores()
    if seed:
        seed_sample_menu(stores.menu)
    return stores
