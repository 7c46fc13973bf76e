from __future__ import annotations

import logging

from foodorder.application.metrics.order_lifecycle import record_status_update
from foodorder.application.ports.repositories import OrderRepository
from foodorder.domain.common.ids import OrderId
from foodorder.domain.order.entities import OrderStatus, UnknownOrderStatusError

logger = logging.getLogger(__name__)


class InvalidOrderStatusError(Exception):
    pass


class UpdateOrderStatus:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId, status: str) -> bool:
        """Returns False when the order does not exist.

        The status is checked before the lookup, so an invalid value is
        rejected even for unknown orders.
        """
        try:
            new_status = OrderStatus.parse(status)
        except UnknownOrderStatusError as exc:
            raise InvalidOrderStatusError(str(exc)) from exc

        previous = self._order_repository.update_status(order_id, new_status)
        if previous is None:
            return False

        record_status_update(new_status)
        logger.info(
            "order_status_updated",
            extra={"order_id": order_id, "status": new_status.value},
        )
        return True
