"""Application service: Update Order Status use case.

Standard orders accept any known status; the aggregate stamps the
printing/shipping/delivery dates on first entry.
"""

from __future__ import annotations

import logging
from datetime import datetime

from linkit.application.dto import OrderDTO
from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.model.order import OrderStatus
from linkit.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: int,
        new_status: str,
        actor: Actor,
        now: datetime | None = None,
    ) -> OrderDTO:
        actor.require_admin()
        status = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.update_status(status, now)
        self._order_repo.save(order)

        logger.info(
            "Order status updated",
            extra={
                "order_id": order_id,
                "from_status": previous.value,
                "to_status": status.value,
                "actor": actor.id,
            },
        )
        return OrderDTO.from_order(order, message=status.customer_message)
