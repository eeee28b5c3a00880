"""Application service: Update Custom Order Status use case.

Admins walk a custom order along the quote-negotiation graph; an
illegal edge is rejected with the allowed alternatives.
"""

from __future__ import annotations

import logging
from datetime import datetime

from linkit.application.dto import CustomOrderDTO
from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.custom_order_repository import CustomOrderRepository

logger = logging.getLogger(__name__)


class UpdateCustomOrderStatusHandler:

    def __init__(self, custom_order_repo: CustomOrderRepository) -> None:
        self._custom_order_repo = custom_order_repo

    def handle(
        self,
        order_id: int,
        new_status: str,
        actor: Actor,
        admin_notes: str | None = None,
        now: datetime | None = None,
    ) -> CustomOrderDTO:
        actor.require_admin()

        order = self._custom_order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")

        previous = order.status
        order.transition_to(new_status, actor_id=actor.id, now=now)
        if admin_notes is not None:
            order.update_admin_notes(admin_notes)
        self._custom_order_repo.save(order)

        logger.info(
            "Custom order status updated",
            extra={
                "custom_order_id": order_id,
                "from_status": previous.value,
                "to_status": order.status.value,
                "actor": actor.id,
            },
        )
        return CustomOrderDTO.from_order(
            order, message="Custom order status updated successfully"
        )
