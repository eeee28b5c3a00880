"""Application service: Respond To Quote use case (customer side)."""

from __future__ import annotations

import logging
from datetime import datetime

from linkit.application.dto import CustomOrderDTO
from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.custom_order_repository import CustomOrderRepository

logger = logging.getLogger(__name__)


class RespondToQuoteHandler:

    def __init__(self, custom_order_repo: CustomOrderRepository) -> None:
        self._custom_order_repo = custom_order_repo

    def handle(
        self,
        order_id: int,
        approved: bool,
        actor: Actor,
        customer_notes: str = "",
        now: datetime | None = None,
    ) -> CustomOrderDTO:
        order = self._custom_order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")

        order.respond_to_quote(actor, approved, customer_notes, now)
        self._custom_order_repo.save(order)

        logger.info(
            "Quote response recorded",
            extra={
                "custom_order_id": order_id,
                "approved": approved,
                "actor": actor.id,
            },
        )
        message = (
            "Quote approved successfully" if approved else "Quote response recorded"
        )
        return CustomOrderDTO.from_order(order, message=message)
