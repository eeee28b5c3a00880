"""Application service: Create Custom Order use case.

A bulk request enters as ``pending`` with no price; the estimated
delivery date reflects the quantity and the requested urgency.
"""

from __future__ import annotations

import logging
from datetime import datetime

from linkit.application.dto import CustomOrderDTO, CustomOrderRequest
from linkit.domain.exceptions import ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.custom_order import CustomOrder
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.service.delivery_estimate import (
    DeliveryPolicy,
    Urgency,
    estimate_custom_order_delivery,
)

logger = logging.getLogger(__name__)


class CreateCustomOrderHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        delivery_policy: DeliveryPolicy | None = None,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._delivery_policy = delivery_policy or DeliveryPolicy()

    def handle(
        self, request: CustomOrderRequest, actor: Actor, now: datetime | None = None
    ) -> CustomOrderDTO:
        if request.company_info is None or request.order_details is None:
            raise ValidationError("Company information and order details are required")
        try:
            urgency = Urgency(request.urgency or Urgency.STANDARD.value)
        except ValueError:
            raise ValidationError(
                "Urgency must be one of: "
                + ", ".join(u.value for u in Urgency)
            ) from None

        order = CustomOrder.create(
            request.company_info, request.order_details, created_by=actor.id, now=now
        )
        order.estimated_delivery = estimate_custom_order_delivery(
            order.created_at, order.employee_count, self._delivery_policy, urgency
        )
        self._custom_order_repo.save(order)

        logger.info(
            "Custom order created",
            extra={
                "custom_order_id": order.id,
                "employee_count": order.employee_count,
                "created_by": actor.id,
            },
        )
        return CustomOrderDTO.from_order(
            order,
            message="Custom order submitted successfully. We will contact you soon!",
        )
