"""Application service: Set Custom Pricing use case.

Quotes a per-card price for the 10-49 and 100+ tiers.  Once the quote is
persisted the customer is notified through the quote mailer.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from linkit.application.dto import CustomOrderDTO
from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.service.pricing import PricingPolicy
from linkit.domain.service.quote_email import QuoteMailer, build_quote_email

logger = logging.getLogger(__name__)


def _parse_price(raw: Decimal | str) -> Decimal:
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite() or amount <= 0:
        raise ValidationError("Price per card must be a positive number")
    return amount


class SetCustomPricingHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        mailer: QuoteMailer | None = None,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._mailer = mailer
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        order_id: int,
        price_per_card: Decimal | str,
        actor: Actor,
        admin_notes: str | None = None,
        now: datetime | None = None,
    ) -> CustomOrderDTO:
        actor.require_admin()

        order = self._custom_order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")

        price = self._pricing_policy.money(_parse_price(price_per_card))
        order.set_custom_pricing(price, self._pricing_policy, actor.id, now)
        if admin_notes is not None:
            order.update_admin_notes(admin_notes)
        self._custom_order_repo.save(order)

        logger.info(
            "Custom pricing set",
            extra={
                "custom_order_id": order_id,
                "price_per_card": str(price),
                "total_price": str(order.quote_total()),
                "actor": actor.id,
            },
        )
        if self._mailer is not None:
            self._mailer.send_quote(build_quote_email(order))

        return CustomOrderDTO.from_order(
            order, message="Custom pricing set and quote sent to customer"
        )
