"""Application service: Update Order use case.

Customers may correct their own order; admins may edit any.  A changed
delivery city re-resolves the delivery fee and the order is re-priced
from its locked product and addon prices.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from linkit.application.dto import OrderChanges, OrderDTO
from linkit.domain.exceptions import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from linkit.domain.model.actor import Actor
from linkit.domain.model.order import PaymentMethod
from linkit.domain.repository.city_repository import CityRepository
from linkit.domain.repository.country_repository import CountryRepository
from linkit.domain.repository.order_repository import OrderRepository
from linkit.domain.service.pricing import PricingPolicy

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        city_repo: CityRepository,
        country_repo: CountryRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._city_repo = city_repo
        self._country_repo = country_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        order_id: int,
        changes: OrderChanges,
        actor: Actor,
        now: datetime | None = None,
    ) -> OrderDTO:
        if changes.is_empty:
            raise ValidationError("No changes supplied")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if not actor.is_admin and not actor.owns(order.created_by):
            raise UnauthorizedError("You can only update your own orders")

        delivery_info = changes.delivery_info
        delivery_fee = order.delivery_fee
        if delivery_info is not None:
            city = self._city_repo.get_by_id(delivery_info.city_id)
            if city is None or not city.is_active:
                raise EntityNotFoundError("City not found")
            if city.country_id != delivery_info.country_id:
                raise ValidationError(
                    "Selected city does not belong to the selected country"
                )
            country = self._country_repo.get_by_id(delivery_info.country_id)
            if country is None or not country.is_active:
                raise EntityNotFoundError("Country not found")
            delivery_info = replace(
                delivery_info, country_name=country.name, city_name=city.name
            )
            delivery_fee = city.delivery_fee

        payment_method = (
            PaymentMethod.parse(changes.payment_method)
            if changes.payment_method is not None
            else None
        )

        card_design = changes.card_design
        if card_design is None and changes.company_logo_upload:
            card_design = order.card_design

        order.update_details(
            personal_info=changes.personal_info,
            card_design=card_design,
            delivery_info=delivery_info,
            payment_method=payment_method,
            notes=changes.notes,
            uploaded_logo=changes.company_logo_upload,
            now=now,
        )
        order.reprice(delivery_fee, self._pricing_policy.logo_surcharge_money)
        self._order_repo.save(order)

        logger.info(
            "Order updated",
            extra={
                "order_id": order_id,
                "final_total": str(order.final_total),
                "actor": actor.id,
            },
        )
        return OrderDTO.from_order(order, message="Order updated successfully")
