"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.  Every
referenced record (product, city, country, addons) is resolved before the
pricing engine runs, so a missing reference is always reported as
not-found rather than priced as zero.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from linkit.application.dto import AddonSelection, OrderDTO, PlaceOrderRequest
from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.order import Order, OrderAddon, PaymentMethod
from linkit.domain.repository.addon_repository import AddonRepository
from linkit.domain.repository.city_repository import CityRepository
from linkit.domain.repository.country_repository import CountryRepository
from linkit.domain.repository.order_repository import OrderRepository
from linkit.domain.repository.product_repository import ProductRepository
from linkit.domain.service.delivery_estimate import (
    DeliveryPolicy,
    estimate_order_delivery,
)
from linkit.domain.service.pricing import PricingPolicy
from linkit.domain.service.validation import validate_required_fields

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        city_repo: CityRepository,
        country_repo: CountryRepository,
        addon_repo: AddonRepository,
        pricing_policy: PricingPolicy | None = None,
        delivery_policy: DeliveryPolicy | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._city_repo = city_repo
        self._country_repo = country_repo
        self._addon_repo = addon_repo
        self._pricing_policy = pricing_policy or PricingPolicy()
        self._delivery_policy = delivery_policy or DeliveryPolicy()

    def handle(
        self, request: PlaceOrderRequest, actor: Actor, now: datetime | None = None
    ) -> OrderDTO:
        """Place a standard card order.

        Steps:
        1. Check that every section of the submission is present.
        2. Resolve the product, the delivery city and its country.
        3. Resolve the chosen addons, locking in their current prices.
        4. Let the Order factory validate and price the order.
        5. Stamp the estimated delivery date and persist.
        """
        personal_info = request.personal_info
        card_design = request.card_design
        delivery = request.delivery_info
        product_id = request.product_id
        error = validate_required_fields(personal_info, card_design, delivery, product_id)
        if (
            error
            or personal_info is None
            or card_design is None
            or delivery is None
            or product_id is None
        ):
            raise ValidationError(error or "Order details are incomplete")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        city = self._city_repo.get_by_id(delivery.city_id)
        if city is None or not city.is_active:
            raise EntityNotFoundError("City not found")
        if city.country_id != delivery.country_id:
            raise ValidationError("Selected city does not belong to the selected country")
        country = self._country_repo.get_by_id(delivery.country_id)
        if country is None or not country.is_active:
            raise EntityNotFoundError("Country not found")

        addons = self._resolve_addons(request.addons, request.addon_images)
        payment_method = PaymentMethod.parse(request.payment_method)

        if request.company_logo_upload:
            card_design = replace(card_design, company_logo=request.company_logo_upload)

        order = Order.create(
            product=product,
            personal_info=personal_info,
            card_design=card_design,
            delivery_info=replace(
                delivery, country_name=country.name, city_name=city.name
            ),
            delivery_fee=city.delivery_fee,
            logo_surcharge=self._pricing_policy.logo_surcharge_money,
            addons=addons,
            addon_images=list(request.addon_images),
            payment_method=payment_method,
            deposit_transaction_img=request.deposit_transaction_img,
            created_by=actor.id,
            now=now,
        )
        order.estimated_delivery = estimate_order_delivery(
            order.created_at, country.code, self._delivery_policy
        )

        self._order_repo.save(order)
        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "product_id": product.id,
                "final_total": str(order.final_total),
                "created_by": actor.id,
            },
        )
        return OrderDTO.from_order(order, message="Order created successfully")

    def _resolve_addons(
        self, selections: tuple[AddonSelection, ...], images: tuple[str, ...]
    ) -> list[OrderAddon]:
        """Snapshot each chosen addon; image addons take the next uploaded file."""
        remaining_images = list(images)
        resolved: list[OrderAddon] = []
        for selection in selections:
            addon = self._addon_repo.get_by_id(selection.addon_id)
            if addon is None:
                raise EntityNotFoundError(f"Addon '{selection.addon_id}' not found")
            value = selection.value
            if addon.expects_image and not value and remaining_images:
                value = remaining_images.pop(0)
            resolved.append(
                OrderAddon(
                    addon_id=addon.id,
                    title=addon.title,
                    price=addon.price,
                    value=value,
                )
            )
        return resolved
