"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.product import Product
from linkit.domain.repository.product_repository import ProductRepository
from linkit.domain.service.pricing import PricingPolicy

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        product_id: str,
        actor: Actor,
        new_price: str | None = None,
        new_title: str | None = None,
    ) -> Product:
        """Update a product's price and/or title.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        actor.require_admin()
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_title is not None:
            clash = self._product_repo.get_by_title(new_title)
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{new_title.strip()}' already exists")
            product.rename(new_title)
        if new_price is not None:
            product.update_price(self._pricing_policy.money(new_price))

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            extra={"product_id": product.id, "price": str(product.price)},
        )
        return product
