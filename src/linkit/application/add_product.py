"""Application service: Add Product / Add Card Design use cases."""

from __future__ import annotations

import logging

from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.product import CardDesignVariant, Product
from linkit.domain.repository.product_repository import ProductRepository
from linkit.domain.service.pricing import PricingPolicy

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(
        self,
        title: str,
        price: str,
        actor: Actor,
        images: list[str] | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        actor.require_admin()
        if not title or not title.strip():
            raise ValidationError("Product title is required")

        existing = self._product_repo.get_by_title(title)
        if existing is not None:
            raise ValidationError(f"Product '{title.strip()}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            title=title,
            price=self._pricing_policy.money(price),
            images=list(images or []),
            created_by=actor.id,
        )
        self._product_repo.save(product)
        logger.info("Product added", extra={"product_id": product.id, "actor": actor.id})
        return product


class AddCardDesignHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        color: str,
        color_name: str,
        actor: Actor,
        image: str | None = None,
    ) -> Product:
        actor.require_admin()
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.add_card_design(
            CardDesignVariant(color=color, color_name=color_name, image=image)
        )
        self._product_repo.save(product)
        return product
