"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from linkit.domain.model.product import CardDesignVariant, Product
from linkit.domain.repository.product_repository import ProductRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
)


class JsonProductRepository(JsonFileStore[Product], ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return str(self._next_int_id())

    def get_by_title(self, title: str) -> Product | None:
        wanted = title.strip().lower()
        return self._find(lambda raw: raw["title"].lower() == wanted)

    def save(self, product: Product) -> None:
        self._upsert(product)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "price": money_to_raw(product.price),
            "images": list(product.images),
            "cardDesigns": [
                {"color": d.color, "colorName": d.color_name, "image": d.image}
                for d in product.card_designs
            ],
            "createdBy": product.created_by,
            "isDeleted": product.is_deleted,
            "deletedAt": dt_to_raw(product.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            title=raw["title"],
            price=money_from_raw(raw["price"]),
            images=list(raw.get("images", [])),
            card_designs=[
                CardDesignVariant(
                    color=d["color"], color_name=d["colorName"], image=d.get("image")
                )
                for d in raw.get("cardDesigns", [])
            ],
            created_by=raw.get("createdBy"),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
