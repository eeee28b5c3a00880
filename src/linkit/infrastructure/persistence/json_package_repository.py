"""JSON-file-backed implementation of PackageRepository."""

from __future__ import annotations

from linkit.domain.model.package import Package, PackagePricing, PackageType
from linkit.domain.model.value_objects import QuantityRange
from linkit.domain.repository.package_repository import PackageRepository
from linkit.domain.service.pricing import resolve_package_for_quantity
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
)


class JsonPackageRepository(JsonFileStore[Package], PackageRepository):

    def next_id(self) -> str:
        return str(self._next_int_id())

    def get_by_name(self, name: str) -> Package | None:
        wanted = name.strip().lower()
        return self._find(lambda raw: raw["name"].lower() == wanted)

    def find_by_quantity(self, quantity: int) -> Package | None:
        packages = sorted(self.list_all(), key=lambda p: p.display_order)
        return resolve_package_for_quantity(packages, quantity)

    def save(self, package: Package) -> None:
        self._upsert(package)

    @staticmethod
    def _to_raw(package: Package) -> dict:
        return {
            "id": package.id,
            "name": package.name,
            "quantityRange": {
                "min": package.quantity_range.minimum,
                "max": package.quantity_range.maximum,
            },
            "pricing": {
                "pricePerCard": money_to_raw(package.pricing.price_per_card),
                "isFixedPrice": package.pricing.is_fixed_price,
            },
            "packageType": package.package_type.value,
            "features": list(package.features),
            "description": package.description,
            "isActive": package.is_active,
            "displayOrder": package.display_order,
            "estimatedDays": package.estimated_days,
            "freeDelivery": package.free_delivery,
            "isDeleted": package.is_deleted,
            "deletedAt": dt_to_raw(package.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Package:
        return Package(
            id=raw["id"],
            name=raw["name"],
            quantity_range=QuantityRange(
                raw["quantityRange"]["min"], raw["quantityRange"]["max"]
            ),
            pricing=PackagePricing(
                price_per_card=money_from_raw(raw["pricing"]["pricePerCard"]),
                is_fixed_price=raw["pricing"].get("isFixedPrice", False),
            ),
            package_type=PackageType(raw["packageType"]),
            features=list(raw.get("features", [])),
            description=raw.get("description", ""),
            is_active=raw.get("isActive", True),
            display_order=raw.get("displayOrder", 0),
            estimated_days=raw.get("estimatedDays", 10),
            free_delivery=raw.get("freeDelivery", True),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
