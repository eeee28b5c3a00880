"""JSON-file-backed implementation of CityRepository."""

from __future__ import annotations

from linkit.domain.model.city import City
from linkit.domain.repository.city_repository import CityRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
)


class JsonCityRepository(JsonFileStore[City], CityRepository):

    def next_id(self) -> str:
        return str(self._next_int_id())

    def list_by_country(self, country_id: str) -> list[City]:
        cities = [c for c in self.list_all() if c.country_id == country_id]
        return sorted(cities, key=lambda c: (c.display_order, c.name))

    def save(self, city: City) -> None:
        self._upsert(city)

    @staticmethod
    def _to_raw(city: City) -> dict:
        return {
            "id": city.id,
            "name": city.name,
            "country": city.country_id,
            "deliveryFee": money_to_raw(city.delivery_fee),
            "isActive": city.is_active,
            "displayOrder": city.display_order,
            "isDeleted": city.is_deleted,
            "deletedAt": dt_to_raw(city.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> City:
        return City(
            id=raw["id"],
            name=raw["name"],
            country_id=raw["country"],
            delivery_fee=money_from_raw(raw["deliveryFee"]),
            is_active=raw.get("isActive", True),
            display_order=raw.get("displayOrder", 0),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
