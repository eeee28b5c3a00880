"""JSON-file-backed implementation of CountryRepository."""

from __future__ import annotations

from linkit.domain.model.country import Country
from linkit.domain.repository.country_repository import CountryRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
)


class JsonCountryRepository(JsonFileStore[Country], CountryRepository):

    def next_id(self) -> str:
        return str(self._next_int_id())

    def get_by_code(self, code: str) -> Country | None:
        wanted = code.strip().upper()
        return self._find(lambda raw: raw["code"] == wanted)

    def save(self, country: Country) -> None:
        self._upsert(country)

    @staticmethod
    def _to_raw(country: Country) -> dict:
        return {
            "id": country.id,
            "name": country.name,
            "code": country.code,
            "isActive": country.is_active,
            "displayOrder": country.display_order,
            "isDeleted": country.is_deleted,
            "deletedAt": dt_to_raw(country.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Country:
        return Country(
            id=raw["id"],
            name=raw["name"],
            code=raw["code"],
            is_active=raw.get("isActive", True),
            display_order=raw.get("displayOrder", 0),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
