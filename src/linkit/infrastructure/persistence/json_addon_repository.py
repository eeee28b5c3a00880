"""JSON-file-backed implementation of AddonRepository."""

from __future__ import annotations

from linkit.domain.model.addon import Addon, AddonInputType
from linkit.domain.repository.addon_repository import AddonRepository
from linkit.infrastructure.persistence.json_store import (
    JsonFileStore,
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
)


class JsonAddonRepository(JsonFileStore[Addon], AddonRepository):

    def next_id(self) -> str:
        return str(self._next_int_id())

    def save(self, addon: Addon) -> None:
        self._upsert(addon)

    @staticmethod
    def _to_raw(addon: Addon) -> dict:
        return {
            "id": addon.id,
            "title": addon.title,
            "price": money_to_raw(addon.price),
            "inputType": addon.input_type.value,
            "options": list(addon.options),
            "isDeleted": addon.is_deleted,
            "deletedAt": dt_to_raw(addon.deleted_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Addon:
        return Addon(
            id=raw["id"],
            title=raw["title"],
            price=money_from_raw(raw["price"]),
            input_type=AddonInputType(raw.get("inputType", "text")),
            options=list(raw.get("options", [])),
            is_deleted=raw.get("isDeleted", False),
            deleted_at=dt_from_raw(raw.get("deletedAt")),
        )
