"""Operations every repository offers.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K", int, str)


class Repository(ABC, Generic[T, K]):

    @abstractmethod
    def get_by_id(self, entity_id: K, include_deleted: bool = False) -> T | None:
        """Return the entity, or None if missing (or soft-deleted)."""

    @abstractmethod
    def list_all(self, include_deleted: bool = False) -> list[T]:
        """Return every live entity, optionally including soft-deleted ones."""

    @abstractmethod
    def save(self, entity: T) -> None:
        """Persist a new or updated entity."""

    @abstractmethod
    def delete(self, entity_id: K) -> None:
        """Physically remove the entity (admin purge)."""
