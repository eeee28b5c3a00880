"""Abstract repository for the City aggregate."""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.city import City
from linkit.domain.repository.base import Repository


class CityRepository(Repository[City, str]):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique city ID."""

    @abstractmethod
    def list_by_country(self, country_id: str) -> list[City]:
        """Return the live cities of a country, ordered for display."""
