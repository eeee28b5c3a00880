"""Abstract repository for the Country aggregate."""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.country import Country
from linkit.domain.repository.base import Repository


class CountryRepository(Repository[Country, str]):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique country ID."""

    @abstractmethod
    def get_by_code(self, code: str) -> Country | None:
        """Return a live country by its 2-3 letter code, or None."""
