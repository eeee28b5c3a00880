"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.product import Product
from linkit.domain.repository.base import Repository


class ProductRepository(Repository[Product, str]):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_title(self, title: str) -> Product | None:
        """Return a live product by title (case-insensitive), or None."""
