"""Abstract repository for the Package aggregate."""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.package import Package
from linkit.domain.repository.base import Repository


class PackageRepository(Repository[Package, str]):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique package ID."""

    @abstractmethod
    def get_by_name(self, name: str) -> Package | None:
        """Return a live package by name (case-insensitive), or None."""

    @abstractmethod
    def find_by_quantity(self, quantity: int) -> Package | None:
        """Return the active package whose range contains *quantity*."""
