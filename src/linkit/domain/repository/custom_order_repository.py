"""Abstract repository for the CustomOrder aggregate.

Writes are version-checked exactly like ``OrderRepository.save``.
"""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.custom_order import CustomOrder
from linkit.domain.repository.base import Repository


class CustomOrderRepository(Repository[CustomOrder, int]):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique custom order ID."""
