"""Abstract repository for the Order aggregate.

``save`` is a conditional write: for an existing order it succeeds only
if the stored version still equals ``order.version``, then bumps it.
A stale writer gets a ``ConflictError``.
"""

from __future__ import annotations

from abc import abstractmethod

from linkit.domain.model.order import Order
from linkit.domain.repository.base import Repository


class OrderRepository(Repository[Order, int]):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""
