"""Application service: Show Order / List Orders use cases (read-only)."""

from __future__ import annotations

from linkit.application.dto import OrderDTO
from linkit.domain.exceptions import EntityNotFoundError, UnauthorizedError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, actor: Actor) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id, include_deleted=actor.is_admin)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if not actor.is_admin and not actor.owns(order.created_by):
            raise UnauthorizedError("You can only view your own orders")
        return OrderDTO.from_order(order)


class ListOrdersHandler:
    """Admins see every order, newest first; customers see their own."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, actor: Actor, status: str | None = None) -> list[OrderDTO]:
        orders = self._order_repo.list_all()
        if not actor.is_admin:
            orders = [o for o in orders if actor.owns(o.created_by)]
        if status:
            orders = [o for o in orders if o.status.value == status]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [OrderDTO.from_order(o) for o in orders]
