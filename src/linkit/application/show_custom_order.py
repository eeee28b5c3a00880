"""Application service: Show / List Custom Orders (read-only)."""

from __future__ import annotations

from linkit.application.dto import CustomOrderDTO
from linkit.domain.exceptions import EntityNotFoundError, UnauthorizedError
from linkit.domain.model.actor import Actor
from linkit.domain.model.custom_order import CustomOrder
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.model.package import Package
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.repository.package_repository import PackageRepository


def _selected_package(
    order: CustomOrder, package_repo: PackageRepository
) -> Package | None:
    if order.selected_package_id is None:
        return None
    return package_repo.get_by_id(order.selected_package_id, include_deleted=True)


class ShowCustomOrderHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        package_repo: PackageRepository,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._package_repo = package_repo

    def handle(self, order_id: int, actor: Actor) -> CustomOrderDTO:
        order = self._custom_order_repo.get_by_id(
            order_id, include_deleted=actor.is_admin
        )
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")
        if not actor.is_admin and not actor.owns(order.created_by):
            raise UnauthorizedError("You can only view your own custom orders")
        return CustomOrderDTO.from_order(
            order, _selected_package(order, self._package_repo)
        )


class ListCustomOrdersHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        package_repo: PackageRepository,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._package_repo = package_repo

    def handle(self, actor: Actor, status: str | None = None) -> list[CustomOrderDTO]:
        orders = self._custom_order_repo.list_all()
        if not actor.is_admin:
            orders = [o for o in orders if actor.owns(o.created_by)]
        if status:
            wanted = CustomOrderStatus.parse(status)
            orders = [o for o in orders if o.status is wanted]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [
            CustomOrderDTO.from_order(o, _selected_package(o, self._package_repo))
            for o in orders
        ]
