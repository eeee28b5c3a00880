"""Application service: Preview Quote E-mail (admin, read-only)."""

from __future__ import annotations

from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.repository.package_repository import PackageRepository
from linkit.domain.service.quote_email import QuoteEmail, build_quote_email


class PreviewQuoteEmailHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        package_repo: PackageRepository,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._package_repo = package_repo

    def handle(self, order_id: int, actor: Actor) -> QuoteEmail:
        actor.require_admin()
        order = self._custom_order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")

        package = None
        if order.selected_package_id is not None:
            package = self._package_repo.get_by_id(
                order.selected_package_id, include_deleted=True
            )
        return build_quote_email(order, package)
