"""Application service: Assign Package use case.

Quotes a custom order at a package's price.  Only a live, active package
can be assigned, and the order's quantity must fall within its range.
"""

from __future__ import annotations

import logging
from datetime import datetime

from linkit.application.dto import CustomOrderDTO
from linkit.domain.exceptions import EntityNotFoundError
from linkit.domain.model.actor import Actor
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.repository.package_repository import PackageRepository
from linkit.domain.service.quote_email import QuoteMailer, build_quote_email

logger = logging.getLogger(__name__)


class AssignPackageHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        package_repo: PackageRepository,
        mailer: QuoteMailer | None = None,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._package_repo = package_repo
        self._mailer = mailer

    def handle(
        self,
        order_id: int,
        package_id: str,
        actor: Actor,
        admin_notes: str | None = None,
        now: datetime | None = None,
    ) -> CustomOrderDTO:
        actor.require_admin()

        order = self._custom_order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Custom order #{order_id} not found")

        package = self._package_repo.get_by_id(package_id)
        if package is None or not package.is_available:
            raise EntityNotFoundError("Package not found or inactive")

        order.assign_package(package, actor.id, now)
        if admin_notes is not None:
            order.update_admin_notes(admin_notes)
        self._custom_order_repo.save(order)

        logger.info(
            "Package assigned to custom order",
            extra={
                "custom_order_id": order_id,
                "package_id": package.id,
                "total_price": str(order.quote_total(package)),
                "actor": actor.id,
            },
        )
        if self._mailer is not None:
            self._mailer.send_quote(build_quote_email(order, package))

        return CustomOrderDTO.from_order(
            order, package, message="Package assigned and quote sent to customer"
        )
