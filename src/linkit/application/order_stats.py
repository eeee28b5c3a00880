"""Application service: Order Statistics (admin dashboard numbers)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from linkit.domain.model.actor import Actor
from linkit.domain.model.order import OrderStatus
from linkit.domain.model.value_objects import Money
from linkit.domain.repository.order_repository import OrderRepository
from linkit.domain.service.pricing import PricingPolicy


@dataclass(frozen=True)
class OrderStats:
    total_orders: int
    by_status: dict[str, int]
    total_revenue: Money
    average_order_value: Money

    def as_dict(self) -> dict:
        return {
            "totalOrders": self.total_orders,
            "byStatus": dict(self.by_status),
            "totalRevenue": str(self.total_revenue.amount),
            "averageOrderValue": str(self.average_order_value.amount),
            "currency": self.total_revenue.currency,
        }


class OrderStatsHandler:

    def __init__(
        self, order_repo: OrderRepository, pricing_policy: PricingPolicy | None = None
    ) -> None:
        self._order_repo = order_repo
        self._currency = (pricing_policy or PricingPolicy()).currency

    def handle(self, actor: Actor) -> OrderStats:
        actor.require_admin()
        orders = self._order_repo.list_all()

        by_status = {status.value: 0 for status in OrderStatus}
        revenue = Money.zero(self._currency)
        for order in orders:
            by_status[order.status.value] += 1
            revenue = revenue + order.total

        average = Money.zero(self._currency)
        if orders:
            average = Money(
                (revenue.amount / len(orders)).quantize(
                    Decimal("0.01"), rounding=ROUND_HALF_UP
                ),
                self._currency,
            )
        return OrderStats(
            total_orders=len(orders),
            by_status=by_status,
            total_revenue=revenue,
            average_order_value=average,
        )
