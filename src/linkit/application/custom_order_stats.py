"""Application service: Custom Order Statistics.

Potential revenue sums the totals of custom-priced quotes only.
"""

from __future__ import annotations

from dataclasses import dataclass

from linkit.domain.model.actor import Actor
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.model.value_objects import Money
from linkit.domain.repository.custom_order_repository import CustomOrderRepository
from linkit.domain.service.pricing import PricingPolicy


@dataclass(frozen=True)
class StatusBreakdown:
    count: int = 0
    total_cards: int = 0


@dataclass(frozen=True)
class CustomOrderStats:
    total_orders: int
    pending_orders: int
    quoted_orders: int
    completed_orders: int
    potential_revenue: Money
    by_status: dict[str, StatusBreakdown]

    def as_dict(self) -> dict:
        return {
            "overview": {
                "totalOrders": self.total_orders,
                "pendingOrders": self.pending_orders,
                "quotedOrders": self.quoted_orders,
                "completedOrders": self.completed_orders,
                "potentialRevenue": str(self.potential_revenue.amount),
                "currency": self.potential_revenue.currency,
            },
            "statusBreakdown": {
                status: {"count": b.count, "totalCards": b.total_cards}
                for status, b in self.by_status.items()
            },
        }


class CustomOrderStatsHandler:

    def __init__(
        self,
        custom_order_repo: CustomOrderRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._custom_order_repo = custom_order_repo
        self._currency = (pricing_policy or PricingPolicy()).currency

    def handle(self, actor: Actor) -> CustomOrderStats:
        actor.require_admin()
        orders = self._custom_order_repo.list_all()

        counts = {status: 0 for status in CustomOrderStatus}
        cards = {status: 0 for status in CustomOrderStatus}
        revenue = Money.zero(self._currency)
        for order in orders:
            counts[order.status] += 1
            cards[order.status] += order.employee_count
            if order.custom_pricing is not None:
                revenue = revenue + order.custom_pricing.total_price

        return CustomOrderStats(
            total_orders=len(orders),
            pending_orders=counts[CustomOrderStatus.PENDING],
            quoted_orders=counts[CustomOrderStatus.QUOTED],
            completed_orders=counts[CustomOrderStatus.COMPLETED],
            potential_revenue=revenue,
            by_status={
                status.value: StatusBreakdown(counts[status], cards[status])
                for status in CustomOrderStatus
            },
        )
