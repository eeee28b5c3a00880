"""CustomOrder aggregate: a bulk card request priced by negotiation.

Quantities in the 50-99 tier are priced by assigning the fixed-price
package; every other quantity gets a custom per-card price from an admin.
A quoted order carries exactly one of the two.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from linkit.domain.exceptions import UnauthorizedError, ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.package import Package
from linkit.domain.model.value_objects import Money
from linkit.domain.service.pricing import (
    ENTERPRISE_TIER_MIN,
    PricingPolicy,
    is_fixed_price_quantity,
)
from linkit.domain.service.validation import (
    validate_admin_notes,
    validate_custom_order_fields,
    validate_custom_pricing,
    validate_customer_notes,
    validate_status_transition,
)

# States in which an admin may (re)price the order.
_PRICEABLE_STATES = frozenset(
    {CustomOrderStatus.PENDING, CustomOrderStatus.REVIEWING, CustomOrderStatus.QUOTED}
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CompanyInfo:
    company_name: str
    contact_person: str
    email: str
    phone: str


@dataclass(frozen=True)
class OrderDetails:
    employee_count: int
    message: str = ""


@dataclass(frozen=True)
class CustomPricing:
    price_per_card: Money
    total_price: Money
    is_custom: bool = True


@dataclass(frozen=True)
class CustomerResponse:
    approved: bool
    response_date: datetime
    customer_notes: str = ""


@dataclass(frozen=True)
class CustomOrderSummary:
    id: int | None
    company_name: str
    contact_person: str
    email: str
    employee_count: int
    status: str
    total_price: str
    estimated_delivery: datetime | None


@dataclass
class CustomOrder(SoftDeletable):
    id: int | None
    company_info: CompanyInfo
    order_details: OrderDetails
    status: CustomOrderStatus = CustomOrderStatus.PENDING
    selected_package_id: str | None = None
    custom_pricing: CustomPricing | None = None
    admin_notes: str | None = None
    customer_response: CustomerResponse | None = None
    created_by: str | None = None
    handled_by: str | None = None
    estimated_delivery: datetime | None = None
    quoted_at: datetime | None = None
    approved_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    version: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        company_info: CompanyInfo,
        order_details: OrderDetails,
        created_by: str | None = None,
        now: datetime | None = None,
    ) -> CustomOrder:
        error = validate_custom_order_fields(company_info, order_details)
        if error:
            raise ValidationError(error)

        created = now or _now()
        return CustomOrder(
            id=None,
            company_info=CompanyInfo(
                company_name=company_info.company_name.strip(),
                contact_person=company_info.contact_person.strip(),
                email=company_info.email.strip().lower(),
                phone=company_info.phone.strip(),
            ),
            order_details=OrderDetails(
                employee_count=order_details.employee_count,
                message=(order_details.message or "").strip(),
            ),
            created_by=created_by,
            created_at=created,
            updated_at=created,
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(
        self,
        new_status: CustomOrderStatus | str,
        actor_id: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Follow one edge of the quote-negotiation graph."""
        error = validate_status_transition(self.status, new_status)
        if error:
            raise ValidationError(error)

        status = CustomOrderStatus.parse(new_status)
        if status is CustomOrderStatus.QUOTED and not self.has_quote:
            raise ValidationError(
                "Set a custom price or assign a package before quoting this order"
            )
        now = now or _now()
        self.status = status

        if status is CustomOrderStatus.REVIEWING and actor_id:
            self.handled_by = actor_id
        if status is CustomOrderStatus.QUOTED and self.quoted_at is None:
            self.quoted_at = now
        if status is CustomOrderStatus.APPROVED:
            if self.approved_at is None:
                self.approved_at = now
            if self.customer_response is None:
                self.customer_response = CustomerResponse(approved=True, response_date=now)
        if status is CustomOrderStatus.COMPLETED and self.completed_at is None:
            self.completed_at = now
        self.updated_at = now

    def set_custom_pricing(
        self,
        price_per_card: Money,
        policy: PricingPolicy | None = None,
        actor_id: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Quote a per-card price for the 10-49 and 100+ tiers."""
        if self.is_fixed_tier:
            raise ValidationError(
                "This quantity tier uses fixed package pricing, not custom pricing"
            )
        self._assert_priceable()

        error = validate_custom_pricing(
            price_per_card.amount, self.employee_count, policy
        )
        if error:
            raise ValidationError(error)

        self.custom_pricing = CustomPricing(
            price_per_card=price_per_card,
            total_price=price_per_card * self.employee_count,
            is_custom=True,
        )
        self.selected_package_id = None
        self._advance_to_quoted(actor_id, now)

    def assign_package(
        self,
        package: Package,
        actor_id: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Quote the order at a package's price (the fixed 50-99 tier)."""
        if not self.is_fixed_tier:
            raise ValidationError(
                "Only the fixed-price quantity tier can be quoted with a package; "
                "use custom pricing instead"
            )
        if not package.pricing.is_fixed_price:
            raise ValidationError("Only fixed-price packages can be assigned to a custom order")
        if not package.fits(self.employee_count):
            raise ValidationError("Order quantity does not fit this package range")
        self._assert_priceable()

        self.selected_package_id = package.id
        self.custom_pricing = None
        self._advance_to_quoted(actor_id, now)

    def respond_to_quote(
        self,
        actor: Actor,
        approved: bool,
        customer_notes: str = "",
        now: datetime | None = None,
    ) -> None:
        """Record the submitter's answer to a quote."""
        if not actor.owns(self.created_by):
            raise UnauthorizedError("You can only respond to your own custom orders")
        if self.status is not CustomOrderStatus.QUOTED:
            raise ValidationError("You can only respond to quoted custom orders")
        error = validate_customer_notes(customer_notes)
        if error:
            raise ValidationError(error)

        now = now or _now()
        self.customer_response = CustomerResponse(
            approved=approved,
            response_date=now,
            customer_notes=customer_notes or "",
        )
        if approved:
            self.transition_to(CustomOrderStatus.APPROVED, now=now)
        self.updated_at = now

    def update_admin_notes(self, notes: str) -> None:
        error = validate_admin_notes(notes)
        if error:
            raise ValidationError(error)
        self.admin_notes = notes

    # --- Queries --------------------------------------------------------------

    @property
    def employee_count(self) -> int:
        return self.order_details.employee_count

    @property
    def is_fixed_tier(self) -> bool:
        return is_fixed_price_quantity(self.employee_count)

    @property
    def has_quote(self) -> bool:
        return self.custom_pricing is not None or self.selected_package_id is not None

    def quote_total(self, package: Package | None = None) -> Money | None:
        """Quoted total; a package-priced quote needs the resolved package."""
        if self.custom_pricing is not None:
            return self.custom_pricing.total_price
        if (
            package is not None
            and package.id == self.selected_package_id
            and package.pricing.is_fixed_price
        ):
            return package.total_for(self.employee_count)
        return None

    def formatted_total_price(self, package: Package | None = None) -> str:
        total = self.quote_total(package)
        return str(total) if total is not None else "Quote pending"

    def estimated_savings(self, policy: PricingPolicy | None = None) -> Money | None:
        """What an enterprise quote saves against the standard tier price."""
        policy = policy or PricingPolicy()
        if self.employee_count < ENTERPRISE_TIER_MIN or self.custom_pricing is None:
            return None
        standard_total = policy.money(policy.standard_price_per_card) * self.employee_count
        quoted = self.custom_pricing.total_price
        if standard_total <= quoted:
            return None
        return standard_total - quoted

    def summary(self, package: Package | None = None) -> CustomOrderSummary:
        return CustomOrderSummary(
            id=self.id,
            company_name=self.company_info.company_name,
            contact_person=self.company_info.contact_person,
            email=self.company_info.email,
            employee_count=self.employee_count,
            status=self.status.value,
            total_price=self.formatted_total_price(package),
            estimated_delivery=self.estimated_delivery,
        )

    # --- Internal helpers -----------------------------------------------------

    def _assert_priceable(self) -> None:
        if self.status not in _PRICEABLE_STATES:
            raise ValidationError(
                f"Cannot change pricing of a custom order in '{self.status.value}' status"
            )

    def _advance_to_quoted(self, actor_id: str | None, now: datetime | None) -> None:
        now = now or _now()
        if self.status is CustomOrderStatus.PENDING:
            self.transition_to(CustomOrderStatus.REVIEWING, actor_id, now)
        if self.status is CustomOrderStatus.REVIEWING:
            self.transition_to(CustomOrderStatus.QUOTED, actor_id, now)
        else:
            # Re-quoting an already quoted order invalidates the old answer.
            self.customer_response = None
            self.updated_at = now
