"""Package aggregate: a quantity tier offered to bulk customers.

The 50-99 tier is the only package with a usable fixed price; the two
custom-quote tiers exist as data so they can be listed, but their
``price_per_card`` must never be used for totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.value_objects import Money, QuantityRange


class PackageType(Enum):
    STARTER = "starter"
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


@dataclass(frozen=True)
class PackagePricing:
    price_per_card: Money
    is_fixed_price: bool = False

    @property
    def currency(self) -> str:
        return self.price_per_card.currency


@dataclass
class Package(SoftDeletable):
    id: str
    name: str
    quantity_range: QuantityRange
    pricing: PackagePricing
    package_type: PackageType
    features: list[str] = field(default_factory=list)
    description: str = ""
    is_active: bool = True
    display_order: int = 0
    estimated_days: int = 10
    free_delivery: bool = True

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Package name is required")
        if len(self.description) > 500:
            raise ValidationError("Description cannot exceed 500 characters")
        if self.estimated_days < 1:
            raise ValidationError("Estimated delivery days must be at least 1")

    @property
    def is_available(self) -> bool:
        return self.is_active and not self.is_deleted

    def fits(self, quantity: int) -> bool:
        return self.quantity_range.contains(quantity)

    def total_for(self, quantity: int) -> Money:
        return self.pricing.price_per_card * quantity

    def toggle_active(self) -> bool:
        self.is_active = not self.is_active
        return self.is_active

    @property
    def quantity_display(self) -> str:
        return str(self.quantity_range)
