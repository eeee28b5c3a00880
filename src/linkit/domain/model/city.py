"""City aggregate.

The per-city delivery fee is the only geographic input to order pricing.
"""

from __future__ import annotations

from dataclasses import dataclass

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.value_objects import Money


@dataclass
class City(SoftDeletable):
    id: str
    name: str
    country_id: str
    delivery_fee: Money
    is_active: bool = True
    display_order: int = 0

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("City name is required")
        if len(self.name) > 100:
            raise ValidationError("City name cannot exceed 100 characters")
        if not self.country_id:
            raise ValidationError("Country reference is required")

    def same_name_as(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()

    def toggle_active(self) -> bool:
        self.is_active = not self.is_active
        return self.is_active
