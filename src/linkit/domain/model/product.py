"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, card designs are added, products are archived.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.value_objects import Money

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100


def _clean_title(title: str | None) -> str:
    title = (title or "").strip()
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Product title must be between {TITLE_MIN_LENGTH} and "
            f"{TITLE_MAX_LENGTH} characters"
        )
    return title


@dataclass(frozen=True)
class CardDesignVariant:
    """A colour the card can be printed in."""

    color: str
    color_name: str
    image: str | None = None


@dataclass
class Product(SoftDeletable):
    """A card product in the catalog.

    Orders never hold a reference to a live price: they capture a price
    snapshot at creation time, so ``update_price`` never affects them.
    """

    id: str
    title: str
    price: Money
    images: list[str] = field(default_factory=list)
    card_designs: list[CardDesignVariant] = field(default_factory=list)
    created_by: str | None = None

    def __post_init__(self) -> None:
        self.title = _clean_title(self.title)

    def rename(self, title: str) -> None:
        self.title = _clean_title(title)

    def update_price(self, new_price: Money) -> None:
        if new_price.currency != self.price.currency:
            raise ValidationError(
                f"Product is priced in {self.price.currency}, got {new_price.currency}"
            )
        self.price = new_price

    def add_card_design(self, design: CardDesignVariant) -> None:
        if not design.color or not design.color_name.strip():
            raise ValidationError("Card color and color name are required")
        if self.find_card_design(design.color) is not None:
            raise ValidationError(
                f"Product '{self.title}' already has a {design.color} card design"
            )
        self.card_designs.append(design)

    def find_card_design(self, color: str) -> CardDesignVariant | None:
        for design in self.card_designs:
            if design.color.lower() == color.lower():
                return design
        return None
