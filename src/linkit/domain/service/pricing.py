"""Domain service: order pricing and quantity-tier resolution.

Everything here is a pure function of already-resolved records.  Callers
look up the product, city, addons and packages first; nothing in this
module touches a repository.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from linkit.domain.model.package import Package, PackageType
from linkit.domain.model.value_objects import DEFAULT_CURRENCY, Money

MIN_CUSTOM_QUANTITY = 10
MAX_CUSTOM_QUANTITY = 10000
STANDARD_TIER_MIN = 50
STANDARD_TIER_MAX = 99
ENTERPRISE_TIER_MIN = 100


@dataclass(frozen=True)
class PricingPolicy:
    """Business-policy constants, supplied from configuration."""

    currency: str = DEFAULT_CURRENCY
    logo_surcharge: Decimal = Decimal("0")
    standard_price_per_card: Decimal = Decimal("15")
    max_price_per_card: Decimal = Decimal("1000")
    max_quote_total: Decimal = Decimal("1000000")

    def money(self, amount: Decimal | int | str) -> Money:
        return Money.of(amount, self.currency)

    @property
    def logo_surcharge_money(self) -> Money:
        return self.money(self.logo_surcharge)


@dataclass(frozen=True)
class OrderTotals:
    total: Money
    logo_surcharge: Money
    addons_total: Money
    final_total: Money


def compute_order_total(
    product_price: Money,
    include_printed_logo: bool,
    logo_surcharge: Money,
    delivery_fee: Money,
    addons: Iterable[object] = (),
) -> OrderTotals:
    """Price a standard order.

    ``addons`` are resolved addon records.  An addon without a usable price
    counts as zero rather than failing the whole order.
    """
    zero = Money.zero(product_price.currency)
    surcharge = logo_surcharge if include_printed_logo else zero

    addons_total = zero
    for addon in addons:
        price = getattr(addon, "price", None)
        if isinstance(price, Money):
            addons_total = addons_total + price

    total = product_price + surcharge + delivery_fee + addons_total
    return OrderTotals(
        total=total,
        logo_surcharge=surcharge,
        addons_total=addons_total,
        final_total=total,
    )


# ---------------------------------------------------------------------------
# Quantity tiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TierInfo:
    tier: PackageType
    name: str
    pricing_type: str  # "fixed" or "custom"
    description: str
    features: tuple[str, ...] = field(default_factory=tuple)
    price_per_card: Money | None = None

    @property
    def is_fixed_price(self) -> bool:
        return self.pricing_type == "fixed"

    def total_for(self, quantity: int) -> Money | None:
        if self.price_per_card is None:
            return None
        return self.price_per_card * quantity


def is_fixed_price_quantity(quantity: int) -> bool:
    return STANDARD_TIER_MIN <= quantity <= STANDARD_TIER_MAX


def resolve_pricing_tier(
    quantity: int, policy: PricingPolicy | None = None
) -> TierInfo | None:
    """Map a card quantity to its pricing tier, or None below the minimum."""
    policy = policy or PricingPolicy()

    if quantity < MIN_CUSTOM_QUANTITY:
        return None
    if quantity < STANDARD_TIER_MIN:
        return TierInfo(
            tier=PackageType.STARTER,
            name=f"{MIN_CUSTOM_QUANTITY}-{STANDARD_TIER_MIN - 1} cards",
            pricing_type="custom",
            description="Custom pricing - contact for quote",
            features=("Custom branding", "Free delivery", "Basic support"),
        )
    if quantity <= STANDARD_TIER_MAX:
        return TierInfo(
            tier=PackageType.STANDARD,
            name=f"{STANDARD_TIER_MIN}-{STANDARD_TIER_MAX} cards",
            pricing_type="fixed",
            description="Fixed pricing with bulk benefits",
            features=(
                "Custom branding",
                "Free delivery",
                "Priority support",
                "Design assistance",
            ),
            price_per_card=policy.money(policy.standard_price_per_card),
        )
    return TierInfo(
        tier=PackageType.ENTERPRISE,
        name=f"{ENTERPRISE_TIER_MIN}+ cards",
        pricing_type="custom",
        description="Enterprise pricing with maximum savings",
        features=(
            "Custom branding",
            "Free delivery",
            "Dedicated support",
            "Design assistance",
            "Volume discounts",
        ),
    )


def resolve_package_for_quantity(
    packages: Iterable[Package], quantity: int
) -> Package | None:
    """Return the live, active package whose range contains *quantity*.

    For the custom tiers the package carries no usable price; callers must
    not derive totals from it.
    """
    for package in packages:
        if package.is_available and package.fits(quantity):
            return package
    return None


@dataclass(frozen=True)
class PackagePricingInfo:
    quantity: int
    package: Package
    pricing_type: str
    price_per_card: Money | None = None
    total_price: Money | None = None
    message: str | None = None


def package_pricing_info(package: Package, quantity: int) -> PackagePricingInfo:
    """Quote a quantity against a package: a total for fixed packages only."""
    if package.pricing.is_fixed_price:
        return PackagePricingInfo(
            quantity=quantity,
            package=package,
            pricing_type="fixed",
            price_per_card=package.pricing.price_per_card,
            total_price=package.total_for(quantity),
        )
    return PackagePricingInfo(
        quantity=quantity,
        package=package,
        pricing_type="custom",
        message="Custom pricing available - contact us for a personalized quote",
    )
