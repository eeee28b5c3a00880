"""Application service: pricing lookups for a card quantity.

Used before a quote exists: the tier answer is a pure computation, the
package answer consults the live catalog.
"""

from __future__ import annotations

from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.repository.package_repository import PackageRepository
from linkit.domain.service.pricing import (
    MAX_CUSTOM_QUANTITY,
    MIN_CUSTOM_QUANTITY,
    PackagePricingInfo,
    PricingPolicy,
    TierInfo,
    package_pricing_info,
    resolve_pricing_tier,
)


def _check_quantity(quantity: int) -> None:
    if not MIN_CUSTOM_QUANTITY <= quantity <= MAX_CUSTOM_QUANTITY:
        raise ValidationError(
            f"Quantity must be between {MIN_CUSTOM_QUANTITY} and {MAX_CUSTOM_QUANTITY}"
        )


class TierInfoHandler:

    def __init__(self, pricing_policy: PricingPolicy | None = None) -> None:
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(self, quantity: int) -> TierInfo:
        _check_quantity(quantity)
        tier = resolve_pricing_tier(quantity, self._pricing_policy)
        if tier is None:
            raise ValidationError(f"No pricing tier covers {quantity} cards")
        return tier


class PackagePricingHandler:

    def __init__(self, package_repo: PackageRepository) -> None:
        self._package_repo = package_repo

    def handle(self, quantity: int, package_id: str | None = None) -> PackagePricingInfo:
        """Price *quantity* against a named package, or the one that fits it."""
        _check_quantity(quantity)
        if package_id is not None:
            package = self._package_repo.get_by_id(package_id)
            if package is None or not package.is_available:
                raise EntityNotFoundError("Package not found or inactive")
            if not package.fits(quantity):
                raise ValidationError(
                    f"Quantity must be within {package.quantity_display} "
                    "for this package"
                )
        else:
            package = self._package_repo.find_by_quantity(quantity)
            if package is None:
                raise EntityNotFoundError(
                    f"No package available for {quantity} cards"
                )
        return package_pricing_info(package, quantity)
