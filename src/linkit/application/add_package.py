"""Application service: Add Package use case.

Package names are unique and live package ranges never overlap, so a
quantity resolves to at most one package.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.actor import Actor
from linkit.domain.model.package import Package, PackagePricing, PackageType
from linkit.domain.model.value_objects import QuantityRange
from linkit.domain.repository.package_repository import PackageRepository
from linkit.domain.service.pricing import PricingPolicy


@dataclass(frozen=True)
class PackageSpec:
    """Input: the attributes of a new package."""

    name: str
    min_quantity: int
    max_quantity: int
    price_per_card: str
    package_type: str
    is_fixed_price: bool = False
    features: list[str] = field(default_factory=list)
    description: str = ""
    display_order: int = 0
    estimated_days: int = 10
    free_delivery: bool = True


class AddPackageHandler:

    def __init__(
        self,
        package_repo: PackageRepository,
        pricing_policy: PricingPolicy | None = None,
    ) -> None:
        self._package_repo = package_repo
        self._pricing_policy = pricing_policy or PricingPolicy()

    def handle(self, spec: PackageSpec, actor: Actor) -> Package:
        actor.require_admin()
        try:
            package_type = PackageType(spec.package_type)
        except ValueError:
            raise ValidationError(
                "Package type must be one of: "
                + ", ".join(t.value for t in PackageType)
            ) from None

        package = Package(
            id=self._package_repo.next_id(),
            name=spec.name,
            quantity_range=QuantityRange(spec.min_quantity, spec.max_quantity),
            pricing=PackagePricing(
                price_per_card=self._pricing_policy.money(spec.price_per_card),
                is_fixed_price=spec.is_fixed_price,
            ),
            package_type=package_type,
            features=list(spec.features),
            description=spec.description,
            display_order=spec.display_order,
            estimated_days=spec.estimated_days,
            free_delivery=spec.free_delivery,
        )

        if self._package_repo.get_by_name(package.name) is not None:
            raise ValidationError(f"Package '{package.name}' already exists")
        for existing in self._package_repo.list_all():
            if existing.quantity_range.overlaps(package.quantity_range):
                raise ValidationError(
                    f"Quantity range overlaps with existing package: {existing.name}"
                )

        self._package_repo.save(package)
        return package
