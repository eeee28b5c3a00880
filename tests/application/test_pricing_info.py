"""Integration tests for the tier and package pricing lookups."""

from decimal import Decimal

import pytest

from linkit.application.pricing_info import PackagePricingHandler, TierInfoHandler
from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.package import PackageType
from linkit.domain.model.value_objects import Money
from linkit.domain.service.pricing import PricingPolicy
from tests import builders
from tests.fakes import FakePackageRepository


def _packages() -> FakePackageRepository:
    return FakePackageRepository(
        [
            builders.starter_package(),
            builders.standard_package(),
            builders.enterprise_package(),
        ]
    )


class TestTierInfo:

    def test_standard_tier_uses_policy_price(self):
        tier = TierInfoHandler(PricingPolicy(standard_price_per_card=Decimal("16"))).handle(50)
        assert tier.tier is PackageType.STANDARD
        assert tier.total_for(50) == Money.of("800")

    @pytest.mark.parametrize("quantity", [9, 10001])
    def test_out_of_range(self, quantity):
        with pytest.raises(ValidationError, match="between 10 and 10000"):
            TierInfoHandler().handle(quantity)


class TestPackagePricing:

    def test_auto_selects_package(self):
        info = PackagePricingHandler(_packages()).handle(75)
        assert info.package.name == "Standard"
        assert info.total_price == Money.of("1125")

    def test_custom_package_has_no_total(self):
        info = PackagePricingHandler(_packages()).handle(20)
        assert info.pricing_type == "custom"
        assert info.total_price is None

    def test_named_package_must_fit(self):
        with pytest.raises(ValidationError, match="within 50-99 for this package"):
            PackagePricingHandler(_packages()).handle(20, package_id="2")

    def test_named_package_must_exist(self):
        with pytest.raises(EntityNotFoundError, match="Package not found or inactive"):
            PackagePricingHandler(_packages()).handle(20, package_id="7")

    def test_no_package_for_quantity(self):
        repo = FakePackageRepository([builders.standard_package()])
        with pytest.raises(EntityNotFoundError, match="No package available for 20 cards"):
            PackagePricingHandler(repo).handle(20)
