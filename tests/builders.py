"""Helpers that build valid domain objects for tests."""

from __future__ import annotations

from datetime import datetime, timezone

from linkit.domain.model.actor import Actor, Role
from linkit.domain.model.addon import Addon, AddonInputType
from linkit.domain.model.city import City
from linkit.domain.model.country import Country
from linkit.domain.model.custom_order import CompanyInfo, CustomOrder, OrderDetails
from linkit.domain.model.order import CardDesign, DeliveryInfo, PersonalInfo
from linkit.domain.model.package import Package, PackagePricing, PackageType
from linkit.domain.model.product import Product
from linkit.domain.model.value_objects import OPEN_ENDED_MAX, Money, QuantityRange

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

ADMIN = Actor(id="admin-1", role=Role.ADMIN)
CUSTOMER = Actor(id="user-1")
OTHER_CUSTOMER = Actor(id="user-2")


def personal_info(**overrides) -> PersonalInfo:
    values = dict(
        first_name="Lina",
        last_name="Haddad",
        position="Marketing Lead",
        organization="Petra Labs",
        phone_numbers=("+962 79 123 4567",),
        email="Lina@PetraLabs.jo",
    )
    values.update(overrides)
    return PersonalInfo(**values)


def card_design(**overrides) -> CardDesign:
    values = dict(name_on_card="Lina Haddad", color="#000000", color_name="Black")
    values.update(overrides)
    return CardDesign(**values)


def delivery_info(**overrides) -> DeliveryInfo:
    values = dict(country_id="1", city_id="1", address_line1="12 Rainbow St")
    values.update(overrides)
    return DeliveryInfo(**values)


def product(price: str = "100.00", **overrides) -> Product:
    values = dict(id="1", title="Classic NFC Card", price=Money.of(price))
    values.update(overrides)
    return Product(**values)


def country(**overrides) -> Country:
    values = dict(id="1", name="Jordan", code="JO")
    values.update(overrides)
    return Country(**values)


def city(fee: str = "4.00", **overrides) -> City:
    values = dict(id="1", name="Amman", country_id="1", delivery_fee=Money.of(fee))
    values.update(overrides)
    return City(**values)


def addon(price: str = "10.00", **overrides) -> Addon:
    values = dict(
        id="1", title="Gift box", price=Money.of(price), input_type=AddonInputType.TEXT
    )
    values.update(overrides)
    return Addon(**values)


def standard_package(**overrides) -> Package:
    values = dict(
        id="2",
        name="Standard",
        quantity_range=QuantityRange(50, 99),
        pricing=PackagePricing(Money.of("15"), is_fixed_price=True),
        package_type=PackageType.STANDARD,
    )
    values.update(overrides)
    return Package(**values)


def starter_package(**overrides) -> Package:
    values = dict(
        id="1",
        name="Starter",
        quantity_range=QuantityRange(10, 49),
        pricing=PackagePricing(Money.of("20")),
        package_type=PackageType.STARTER,
    )
    values.update(overrides)
    return Package(**values)


def enterprise_package(**overrides) -> Package:
    values = dict(
        id="3",
        name="Enterprise",
        quantity_range=QuantityRange(100, OPEN_ENDED_MAX),
        pricing=PackagePricing(Money.of("12")),
        package_type=PackageType.ENTERPRISE,
    )
    values.update(overrides)
    return Package(**values)


def company_info(**overrides) -> CompanyInfo:
    values = dict(
        company_name="Petra Labs",
        contact_person="Omar Said",
        email="omar@petralabs.jo",
        phone="+962 6 555 0101",
    )
    values.update(overrides)
    return CompanyInfo(**values)


def custom_order(employee_count: int = 20, created_by: str = "user-1") -> CustomOrder:
    return CustomOrder.create(
        company_info(),
        OrderDetails(employee_count=employee_count, message="Matte finish please"),
        created_by=created_by,
        now=NOW,
    )
