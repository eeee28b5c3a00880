"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from linkit.domain.service.delivery_estimate import DeliveryPolicy
from linkit.domain.service.pricing import PricingPolicy
from linkit.infrastructure.mailer import LoggingQuoteMailer
from linkit.infrastructure.persistence.json_addon_repository import JsonAddonRepository
from linkit.infrastructure.persistence.json_city_repository import JsonCityRepository
from linkit.infrastructure.persistence.json_country_repository import (
    JsonCountryRepository,
)
from linkit.infrastructure.persistence.json_custom_order_repository import (
    JsonCustomOrderRepository,
)
from linkit.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from linkit.infrastructure.persistence.json_package_repository import (
    JsonPackageRepository,
)
from linkit.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from linkit.infrastructure.settings import get_settings


def _data_dir() -> Path:
    return get_settings().data_dir


def pricing_policy() -> PricingPolicy:
    return get_settings().pricing_policy()


def delivery_policy() -> DeliveryPolicy:
    return get_settings().delivery_policy()


def quote_mailer() -> LoggingQuoteMailer:
    return LoggingQuoteMailer()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(_data_dir() / "products.json")


def addon_repository() -> JsonAddonRepository:
    return JsonAddonRepository(_data_dir() / "addons.json")


def country_repository() -> JsonCountryRepository:
    return JsonCountryRepository(_data_dir() / "countries.json")


def city_repository() -> JsonCityRepository:
    return JsonCityRepository(_data_dir() / "cities.json")


def package_repository() -> JsonPackageRepository:
    return JsonPackageRepository(_data_dir() / "packages.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(_data_dir() / "orders.json")


def custom_order_repository() -> JsonCustomOrderRepository:
    return JsonCustomOrderRepository(_data_dir() / "custom_orders.json")
