"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from linkit.application.create_order import CreateOrderHandler
from linkit.application.dto import AddonSelection, PlaceOrderRequest
from linkit.domain.exceptions import EntityNotFoundError, ValidationError
from linkit.domain.model.addon import AddonInputType
from linkit.domain.model.value_objects import Money
from linkit.domain.service.pricing import PricingPolicy
from tests import builders
from tests.builders import CUSTOMER, NOW
from tests.fakes import (
    FakeAddonRepository,
    FakeCityRepository,
    FakeCountryRepository,
    FakeOrderRepository,
    FakeProductRepository,
)


def _setup(pricing_policy=None, cities=None, countries=None):
    """Build handler with fake repos pre-loaded with a small catalog."""
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository([builders.product(price="100.00")])
    city_repo = FakeCityRepository(
        cities
        if cities is not None
        else [
            builders.city(fee="4.00"),
            builders.city(id="2", name="Riyadh", country_id="2", fee="9.00"),
        ]
    )
    country_repo = FakeCountryRepository(
        countries
        if countries is not None
        else [builders.country(), builders.country(id="2", name="Saudi Arabia", code="SA")]
    )
    addon_repo = FakeAddonRepository(
        [
            builders.addon(price="10.00"),
            builders.addon(
                id="2", title="Photo print", price="3.50", input_type=AddonInputType.IMAGE
            ),
        ]
    )
    handler = CreateOrderHandler(
        order_repo,
        product_repo,
        city_repo,
        country_repo,
        addon_repo,
        pricing_policy=pricing_policy,
    )
    return handler, order_repo, product_repo


def _request(**overrides) -> PlaceOrderRequest:
    values = dict(
        product_id="1",
        personal_info=builders.personal_info(),
        card_design=builders.card_design(),
        delivery_info=builders.delivery_info(),
        addons=(AddonSelection("1"),),
    )
    values.update(overrides)
    return PlaceOrderRequest(**values)


class TestCreateOrderHappyPath:

    def test_prices_and_persists(self):
        handler, order_repo, _ = _setup()
        result = handler.handle(_request(), CUSTOMER, now=NOW)

        assert result.id == 1
        assert result.status == "pending"
        assert result.total == Decimal("114.00")
        assert result.final_total == result.total
        assert result.message == "Order created successfully"

        saved = order_repo.get_by_id(1)
        assert saved.created_by == CUSTOMER.id
        assert saved.version == 1
        assert saved.delivery_info.city_name == "Amman"
        assert saved.delivery_info.country_name == "Jordan"

    def test_domestic_delivery_estimate(self):
        handler, _, _ = _setup()
        result = handler.handle(_request(), CUSTOMER, now=NOW)
        assert result.estimated_delivery == NOW + timedelta(days=3)

    def test_international_delivery_estimate_and_fee(self):
        handler, _, _ = _setup()
        request = _request(delivery_info=builders.delivery_info(country_id="2", city_id="2"))
        result = handler.handle(request, CUSTOMER, now=NOW)
        assert result.estimated_delivery == NOW + timedelta(days=5)
        assert result.delivery_fee == Decimal("9.00")
        assert result.total == Decimal("119.00")

    def test_ids_are_sequential(self):
        handler, _, _ = _setup()
        first = handler.handle(_request(), CUSTOMER, now=NOW)
        second = handler.handle(_request(), CUSTOMER, now=NOW)
        assert (first.id, second.id) == (1, 2)

    def test_json_contract(self):
        handler, _, _ = _setup()
        data = handler.handle(_request(), CUSTOMER, now=NOW).as_dict()
        assert data["total"] == 114
        assert data["finalTotal"] == 114
        assert data["currency"] == "JOD"
        assert data["deliveryAddress"] == "12 Rainbow St, Amman, Jordan"


class TestPriceSnapshots:

    def test_addon_snapshot(self):
        handler, order_repo, _ = _setup()
        handler.handle(_request(), CUSTOMER, now=NOW)
        addon = order_repo.get_by_id(1).addons[0]
        assert addon.title == "Gift box"
        assert addon.price == Money.of("10.00")

    def test_product_price_change_does_not_touch_existing_order(self):
        handler, order_repo, product_repo = _setup()
        handler.handle(_request(), CUSTOMER, now=NOW)

        product = product_repo.get_by_id("1")
        product.update_price(Money.of("300.00"))
        product_repo.save(product)

        saved = order_repo.get_by_id(1)
        assert saved.product_price == Money.of("100.00")
        assert saved.total == Money.of("114.00")

    def test_image_addon_takes_uploaded_file(self):
        handler, order_repo, _ = _setup()
        request = _request(
            addons=(AddonSelection("2"),), addon_images=("uploads/photo.jpg",)
        )
        handler.handle(request, CUSTOMER, now=NOW)
        saved = order_repo.get_by_id(1)
        assert saved.addons[0].value == "uploads/photo.jpg"
        assert saved.addon_images == ["uploads/photo.jpg"]

    def test_logo_surcharge_from_policy(self):
        handler, _, _ = _setup(pricing_policy=PricingPolicy(logo_surcharge=Decimal("5")))
        request = _request(
            card_design=builders.card_design(include_printed_logo=True),
            company_logo_upload="uploads/logo.png",
        )
        result = handler.handle(request, CUSTOMER, now=NOW)
        assert result.logo_surcharge == Decimal("5")
        assert result.total == Decimal("119.00")


class TestCreateOrderRejections:

    def test_missing_section(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Card design information is required"):
            handler.handle(_request(card_design=None), CUSTOMER)
        assert order_repo.list_all() == []

    def test_unknown_product(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle(_request(product_id="999"), CUSTOMER)

    def test_missing_city_is_not_found_not_zero_fee(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="City not found"):
            handler.handle(
                _request(delivery_info=builders.delivery_info(city_id="999")), CUSTOMER
            )
        assert order_repo.list_all() == []

    def test_inactive_city_rejected(self):
        handler, _, _ = _setup(cities=[builders.city(is_active=False)])
        with pytest.raises(EntityNotFoundError, match="City not found"):
            handler.handle(_request(), CUSTOMER)

    def test_city_from_another_country_rejected(self):
        handler, _, _ = _setup()
        request = _request(delivery_info=builders.delivery_info(country_id="1", city_id="2"))
        with pytest.raises(ValidationError, match="does not belong"):
            handler.handle(request, CUSTOMER)

    def test_missing_country(self):
        handler, _, _ = _setup(countries=[])
        with pytest.raises(EntityNotFoundError, match="Country not found"):
            handler.handle(_request(), CUSTOMER)

    def test_unknown_addon(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Addon '77' not found"):
            handler.handle(_request(addons=(AddonSelection("77"),)), CUSTOMER)

    def test_bad_payment_method(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="cash or online"):
            handler.handle(_request(payment_method="cheque"), CUSTOMER)

    def test_printed_logo_without_file(self):
        handler, order_repo, _ = _setup()
        request = _request(card_design=builders.card_design(include_printed_logo=True))
        with pytest.raises(ValidationError, match="Company logo is required"):
            handler.handle(request, CUSTOMER)
        assert order_repo.list_all() == []
