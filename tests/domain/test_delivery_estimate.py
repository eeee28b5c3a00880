"""Unit tests for delivery date estimates."""

from datetime import timedelta

import pytest

from linkit.domain.service.delivery_estimate import (
    DeliveryPolicy,
    Urgency,
    estimate_custom_order_delivery,
    estimate_order_delivery,
)
from tests.builders import NOW

POLICY = DeliveryPolicy()


class TestStandardOrders:

    def test_domestic(self):
        assert estimate_order_delivery(NOW, "jo", POLICY) == NOW + timedelta(days=3)

    def test_international(self):
        assert estimate_order_delivery(NOW, "SA", POLICY) == NOW + timedelta(days=5)

    def test_unknown_country_is_international(self):
        assert estimate_order_delivery(NOW, None, POLICY) == NOW + timedelta(days=5)


class TestCustomOrders:

    @pytest.mark.parametrize(
        "quantity, urgency, days",
        [
            (20, Urgency.STANDARD, 10),
            (1001, Urgency.STANDARD, 13),
            (5001, Urgency.STANDARD, 20),
            (20, Urgency.URGENT, 7),
            (20, Urgency.EXPRESS, 5),
            (5001, Urgency.EXPRESS, 15),
        ],
    )
    def test_days(self, quantity, urgency, days):
        assert estimate_custom_order_delivery(NOW, quantity, POLICY, urgency) == (
            NOW + timedelta(days=days)
        )

    def test_floors_apply_to_short_base(self):
        policy = DeliveryPolicy(custom_order_days=6)
        assert estimate_custom_order_delivery(NOW, 20, policy, Urgency.URGENT) == (
            NOW + timedelta(days=5)
        )
        assert estimate_custom_order_delivery(NOW, 20, policy, Urgency.EXPRESS) == (
            NOW + timedelta(days=3)
        )
