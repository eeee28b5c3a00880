"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.value_objects import OPEN_ENDED_MAX, Money, QuantityRange


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_default_currency_is_jod(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "JOD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported currency"):
            Money.of("1", "GBP")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_below_zero_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            Money.of("3") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("12.50") * 20 == Money.of("250")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5  # type: ignore[operator]

    def test_mixed_currencies_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1", "JOD") + Money.of("1", "USD")

    def test_comparison(self):
        assert Money.of("5") < Money.of("6")
        assert Money.of("6") >= Money.of("6")

    def test_is_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_str_shows_two_decimals_and_currency(self):
        assert str(Money.of("114")) == "114.00 JOD"


# ── QuantityRange ────────────────────────────────────────────────────────────


class TestQuantityRange:

    def test_contains_is_inclusive(self):
        r = QuantityRange(50, 99)
        assert r.contains(50)
        assert r.contains(99)
        assert not r.contains(49)
        assert not r.contains(100)

    def test_minimum_below_one_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            QuantityRange(0, 10)

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError, match="greater than or equal"):
            QuantityRange(20, 10)

    def test_overlap(self):
        assert QuantityRange(10, 49).overlaps(QuantityRange(49, 99))
        assert not QuantityRange(10, 49).overlaps(QuantityRange(50, 99))

    def test_display(self):
        assert str(QuantityRange(10, 49)) == "10-49"
        assert str(QuantityRange(100, OPEN_ENDED_MAX)) == "100+"
