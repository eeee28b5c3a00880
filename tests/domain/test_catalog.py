"""Unit tests for catalog reference data: products, geography, packages."""

import pytest

from linkit.domain.exceptions import UnauthorizedError, ValidationError
from linkit.domain.model.actor import Actor, Role
from linkit.domain.model.addon import AddonInputType
from linkit.domain.model.country import Country
from linkit.domain.model.product import CardDesignVariant
from linkit.domain.model.value_objects import Money
from tests import builders
from tests.builders import NOW


class TestProduct:

    def test_title_trimmed(self):
        assert builders.product(title="  Metal Card ").title == "Metal Card"

    @pytest.mark.parametrize("title", ["ab", "x" * 101, "   "])
    def test_title_length_enforced(self, title):
        with pytest.raises(ValidationError, match="between 3 and 100 characters"):
            builders.product(title=title)

    def test_rename(self):
        product = builders.product()
        product.rename(" Bamboo Card ")
        assert product.title == "Bamboo Card"

    def test_price_change_must_keep_currency(self):
        product = builders.product()
        with pytest.raises(ValidationError, match="priced in JOD"):
            product.update_price(Money.of("10", "USD"))

    def test_card_designs_unique_by_color(self):
        product = builders.product()
        product.add_card_design(CardDesignVariant("#000000", "Black"))
        with pytest.raises(ValidationError, match="already has a #000000"):
            product.add_card_design(CardDesignVariant("#000000", "Jet"))
        assert product.find_card_design("#000000").color_name == "Black"


class TestSoftDelete:

    def test_delete_and_restore(self):
        product = builders.product()
        product.soft_delete(now=NOW)
        assert product.is_deleted
        assert product.deleted_at == NOW
        product.restore()
        assert not product.is_deleted
        assert product.deleted_at is None

    def test_double_delete_rejected(self):
        city = builders.city()
        city.soft_delete()
        with pytest.raises(ValidationError, match="City is already deleted"):
            city.soft_delete()

    def test_restore_live_record_rejected(self):
        with pytest.raises(ValidationError, match="is not deleted"):
            builders.country().restore()


class TestGeography:

    def test_country_code_upper_cased(self):
        assert Country(id="2", name="Saudi Arabia", code=" sa ").code == "SA"

    def test_bad_country_code_rejected(self):
        with pytest.raises(ValidationError, match="2-3 letters"):
            Country(id="2", name="Nowhere", code="X1")

    def test_city_name_comparison_ignores_case(self):
        assert builders.city().same_name_as(" AMMAN ")

    def test_city_toggle(self):
        city = builders.city()
        assert city.toggle_active() is False
        assert city.toggle_active() is True


class TestPackage:

    def test_availability(self):
        package = builders.standard_package()
        assert package.is_available
        package.toggle_active()
        assert not package.is_available

    def test_quantity_display(self):
        assert builders.enterprise_package().quantity_display == "100+"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Package name is required"):
            builders.standard_package(name=" ")


class TestAddon:

    def test_image_addon(self):
        assert builders.addon(input_type=AddonInputType.IMAGE).expects_image
        assert not builders.addon().expects_image


class TestActor:

    def test_admin_check(self):
        Actor("a", Role.ADMIN).require_admin()
        with pytest.raises(UnauthorizedError, match="restricted to administrators"):
            Actor("u").require_admin()

    def test_ownership(self):
        assert Actor("u").owns("u")
        assert not Actor("u").owns(None)
