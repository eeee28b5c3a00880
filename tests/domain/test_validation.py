"""Unit tests for the validation predicates."""

from decimal import Decimal

import pytest

from linkit.domain.model.custom_order import OrderDetails
from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.service.pricing import PricingPolicy
from linkit.domain.service.validation import (
    is_valid_email,
    is_valid_phone,
    validate_admin_notes,
    validate_company_logo,
    validate_custom_order_fields,
    validate_custom_pricing,
    validate_delivery_info,
    validate_required_fields,
    validate_status_transition,
)
from tests import builders


class TestFormats:

    @pytest.mark.parametrize("phone", ["+962 79 123 4567", "(06) 555-0101", "0791234567"])
    def test_valid_phones(self, phone):
        assert is_valid_phone(phone)

    @pytest.mark.parametrize("phone", ["", None, "call me", "+962-79-ABC"])
    def test_invalid_phones(self, phone):
        assert not is_valid_phone(phone)

    def test_email(self):
        assert is_valid_email("a@b.jo")
        assert not is_valid_email("a@b")
        assert not is_valid_email(None)


class TestRequiredFields:

    def test_all_present(self):
        assert validate_required_fields(
            builders.personal_info(), builders.card_design(), builders.delivery_info(), "1"
        ) is None

    def test_first_missing_section_reported(self):
        assert validate_required_fields(
            None, None, None, None
        ) == "Personal information is required"
        assert validate_required_fields(
            builders.personal_info(), builders.card_design(), None, "1"
        ) == "Delivery information is required"

    def test_missing_product(self):
        assert validate_required_fields(
            builders.personal_info(), builders.card_design(), builders.delivery_info(), ""
        ) == "Product ID is required"


class TestDeliveryInfo:

    def test_separate_contact_needs_valid_phone(self):
        info = builders.delivery_info(use_same_contact=False, delivery_email="x@y.jo")
        assert validate_delivery_info(info) == "Please provide a valid delivery phone number"

    def test_overlong_address(self):
        info = builders.delivery_info(address_line2="x" * 201)
        assert validate_delivery_info(info) == "Address lines cannot exceed 200 characters"


class TestCompanyLogo:

    def test_not_needed_without_printed_logo(self):
        assert validate_company_logo(builders.card_design()) is None

    def test_existing_logo_satisfies(self):
        design = builders.card_design(include_printed_logo=True)
        assert validate_company_logo(design, existing_logo="logos/a.png") is None

    def test_missing_logo(self):
        design = builders.card_design(include_printed_logo=True)
        assert validate_company_logo(design) == (
            "Company logo is required when printed logo is selected"
        )


class TestCustomOrderFields:

    def test_valid(self):
        assert validate_custom_order_fields(
            builders.company_info(), OrderDetails(employee_count=10)
        ) is None

    def test_boolean_count_rejected(self):
        assert "must be a number" in validate_custom_order_fields(
            builders.company_info(), OrderDetails(employee_count=True)
        )

    def test_long_message_rejected(self):
        details = OrderDetails(employee_count=10, message="x" * 1001)
        assert validate_custom_order_fields(builders.company_info(), details) == (
            "Additional message cannot exceed 1000 characters"
        )

    def test_contact_person_required(self):
        info = builders.company_info(contact_person=" ")
        assert validate_custom_order_fields(info, OrderDetails(20)) == (
            "Contact person name is required"
        )


class TestCustomPricingBounds:

    def test_within_bounds(self):
        assert validate_custom_pricing(Decimal("12"), 20) is None

    def test_total_cap(self):
        policy = PricingPolicy(max_quote_total=Decimal("100"))
        assert validate_custom_pricing(Decimal("12"), 20, policy) == (
            "Total price exceeds maximum allowed amount"
        )

    def test_missing_price(self):
        assert validate_custom_pricing(None, 20) == "Price per card must be a positive number"


class TestStatusTransition:

    def test_allowed(self):
        assert validate_status_transition(CustomOrderStatus.PENDING, "reviewing") is None

    def test_terminal_state_lists_none(self):
        assert validate_status_transition(CustomOrderStatus.COMPLETED, "pending") == (
            "Cannot transition from 'completed' to 'pending'. Allowed transitions: none"
        )

    def test_unknown_value(self):
        assert validate_status_transition(CustomOrderStatus.PENDING, "bogus").startswith(
            "Invalid status. Valid statuses are: pending, reviewing, quoted"
        )


class TestNotes:

    def test_admin_notes_limit(self):
        assert validate_admin_notes("x" * 2000) is None
        assert validate_admin_notes("x" * 2001) is not None
