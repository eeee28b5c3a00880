"""Unit tests for the CustomOrder aggregate and its quote workflow."""

from datetime import timedelta

import pytest

from linkit.domain.exceptions import UnauthorizedError, ValidationError
from linkit.domain.model.custom_order import CustomOrder, CustomPricing, OrderDetails
from linkit.domain.model.custom_order_status import (
    STATUS_DISPLAY,
    TRANSITIONS,
    CustomOrderStatus,
)
from linkit.domain.model.package import PackagePricing
from linkit.domain.model.value_objects import Money, QuantityRange
from tests import builders
from tests.builders import ADMIN, CUSTOMER, NOW, OTHER_CUSTOMER

S = CustomOrderStatus


def _quoted(employee_count: int = 20) -> CustomOrder:
    order = builders.custom_order(employee_count=employee_count)
    order.set_custom_pricing(Money.of("12"), actor_id=ADMIN.id, now=NOW)
    return order


class TestCustomOrderCreation:

    def test_starts_pending_without_quote(self):
        order = builders.custom_order()
        assert order.status is S.PENDING
        assert not order.has_quote
        assert order.formatted_total_price() == "Quote pending"
        assert order.created_at == NOW

    def test_contact_fields_normalised(self):
        order = CustomOrder.create(
            builders.company_info(email="Omar@PetraLabs.JO",company_name=" Petra "),
            OrderDetails(employee_count=20, message="  hi  "),
        )
        assert order.company_info.email == "omar@petralabs.jo"
        assert order.company_info.company_name == "Petra"
        assert order.order_details.message == "hi"

    def test_quantity_below_minimum_rejected(self):
        with pytest.raises(ValidationError, match="Minimum order quantity is 10 cards"):
            builders.custom_order(employee_count=9)

    def test_quantity_above_maximum_rejected(self):
        with pytest.raises(ValidationError, match="Maximum order quantity is 10,000 cards"):
            builders.custom_order(employee_count=10001)

    def test_bad_email_rejected(self):
        with pytest.raises(ValidationError, match="Valid email address"):
            CustomOrder.create(
                builders.company_info(email="omar"), OrderDetails(employee_count=20)
            )


class TestTransitions:

    @pytest.mark.parametrize(
        "current, target",
        [(c, t) for c in S for t in S if t in TRANSITIONS[c]],
    )
    def test_allowed_edges(self, current, target):
        order = builders.custom_order()
        order.custom_pricing = CustomPricing(Money.of("12"), Money.of("240"))
        order.status = current
        order.transition_to(target, now=NOW)
        assert order.status is target

    @pytest.mark.parametrize(
        "current, target",
        [(c, t) for c in S for t in S if t not in TRANSITIONS[c]],
    )
    def test_forbidden_edges_leave_state_unchanged(self, current, target):
        order = builders.custom_order()
        order.status = current
        with pytest.raises(ValidationError, match="Cannot transition from"):
            order.transition_to(target, now=NOW)
        assert order.status is current

    def test_every_status_has_transition_and_display_entries(self):
        assert set(TRANSITIONS) == set(S)
        assert set(STATUS_DISPLAY) == set(S)

    def test_quoted_requires_a_price_or_package(self):
        order = builders.custom_order()
        order.transition_to("reviewing", now=NOW)
        with pytest.raises(ValidationError, match="before quoting"):
            order.transition_to("quoted", now=NOW)
        assert order.status is S.REVIEWING
        assert order.quoted_at is None

    def test_terminal_states_have_no_exit(self):
        assert S.COMPLETED.is_terminal
        assert S.CANCELLED.is_terminal
        assert not S.QUOTED.is_terminal

    def test_error_lists_allowed_transitions(self):
        order = builders.custom_order()
        with pytest.raises(ValidationError) as exc_info:
            order.transition_to("approved")
        assert str(exc_info.value) == (
            "Cannot transition from 'pending' to 'approved'. "
            "Allowed transitions: reviewing, cancelled"
        )

    def test_unknown_status_rejected(self):
        order = builders.custom_order()
        with pytest.raises(ValidationError, match="Invalid status. Valid statuses are"):
            order.transition_to("shipped")

    def test_reviewing_records_handler(self):
        order = builders.custom_order()
        order.transition_to("reviewing", actor_id=ADMIN.id, now=NOW)
        assert order.handled_by == ADMIN.id

    def test_completed_timestamp(self):
        order = _quoted()
        order.transition_to("approved", now=NOW)
        order.transition_to("in_production", now=NOW)
        done = NOW + timedelta(days=10)
        order.transition_to("completed", now=done)
        assert order.completed_at == done


class TestCustomPricing:

    def test_quote_for_twenty_cards(self):
        order = _quoted(employee_count=20)
        assert order.status is S.QUOTED
        assert order.custom_pricing.total_price == Money.of("240.00")
        assert order.formatted_total_price() == "240.00 JOD"
        assert order.quoted_at == NOW
        assert order.handled_by == ADMIN.id

    def test_fixed_tier_rejects_custom_price(self):
        order = builders.custom_order(employee_count=60)
        with pytest.raises(ValidationError, match="fixed package pricing"):
            order.set_custom_pricing(Money.of("12"))
        assert order.custom_pricing is None
        assert order.status is S.PENDING

    def test_non_positive_price_rejected(self):
        order = builders.custom_order()
        with pytest.raises(ValidationError, match="positive number"):
            order.set_custom_pricing(Money.zero())

    def test_absurd_price_rejected(self):
        order = builders.custom_order()
        with pytest.raises(ValidationError, match="too high"):
            order.set_custom_pricing(Money.of("5000"))

    def test_cannot_price_approved_order(self):
        order = _quoted()
        order.respond_to_quote(CUSTOMER, approved=True, now=NOW)
        with pytest.raises(ValidationError, match="'approved' status"):
            order.set_custom_pricing(Money.of("10"))

    def test_requote_clears_customer_answer(self):
        order = _quoted()
        order.respond_to_quote(CUSTOMER, approved=False, customer_notes="Too pricey", now=NOW)
        order.set_custom_pricing(Money.of("11"), now=NOW)
        assert order.status is S.QUOTED
        assert order.customer_response is None
        assert order.custom_pricing.total_price == Money.of("220")

    def test_enterprise_savings(self):
        order = builders.custom_order(employee_count=200)
        order.set_custom_pricing(Money.of("12"), now=NOW)
        assert order.estimated_savings() == Money.of("600")

    def test_no_savings_below_enterprise(self):
        assert _quoted(employee_count=20).estimated_savings() is None


class TestAssignPackage:

    def test_fixed_package_quote(self):
        order = builders.custom_order(employee_count=60)
        package = builders.standard_package()
        order.assign_package(package, actor_id=ADMIN.id, now=NOW)
        assert order.status is S.QUOTED
        assert order.selected_package_id == "2"
        assert order.custom_pricing is None
        assert order.quote_total(package) == Money.of("900")

    def test_out_of_range_package_rejected(self):
        order = builders.custom_order(employee_count=60)
        package = builders.standard_package(quantity_range=QuantityRange(50, 59))
        with pytest.raises(ValidationError, match="does not fit this package range"):
            order.assign_package(package)
        assert order.status is S.PENDING

    def test_custom_tier_cannot_take_a_package(self):
        order = builders.custom_order(employee_count=30)
        with pytest.raises(ValidationError, match="use custom pricing instead"):
            order.assign_package(builders.starter_package(), now=NOW)
        assert order.status is S.PENDING
        assert order.selected_package_id is None

    def test_custom_priced_package_rejected(self):
        order = builders.custom_order(employee_count=60)
        package = builders.standard_package(
            pricing=PackagePricing(Money.of("15"), is_fixed_price=False)
        )
        with pytest.raises(ValidationError, match="Only fixed-price packages"):
            order.assign_package(package, now=NOW)
        assert order.status is S.PENDING
        assert not order.has_quote

    def test_quote_total_ignores_custom_priced_package(self):
        order = builders.custom_order(employee_count=60)
        order.assign_package(builders.standard_package(), now=NOW)
        package = builders.standard_package(pricing=PackagePricing(Money.of("15")))
        assert order.quote_total(package) is None

    def test_quote_total_needs_matching_package(self):
        order = builders.custom_order(employee_count=60)
        order.assign_package(builders.standard_package(), now=NOW)
        assert order.quote_total() is None
        assert order.quote_total(builders.enterprise_package()) is None


class TestRespondToQuote:

    def test_owner_approves(self):
        order = _quoted()
        later = NOW + timedelta(days=1)
        order.respond_to_quote(CUSTOMER, approved=True, customer_notes="Go", now=later)
        assert order.status is S.APPROVED
        assert order.approved_at == later
        assert order.customer_response.approved
        assert order.customer_response.customer_notes == "Go"

    def test_owner_declines_stays_quoted(self):
        order = _quoted()
        order.respond_to_quote(CUSTOMER, approved=False, now=NOW)
        assert order.status is S.QUOTED
        assert order.customer_response.approved is False

    def test_non_owner_rejected_and_state_unchanged(self):
        order = _quoted()
        with pytest.raises(UnauthorizedError, match="your own custom orders"):
            order.respond_to_quote(OTHER_CUSTOMER, approved=True, now=NOW)
        assert order.status is S.QUOTED
        assert order.customer_response is None

    def test_unquoted_order_rejected(self):
        order = builders.custom_order()
        with pytest.raises(ValidationError, match="only respond to quoted"):
            order.respond_to_quote(CUSTOMER, approved=True)

    def test_admin_approval_records_implicit_response(self):
        order = _quoted()
        order.transition_to("approved", now=NOW)
        assert order.customer_response.approved
        assert order.customer_response.response_date == NOW


class TestStatusDisplay:

    @pytest.mark.parametrize("status", list(S))
    def test_every_status_has_display(self, status):
        assert status.display.label
        assert status.display.description

    def test_quoted_label(self):
        assert S.QUOTED.display.label == "Quote Provided"
