"""Domain service: validation predicates.

Each predicate returns ``None`` when the input is acceptable, or a
human-readable message describing the first problem found.  They never
raise for expected business-rule violations; callers decide whether to
turn a message into a ``ValidationError``.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import TYPE_CHECKING

from linkit.domain.model.custom_order_status import CustomOrderStatus
from linkit.domain.service.pricing import (
    MAX_CUSTOM_QUANTITY,
    MIN_CUSTOM_QUANTITY,
    PricingPolicy,
)

if TYPE_CHECKING:
    from linkit.domain.model.custom_order import CompanyInfo, OrderDetails
    from linkit.domain.model.order import CardDesign, DeliveryInfo, PersonalInfo

PHONE_PATTERN = re.compile(r"^[+]?[0-9\s\-()]+$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MAX_MESSAGE_LENGTH = 1000
MAX_ADMIN_NOTES_LENGTH = 2000
MAX_CUSTOMER_NOTES_LENGTH = 1000


def is_valid_phone(phone: str | None) -> bool:
    return bool(phone) and PHONE_PATTERN.match(phone) is not None


def is_valid_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


# ---------------------------------------------------------------------------
# Standard orders
# ---------------------------------------------------------------------------


def validate_required_fields(
    personal_info: PersonalInfo | None,
    card_design: CardDesign | None,
    delivery_info: DeliveryInfo | None,
    product_id: str | None,
) -> str | None:
    if personal_info is None:
        return "Personal information is required"
    if card_design is None:
        return "Card design information is required"
    if delivery_info is None:
        return "Delivery information is required"
    if not product_id:
        return "Product ID is required"
    return None


def validate_personal_info(personal_info: PersonalInfo) -> str | None:
    if not personal_info.first_name.strip():
        return "First name is required"
    if len(personal_info.first_name) > 50:
        return "First name cannot exceed 50 characters"
    if not personal_info.last_name.strip():
        return "Last name is required"
    if len(personal_info.last_name) > 50:
        return "Last name cannot exceed 50 characters"
    if not personal_info.phone_numbers:
        return "At least one phone number is required"
    for phone in personal_info.phone_numbers:
        if not is_valid_phone(phone):
            return "Please provide a valid phone number"
    if not is_valid_email(personal_info.email):
        return "Please provide a valid email"
    return None


def validate_card_design(card_design: CardDesign) -> str | None:
    if not card_design.name_on_card.strip():
        return "Name on card is required"
    if len(card_design.name_on_card) > 100:
        return "Name on card cannot exceed 100 characters"
    if not card_design.color:
        return "Card color is required"
    if not card_design.color_name.strip():
        return "Card color name is required"
    return None


def validate_delivery_info(delivery_info: DeliveryInfo) -> str | None:
    if not delivery_info.country_id:
        return "Country reference is required"
    if not delivery_info.city_id:
        return "City reference is required"
    if not delivery_info.address_line1.strip():
        return "Address line 1 is required"
    if len(delivery_info.address_line1) > 200 or len(delivery_info.address_line2) > 200:
        return "Address lines cannot exceed 200 characters"
    if not delivery_info.use_same_contact:
        if not is_valid_phone(delivery_info.delivery_phone):
            return "Please provide a valid delivery phone number"
        if not is_valid_email(delivery_info.delivery_email):
            return "Please provide a valid delivery email"
    return None


def validate_company_logo(
    card_design: CardDesign | None,
    uploaded_logo: str | None = None,
    existing_logo: str | None = None,
) -> str | None:
    """A printed logo needs a logo file: newly uploaded or already on file."""
    if card_design is None or not card_design.include_printed_logo:
        return None
    if card_design.company_logo or uploaded_logo or existing_logo:
        return None
    return "Company logo is required when printed logo is selected"


# ---------------------------------------------------------------------------
# Custom orders
# ---------------------------------------------------------------------------


def validate_custom_order_fields(
    company_info: CompanyInfo | None, order_details: OrderDetails | None
) -> str | None:
    if company_info is None:
        return "Company information is required"

    company_name = (company_info.company_name or "").strip()
    if not company_name:
        return "Company name is required"
    if len(company_name) > 100:
        return "Company name cannot exceed 100 characters"

    contact_person = (company_info.contact_person or "").strip()
    if not contact_person:
        return "Contact person name is required"
    if len(contact_person) > 50:
        return "Contact person name cannot exceed 50 characters"

    if not is_valid_email(company_info.email):
        return "Valid email address is required"

    if not (company_info.phone or "").strip():
        return "Phone number is required"
    if not is_valid_phone(company_info.phone):
        return "Please provide a valid phone number"

    if order_details is None:
        return "Order details are required"

    count = order_details.employee_count
    if not isinstance(count, int) or isinstance(count, bool):
        return "Number of employees/cards is required and must be a number"
    if count < MIN_CUSTOM_QUANTITY:
        return f"Minimum order quantity is {MIN_CUSTOM_QUANTITY} cards"
    if count > MAX_CUSTOM_QUANTITY:
        return f"Maximum order quantity is {MAX_CUSTOM_QUANTITY:,} cards"

    if order_details.message and len(order_details.message) > MAX_MESSAGE_LENGTH:
        return f"Additional message cannot exceed {MAX_MESSAGE_LENGTH} characters"
    return None


def validate_custom_pricing(
    price_per_card: Decimal | None,
    employee_count: int,
    policy: PricingPolicy | None = None,
) -> str | None:
    """Sanity bounds against operator typos, not business limits."""
    policy = policy or PricingPolicy()
    if price_per_card is None or price_per_card <= 0:
        return "Price per card must be a positive number"
    if price_per_card > policy.max_price_per_card:
        return "Price per card seems too high. Please verify."
    if price_per_card * employee_count > policy.max_quote_total:
        return "Total price exceeds maximum allowed amount"
    return None


def validate_status_transition(
    current: CustomOrderStatus, new_status: CustomOrderStatus | str
) -> str | None:
    valid = [s.value for s in CustomOrderStatus]
    if isinstance(new_status, str) and new_status not in valid:
        return f"Invalid status. Valid statuses are: {', '.join(valid)}"

    target = CustomOrderStatus(new_status)
    if current.can_transition_to(target):
        return None
    allowed = ", ".join(s.value for s in current.allowed_next) or "none"
    return (
        f"Cannot transition from '{current.value}' to '{target.value}'. "
        f"Allowed transitions: {allowed}"
    )


def validate_admin_notes(notes: str | None) -> str | None:
    if notes and len(notes) > MAX_ADMIN_NOTES_LENGTH:
        return f"Admin notes cannot exceed {MAX_ADMIN_NOTES_LENGTH} characters"
    return None


def validate_customer_notes(notes: str | None) -> str | None:
    if notes and len(notes) > MAX_CUSTOMER_NOTES_LENGTH:
        return f"Customer notes cannot exceed {MAX_CUSTOMER_NOTES_LENGTH} characters"
    return None
