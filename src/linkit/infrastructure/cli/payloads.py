"""Turn JSON payload files (same field names as the stored records) into
application request objects.

Missing values become empty strings so the domain validators report
them with their usual messages.
"""

from __future__ import annotations

import json
from typing import IO, Any

import click

from linkit.application.dto import (
    AddonSelection,
    CustomOrderRequest,
    OrderChanges,
    PlaceOrderRequest,
)
from linkit.domain.model.custom_order import CompanyInfo, OrderDetails
from linkit.domain.model.order import CardDesign, DeliveryInfo, PersonalInfo


def load_payload(stream: IO[str]) -> dict[str, Any]:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("Payload must be a JSON object")
    return data


def _text(section: dict, key: str) -> str:
    value = section.get(key)
    return "" if value is None else str(value)


def _personal_info(raw: dict | None) -> PersonalInfo | None:
    if raw is None:
        return None
    phones = raw.get("phoneNumbers") or []
    if isinstance(phones, str):
        phones = [phones]
    return PersonalInfo(
        first_name=_text(raw, "firstName"),
        last_name=_text(raw, "lastName"),
        position=_text(raw, "position"),
        organization=_text(raw, "organization"),
        phone_numbers=tuple(str(p) for p in phones),
        email=_text(raw, "email"),
        business_email=raw.get("businessEmail"),
        linkedin_url=raw.get("linkedinUrl"),
        instagram_url=raw.get("instagramUrl"),
    )


def _card_design(raw: dict | None) -> CardDesign | None:
    if raw is None:
        return None
    return CardDesign(
        name_on_card=_text(raw, "nameOnCard"),
        color=_text(raw, "color"),
        color_name=_text(raw, "colorName"),
        include_printed_logo=bool(raw.get("includePrintedLogo", False)),
        company_logo=raw.get("companyLogo"),
    )


def _delivery_info(raw: dict | None) -> DeliveryInfo | None:
    if raw is None:
        return None
    return DeliveryInfo(
        country_id=_text(raw, "country"),
        city_id=_text(raw, "city"),
        address_line1=_text(raw, "addressLine1"),
        address_line2=_text(raw, "addressLine2"),
        postcode=_text(raw, "postcode"),
        use_same_contact=bool(raw.get("useSameContact", True)),
        delivery_phone=_text(raw, "deliveryPhone"),
        delivery_email=_text(raw, "deliveryEmail"),
    )


def place_order_request(data: dict[str, Any]) -> PlaceOrderRequest:
    addons = tuple(
        AddonSelection(addon_id=str(a.get("addon", "")), value=a.get("value"))
        for a in data.get("addons") or []
    )
    return PlaceOrderRequest(
        product_id=data.get("product"),
        personal_info=_personal_info(data.get("personalInfo")),
        card_design=_card_design(data.get("cardDesign")),
        delivery_info=_delivery_info(data.get("deliveryInfo")),
        addons=addons,
        addon_images=tuple(data.get("addonImages") or ()),
        payment_method=data.get("paymentMethod") or "cash",
        deposit_transaction_img=data.get("depositTransactionImg"),
        company_logo_upload=data.get("companyLogoUpload"),
    )


def order_changes(data: dict[str, Any]) -> OrderChanges:
    return OrderChanges(
        personal_info=_personal_info(data.get("personalInfo")),
        card_design=_card_design(data.get("cardDesign")),
        delivery_info=_delivery_info(data.get("deliveryInfo")),
        payment_method=data.get("paymentMethod"),
        notes=data.get("notes"),
        company_logo_upload=data.get("companyLogoUpload"),
    )


def custom_order_request(data: dict[str, Any]) -> CustomOrderRequest:
    info = data.get("companyInfo")
    details = data.get("orderDetails")
    company_info = None
    if info is not None:
        company_info = CompanyInfo(
            company_name=_text(info, "companyName"),
            contact_person=_text(info, "contactPerson"),
            email=_text(info, "email"),
            phone=_text(info, "phone"),
        )
    order_details = None
    if details is not None:
        order_details = OrderDetails(
            employee_count=details.get("employeeCount"),
            message=_text(details, "message"),
        )
    return CustomOrderRequest(
        company_info=company_info,
        order_details=order_details,
        urgency=data.get("urgency") or "standard",
    )
