"""Data Transfer Objects: plain containers that cross layer boundaries.

Request objects carry what the caller asked for into a use case;
response DTOs carry results out without exposing the aggregates.
``as_dict()`` produces the stable JSON field names other components rely
on (``total``, ``finalTotal``, ``customPricing.totalPrice``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from linkit.domain.model.custom_order import CompanyInfo, CustomOrder, OrderDetails
from linkit.domain.model.order import CardDesign, DeliveryInfo, Order, PersonalInfo
from linkit.domain.model.package import Package
from linkit.domain.model.value_objects import Money


def _number(amount: Decimal) -> int | float:
    return int(amount) if amount == amount.to_integral_value() else float(amount)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddonSelection:
    """Input: an addon the customer picked, plus their value for it."""

    addon_id: str
    value: str | None = None


@dataclass(frozen=True)
class PlaceOrderRequest:
    """Input: a standard order submission.

    Sections are optional so a missing section is reported as a
    validation error instead of failing to construct the request.
    """

    product_id: str | None
    personal_info: PersonalInfo | None
    card_design: CardDesign | None
    delivery_info: DeliveryInfo | None
    addons: tuple[AddonSelection, ...] = ()
    addon_images: tuple[str, ...] = ()
    payment_method: str = "cash"
    deposit_transaction_img: str | None = None
    company_logo_upload: str | None = None


@dataclass(frozen=True)
class OrderChanges:
    """Input: a partial order update; ``None`` leaves a section alone."""

    personal_info: PersonalInfo | None = None
    card_design: CardDesign | None = None
    delivery_info: DeliveryInfo | None = None
    payment_method: str | None = None
    notes: str | None = None
    company_logo_upload: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.personal_info,
                self.card_design,
                self.delivery_info,
                self.payment_method,
                self.notes,
                self.company_logo_upload,
            )
        )


@dataclass(frozen=True)
class CustomOrderRequest:
    company_info: CompanyInfo | None
    order_details: OrderDetails | None
    urgency: str = "standard"


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderDTO:
    """Output: a standard order as shown to callers."""

    id: int
    status: str
    product_title: str
    customer_name: str
    card_color: str
    include_logo: bool
    delivery_address: str
    payment_method: str
    currency: str
    product_price: Decimal
    delivery_fee: Decimal
    logo_surcharge: Decimal
    addons_total: Decimal
    total: Decimal
    final_total: Decimal
    estimated_delivery: datetime | None
    printing_date: datetime | None
    shipping_date: datetime | None
    delivery_date: datetime | None
    created_at: datetime
    message: str = ""

    @staticmethod
    def from_order(order: Order, message: str = "") -> OrderDTO:
        summary = order.summary()
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            status=summary.status,
            product_title=order.product_title,
            customer_name=summary.customer_name,
            card_color=summary.card_color,
            include_logo=summary.include_logo,
            delivery_address=summary.delivery_address,
            payment_method=order.payment_method.value,
            currency=order.total.currency,
            product_price=order.product_price.amount,
            delivery_fee=order.delivery_fee.amount,
            logo_surcharge=order.logo_surcharge.amount,
            addons_total=order.addons_total.amount,
            total=order.total.amount,
            final_total=order.final_total.amount,
            estimated_delivery=order.estimated_delivery,
            printing_date=order.printing_date,
            shipping_date=order.shipping_date,
            delivery_date=order.delivery_date,
            created_at=order.created_at,
            message=message,
        )

    @property
    def formatted_total(self) -> str:
        return str(Money(self.total, self.currency))

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status,
            "product": self.product_title,
            "customerName": self.customer_name,
            "cardColor": self.card_color,
            "includeLogo": self.include_logo,
            "deliveryAddress": self.delivery_address,
            "paymentMethod": self.payment_method,
            "currency": self.currency,
            "productPrice": _number(self.product_price),
            "deliveryFee": _number(self.delivery_fee),
            "logoSurcharge": _number(self.logo_surcharge),
            "addonsTotal": _number(self.addons_total),
            "total": _number(self.total),
            "finalTotal": _number(self.final_total),
            "estimatedDelivery": _iso(self.estimated_delivery),
            "printingDate": _iso(self.printing_date),
            "shippingDate": _iso(self.shipping_date),
            "deliveryDate": _iso(self.delivery_date),
            "createdAt": _iso(self.created_at),
            "message": self.message,
        }


@dataclass(frozen=True)
class CustomOrderDTO:
    """Output: a custom order as shown to callers."""

    id: int
    status: str
    status_label: str
    status_description: str
    company_name: str
    contact_person: str
    email: str
    employee_count: int
    total_price: str
    selected_package_id: str | None
    price_per_card: Money | None
    custom_total: Money | None
    admin_notes: str | None
    customer_approved: bool | None
    estimated_delivery: datetime | None
    quoted_at: datetime | None
    approved_at: datetime | None
    completed_at: datetime | None
    message: str = ""

    @staticmethod
    def from_order(
        order: CustomOrder, package: Package | None = None, message: str = ""
    ) -> CustomOrderDTO:
        summary = order.summary(package)
        pricing = order.custom_pricing
        display = order.status.display
        return CustomOrderDTO(
            id=order.id,  # type: ignore[arg-type]
            status=summary.status,
            status_label=display.label,
            status_description=display.description,
            company_name=summary.company_name,
            contact_person=summary.contact_person,
            email=summary.email,
            employee_count=summary.employee_count,
            total_price=summary.total_price,
            selected_package_id=order.selected_package_id,
            price_per_card=pricing.price_per_card if pricing else None,
            custom_total=pricing.total_price if pricing else None,
            admin_notes=order.admin_notes,
            customer_approved=(
                order.customer_response.approved if order.customer_response else None
            ),
            estimated_delivery=order.estimated_delivery,
            quoted_at=order.quoted_at,
            approved_at=order.approved_at,
            completed_at=order.completed_at,
            message=message,
        )

    def as_dict(self) -> dict:
        custom_pricing = None
        if self.price_per_card is not None and self.custom_total is not None:
            custom_pricing = {
                "pricePerCard": _number(self.price_per_card.amount),
                "totalPrice": _number(self.custom_total.amount),
                "currency": self.custom_total.currency,
                "isCustom": True,
            }
        return {
            "id": self.id,
            "status": self.status,
            "statusInfo": {
                "label": self.status_label,
                "description": self.status_description,
            },
            "companyInfo": {
                "companyName": self.company_name,
                "contactPerson": self.contact_person,
                "email": self.email,
            },
            "orderDetails": {"employeeCount": self.employee_count},
            "selectedPackage": self.selected_package_id,
            "customPricing": custom_pricing,
            "formattedTotalPrice": self.total_price,
            "adminNotes": self.admin_notes,
            "customerApproved": self.customer_approved,
            "estimatedDelivery": _iso(self.estimated_delivery),
            "quotedAt": _iso(self.quoted_at),
            "approvedAt": _iso(self.approved_at),
            "completedAt": _iso(self.completed_at),
            "message": self.message,
        }
