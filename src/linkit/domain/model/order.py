"""Order aggregate for a single personalised NFC card order.

Totals are always produced by the pricing engine from snapshots taken at
creation time; they are never accepted from the client.  The status field
is permissive: admins may move an order to any known status,
but the first entry into printed/shipped/delivered is stamped exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.product import Product
from linkit.domain.model.value_objects import Money
from linkit.domain.service.pricing import compute_order_total
from linkit.domain.service.validation import (
    validate_card_design,
    validate_company_logo,
    validate_delivery_info,
    validate_personal_info,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    PRINTED = "printed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    @classmethod
    def parse(cls, value: OrderStatus | str) -> OrderStatus:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid status: {value!r}") from None

    @property
    def customer_message(self) -> str:
        return _STATUS_MESSAGES.get(self, f"Order status updated to {self.value}")


_STATUS_MESSAGES = {
    OrderStatus.CONFIRMED: "Order confirmed! Your NFC card will be printed soon.",
    OrderStatus.PRINTED: "Your NFC card has been printed and is ready for shipping!",
    OrderStatus.SHIPPED: "Your NFC card has been shipped! You will receive it soon.",
    OrderStatus.DELIVERED: "Order delivered successfully! Thank you for your business.",
}


class PaymentMethod(Enum):
    CASH = "cash"
    ONLINE = "online"

    @classmethod
    def parse(cls, value: PaymentMethod | str) -> PaymentMethod:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                "Payment method must be either cash or online"
            ) from None


@dataclass(frozen=True)
class PersonalInfo:
    first_name: str
    last_name: str
    position: str
    organization: str
    phone_numbers: tuple[str, ...]
    email: str
    business_email: str | None = None
    linkedin_url: str | None = None
    instagram_url: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def primary_phone(self) -> str:
        return self.phone_numbers[0] if self.phone_numbers else ""


@dataclass(frozen=True)
class CardDesign:
    name_on_card: str
    color: str
    color_name: str
    include_printed_logo: bool = False
    company_logo: str | None = None


@dataclass(frozen=True)
class OrderAddon:
    """An addon as chosen on the order, with its price locked in."""

    addon_id: str
    title: str
    price: Money
    value: str | None = None


@dataclass(frozen=True)
class DeliveryInfo:
    country_id: str
    city_id: str
    address_line1: str
    address_line2: str = ""
    country_name: str = ""
    city_name: str = ""
    use_same_contact: bool = True
    delivery_phone: str = ""
    delivery_email: str = ""
    postcode: str = ""

    @property
    def full_address(self) -> str:
        parts = [self.address_line1]
        if self.address_line2:
            parts.append(self.address_line2)
        parts.extend(p for p in (self.city_name, self.country_name) if p)
        return ", ".join(parts)


@dataclass(frozen=True)
class OrderSummary:
    id: int | None
    customer_name: str
    card_color: str
    include_logo: bool
    total: str
    delivery_address: str
    estimated_delivery: datetime | None
    status: str


@dataclass
class Order(SoftDeletable):
    """Aggregate root for standard card orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__`` is
    kept simple so the repository can reconstitute persisted orders without
    re-validating them.
    """

    id: int | None
    product_id: str
    product_title: str
    personal_info: PersonalInfo
    card_design: CardDesign
    delivery_info: DeliveryInfo
    product_price: Money
    delivery_fee: Money
    logo_surcharge: Money
    addons_total: Money
    total: Money
    final_total: Money
    addons: list[OrderAddon] = field(default_factory=list)
    addon_images: list[str] = field(default_factory=list)
    payment_method: PaymentMethod = PaymentMethod.CASH
    deposit_transaction_img: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    estimated_delivery: datetime | None = None
    printing_date: datetime | None = None
    shipping_date: datetime | None = None
    delivery_date: datetime | None = None
    notes: str | None = None
    created_by: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        *,
        product: Product,
        personal_info: PersonalInfo,
        card_design: CardDesign,
        delivery_info: DeliveryInfo,
        delivery_fee: Money,
        logo_surcharge: Money,
        addons: list[OrderAddon] | None = None,
        addon_images: list[str] | None = None,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        deposit_transaction_img: str | None = None,
        created_by: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants and pricing it."""
        for error in (
            validate_personal_info(personal_info),
            validate_card_design(card_design),
            validate_delivery_info(delivery_info),
            validate_company_logo(card_design),
        ):
            if error:
                raise ValidationError(error)

        addons = list(addons or [])
        totals = compute_order_total(
            product.price,
            card_design.include_printed_logo,
            logo_surcharge,
            delivery_fee,
            addons,
        )
        created = now or _now()
        order = Order(
            id=None,
            product_id=product.id,
            product_title=product.title,
            personal_info=personal_info,
            card_design=card_design,
            delivery_info=delivery_info,
            product_price=product.price,
            delivery_fee=delivery_fee,
            logo_surcharge=totals.logo_surcharge,
            addons_total=totals.addons_total,
            total=totals.total,
            final_total=totals.final_total,
            addons=addons,
            addon_images=list(addon_images or []),
            payment_method=payment_method,
            deposit_transaction_img=deposit_transaction_img,
            created_by=created_by,
            created_at=created,
            updated_at=created,
        )
        order.sync_delivery_contact()
        return order

    # --- Mutations ------------------------------------------------------------

    def update_status(
        self, new_status: OrderStatus | str, now: datetime | None = None
    ) -> None:
        """Move to any known status; stamp milestone dates on first entry."""
        status = OrderStatus.parse(new_status)
        now = now or _now()

        self.status = status
        if status is OrderStatus.PRINTED and self.printing_date is None:
            self.printing_date = now
        if status is OrderStatus.SHIPPED and self.shipping_date is None:
            self.shipping_date = now
        if status is OrderStatus.DELIVERED and self.delivery_date is None:
            self.delivery_date = now
        self.updated_at = now

    def update_details(
        self,
        *,
        personal_info: PersonalInfo | None = None,
        card_design: CardDesign | None = None,
        delivery_info: DeliveryInfo | None = None,
        payment_method: PaymentMethod | None = None,
        notes: str | None = None,
        uploaded_logo: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Replace the given sections; omitted sections stay as they are."""
        if card_design is not None:
            error = validate_company_logo(
                card_design, uploaded_logo, self.card_design.company_logo
            )
            if error:
                raise ValidationError(error)
            logo = uploaded_logo or card_design.company_logo or self.card_design.company_logo
            card_design = replace(card_design, company_logo=logo)

        for error in (
            validate_personal_info(personal_info) if personal_info else None,
            validate_card_design(card_design) if card_design else None,
            validate_delivery_info(delivery_info) if delivery_info else None,
        ):
            if error:
                raise ValidationError(error)

        if personal_info is not None:
            self.personal_info = personal_info
        if card_design is not None:
            self.card_design = card_design
        if delivery_info is not None:
            self.delivery_info = delivery_info
        if payment_method is not None:
            self.payment_method = payment_method
        if notes is not None:
            self.notes = notes

        self.sync_delivery_contact()
        self.updated_at = now or _now()

    def reprice(self, delivery_fee: Money, logo_surcharge: Money) -> None:
        """Recompute totals from the locked product and addon prices."""
        totals = compute_order_total(
            self.product_price,
            self.card_design.include_printed_logo,
            logo_surcharge,
            delivery_fee,
            self.addons,
        )
        self.delivery_fee = delivery_fee
        self.logo_surcharge = totals.logo_surcharge
        self.addons_total = totals.addons_total
        self.total = totals.total
        self.final_total = totals.final_total

    def sync_delivery_contact(self) -> None:
        """Mirror the customer's own contact details while the flag holds."""
        if not self.delivery_info.use_same_contact:
            return
        self.delivery_info = replace(
            self.delivery_info,
            delivery_phone=self.personal_info.primary_phone,
            delivery_email=self.personal_info.email.lower(),
        )

    # --- Queries --------------------------------------------------------------

    @property
    def formatted_total(self) -> str:
        return str(self.total)

    def summary(self) -> OrderSummary:
        return OrderSummary(
            id=self.id,
            customer_name=self.personal_info.full_name,
            card_color=self.card_design.color,
            include_logo=self.card_design.include_printed_logo,
            total=self.formatted_total,
            delivery_address=self.delivery_info.full_address,
            estimated_delivery=self.estimated_delivery,
            status=self.status.value,
        )
