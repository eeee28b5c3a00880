"""Domain service: the "quote ready" e-mail payload.

The core only builds the payload; delivering it is the job of whatever
``QuoteMailer`` the composition root wires in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.custom_order import CustomOrder
from linkit.domain.model.package import Package
from linkit.domain.model.value_objects import Money

QUOTE_VALID_DAYS = 30
SIGNATURE = "LinkIt NFC Cards Team"


@dataclass(frozen=True)
class QuoteEmail:
    recipient: str
    subject: str
    contact_person: str
    company_name: str
    quantity: int
    price_per_card: Money
    total_price: Money
    estimated_delivery: datetime | None = None
    customer_message: str = ""
    valid_days: int = QUOTE_VALID_DAYS

    @property
    def body(self) -> str:
        lines = [
            f"Dear {self.contact_person},",
            "",
            "Thank you for your interest in our custom NFC cards. "
            "We're pleased to provide you with the following quote:",
            "",
            f"Company: {self.company_name}",
            f"Quantity: {self.quantity} NFC cards",
            f"Price per card: {self.price_per_card}",
            f"Total Price: {self.total_price}",
        ]
        if self.estimated_delivery is not None:
            lines.append(f"Estimated Delivery: {self.estimated_delivery:%Y-%m-%d}")
        if self.customer_message:
            lines += ["", "Your Requirements:", self.customer_message]
        lines += [
            "",
            f"This quote is valid for {self.valid_days} days. To proceed with your "
            "order, please reply to this email or contact us directly.",
            "",
            "Best regards,",
            SIGNATURE,
        ]
        return "\n".join(lines)


def build_quote_email(order: CustomOrder, package: Package | None = None) -> QuoteEmail:
    """Build the payload for a quoted order.

    Package-priced orders need the resolved ``package``.
    """
    if order.custom_pricing is not None:
        price_per_card = order.custom_pricing.price_per_card
        total = order.custom_pricing.total_price
    elif package is not None and package.id == order.selected_package_id:
        price_per_card = package.pricing.price_per_card
        total = package.total_for(order.employee_count)
    else:
        raise ValidationError("No pricing set for this custom order")

    info = order.company_info
    return QuoteEmail(
        recipient=info.email,
        subject=f"Custom NFC Cards Quote - {info.company_name}",
        contact_person=info.contact_person,
        company_name=info.company_name,
        quantity=order.employee_count,
        price_per_card=price_per_card,
        total_price=total,
        estimated_delivery=order.estimated_delivery,
        customer_message=order.order_details.message,
    )


class QuoteMailer(ABC):
    """Port to whatever sends e-mail on our behalf."""

    @abstractmethod
    def send_quote(self, email: QuoteEmail) -> None:
        """Hand the payload to the external mailer."""
