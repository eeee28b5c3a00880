"""Quote-negotiation states of a custom (bulk) order and the allowed edges.

Unlike standard orders, this graph is strictly enforced.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from linkit.domain.exceptions import ValidationError


class CustomOrderStatus(Enum):
    PENDING = "pending"
    REVIEWING = "reviewing"
    QUOTED = "quoted"
    APPROVED = "approved"
    IN_PRODUCTION = "in_production"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: CustomOrderStatus | str) -> CustomOrderStatus:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid status. Valid statuses are: {', '.join(s.value for s in cls)}"
            ) from None

    @property
    def allowed_next(self) -> tuple[CustomOrderStatus, ...]:
        return TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS[self]

    def can_transition_to(self, new_status: CustomOrderStatus) -> bool:
        return new_status in TRANSITIONS[self]

    @property
    def display(self) -> StatusDisplay:
        return STATUS_DISPLAY[self]


S = CustomOrderStatus

TRANSITIONS: dict[CustomOrderStatus, tuple[CustomOrderStatus, ...]] = {
    S.PENDING: (S.REVIEWING, S.CANCELLED),
    S.REVIEWING: (S.QUOTED, S.CANCELLED),
    S.QUOTED: (S.APPROVED, S.CANCELLED),
    S.APPROVED: (S.IN_PRODUCTION, S.CANCELLED),
    S.IN_PRODUCTION: (S.COMPLETED, S.CANCELLED),
    S.COMPLETED: (),
    S.CANCELLED: (),
}


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    color: str
    description: str


STATUS_DISPLAY: dict[CustomOrderStatus, StatusDisplay] = {
    S.PENDING: StatusDisplay(
        "Pending Review", "orange", "Your request has been received and is awaiting review"
    ),
    S.REVIEWING: StatusDisplay(
        "Under Review", "blue", "Our team is reviewing your requirements"
    ),
    S.QUOTED: StatusDisplay(
        "Quote Provided", "purple", "Quote has been sent to you for approval"
    ),
    S.APPROVED: StatusDisplay(
        "Approved", "green", "Quote approved and ready for production"
    ),
    S.IN_PRODUCTION: StatusDisplay(
        "In Production", "blue", "Your NFC cards are being manufactured"
    ),
    S.COMPLETED: StatusDisplay("Completed", "green", "Order completed and delivered"),
    S.CANCELLED: StatusDisplay("Cancelled", "red", "Order has been cancelled"),
}

del S
