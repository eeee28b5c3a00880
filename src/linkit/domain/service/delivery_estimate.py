"""Domain service: estimated delivery dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class Urgency(Enum):
    STANDARD = "standard"
    URGENT = "urgent"
    EXPRESS = "express"


@dataclass(frozen=True)
class DeliveryPolicy:
    domestic_country_code: str = "JO"
    domestic_days: int = 3
    international_days: int = 5
    custom_order_days: int = 10


def estimate_order_delivery(
    ordered_at: datetime, country_code: str | None, policy: DeliveryPolicy
) -> datetime:
    """Domestic deliveries arrive faster than international ones."""
    domestic = (country_code or "").upper() == policy.domestic_country_code.upper()
    days = policy.domestic_days if domestic else policy.international_days
    return ordered_at + timedelta(days=days)


def estimate_custom_order_delivery(
    ordered_at: datetime,
    quantity: int,
    policy: DeliveryPolicy,
    urgency: Urgency = Urgency.STANDARD,
) -> datetime:
    days = policy.custom_order_days
    if quantity > 1000:
        days += 3
    if quantity > 5000:
        days += 7

    if urgency is Urgency.URGENT:
        days = max(5, days - 3)
    elif urgency is Urgency.EXPRESS:
        days = max(3, days - 5)

    return ordered_at + timedelta(days=days)
