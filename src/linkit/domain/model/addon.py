"""Addon reference data: optional priced extras attached to an order."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from linkit.domain.model.deletable import SoftDeletable
from linkit.domain.model.value_objects import Money


class AddonInputType(Enum):
    TEXT = "text"
    NUMBER = "number"
    RADIO = "radio"
    SELECT = "select"
    IMAGE = "image"


@dataclass
class Addon(SoftDeletable):
    id: str
    title: str
    price: Money
    input_type: AddonInputType = AddonInputType.TEXT
    options: list[str] = field(default_factory=list)

    @property
    def expects_image(self) -> bool:
        """Image addons take an uploaded file path as their value."""
        return self.input_type is AddonInputType.IMAGE
