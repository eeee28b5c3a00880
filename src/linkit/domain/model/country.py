"""Country aggregate. Cities refer to it by id."""

from __future__ import annotations

import re
from dataclasses import dataclass

from linkit.domain.exceptions import ValidationError
from linkit.domain.model.deletable import SoftDeletable

_CODE_PATTERN = re.compile(r"^[A-Z]{2,3}$")


@dataclass
class Country(SoftDeletable):
    id: str
    name: str
    code: str
    is_active: bool = True
    display_order: int = 0

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Country name is required")
        if len(self.name) > 100:
            raise ValidationError("Country name cannot exceed 100 characters")
        self.code = (self.code or "").strip().upper()
        if not _CODE_PATTERN.match(self.code):
            raise ValidationError(
                f"Country code must be 2-3 letters, got {self.code!r}"
            )
