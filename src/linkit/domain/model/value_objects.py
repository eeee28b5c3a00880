"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from linkit.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "JOD"
SUPPORTED_CURRENCIES = ("JOD", "USD", "EUR")

# Upper bound used by packages that have no real maximum ("100+ cards").
OPEN_ENDED_MAX = 999999


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(
                f"Unsupported currency {self.currency!r}, "
                f"expected one of {', '.join(SUPPORTED_CURRENCIES)}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class QuantityRange:
    """Closed interval of card quantities ``[minimum, maximum]``."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if not isinstance(self.minimum, int) or not isinstance(self.maximum, int):
            raise ValidationError("Quantity range bounds must be integers")
        if self.minimum < 1:
            raise ValidationError("Minimum quantity must be at least 1")
        if self.maximum < self.minimum:
            raise ValidationError(
                "Maximum quantity must be greater than or equal to minimum quantity"
            )

    def contains(self, quantity: int) -> bool:
        return self.minimum <= quantity <= self.maximum

    def overlaps(self, other: QuantityRange) -> bool:
        return self.minimum <= other.maximum and other.minimum <= self.maximum

    def __str__(self) -> str:
        if self.maximum >= OPEN_ENDED_MAX:
            return f"{self.minimum}+"
        return f"{self.minimum}-{self.maximum}"
