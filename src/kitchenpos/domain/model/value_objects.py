"""Value Objects shared across the domain.

Immutable, compared by value, and validated on construction so an
invalid price or quantity can never be built.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from kitchenpos.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Money:
    """A non-negative monetary amount backed by Decimal."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Price cannot be negative, got {self.amount}")
        if self.amount.is_zero():
            # "-0" parses as a signed zero
            object.__setattr__(self, "amount", self.amount.copy_abs())

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | int | float | Decimal | None) -> Money:
        """Coerce to Decimal, rejecting missing or unparsable input."""
        if amount is None:
            raise ValidationError("Price is required")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """How many units of a product a menu contains; at least one."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be at least 1")

    def __str__(self) -> str:
        return str(self.value)
