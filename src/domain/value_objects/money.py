"""
Money value object.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.domain.exceptions.validation_error import InvalidArgumentError

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount in a single currency."""

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        """Normalize and validate amount and currency."""
        if self.amount is None:
            raise InvalidArgumentError("Amount is required")
        try:
            amount = Decimal(str(self.amount))
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid amount: {self.amount!r}")
        if not amount.is_finite():
            raise InvalidArgumentError(f"Invalid amount: {self.amount!r}")
        if amount < 0:
            raise InvalidArgumentError("Amount cannot be negative")

        currency = (self.currency or "").strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise InvalidArgumentError(
                f"Currency must be a 3-letter code, got {self.currency!r}"
            )

        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Get a zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def add(self, other: "Money") -> "Money":
        """Add an amount in the same currency."""
        self._ensure_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract an amount in the same currency; the result cannot go negative."""
        self._ensure_same_currency(other, "subtract")
        result = self.amount - other.amount
        if result < 0:
            raise InvalidArgumentError(
                f"Cannot subtract {other} from {self}. Result would be negative."
            )
        return Money(result, self.currency)

    def _ensure_same_currency(self, other: "Money", operation: str) -> None:
        if other is None:
            raise InvalidArgumentError(f"Cannot {operation} a missing amount")
        if self.currency != other.currency:
            raise InvalidArgumentError(
                f"Cannot {operation} money with different currencies: "
                f"{self.currency} and {other.currency}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"amount": str(self.amount), "currency": self.currency}

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"
