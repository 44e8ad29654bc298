"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class OrderId:
    """
    Identifier of a single order.

    Assigned by the order service, starting at 1 and never reused.
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"OrderId must be an int, got: {self.value!r}")
        if self.value < 0:
            raise ValueError(f"OrderId cannot be negative: {self.value}")

    def __str__(self) -> str:
        return f"OrderId({self.value})"


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable monetary value in cents.

    $49.99 is stored as ``Money(4999)``.

    CRITICAL: Always an int, never float!
    """

    amount: int

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(
                f"Money amount must be an int count of cents, got: {self.amount!r}"
            )
        if self.amount < 0:
            raise ValueError(f"Money amount cannot be negative: {self.amount}")

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(0)

    @property
    def dollars(self) -> int:
        """Major units (49 for $49.99)."""
        return self.amount // 100

    @property
    def cents(self) -> int:
        """Minor units, 0-99 (99 for $49.99)."""
        return self.amount % 100

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return f"${self.dollars}.{self.cents:02d}"
