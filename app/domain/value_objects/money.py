"""Money value object (USD)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """Money value object in US dollars."""

    amount: float

    def __post_init__(self) -> None:
        """Validate money amount."""
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        """Add two money amounts."""
        return Money(self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two money amounts."""
        return Money(self.amount - other.amount)

    def __mul__(self, multiplier: float) -> "Money":
        """Multiply money by a scalar."""
        return Money(self.amount * multiplier)

    def __truediv__(self, divisor: float) -> "Money":
        """Divide money by a scalar."""
        if divisor == 0:
            raise ValueError("Cannot divide by zero")
        return Money(self.amount / divisor)

    def __lt__(self, other: "Money") -> bool:
        """Compare less than."""
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Compare less than or equal."""
        return self.amount <= other.amount
