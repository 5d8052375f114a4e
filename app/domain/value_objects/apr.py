"""Annual Percentage Rate value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class APR:
    """Annual Percentage Rate value object."""

    rate: float  # As decimal (e.g., 0.16 for 16%)

    def __post_init__(self) -> None:
        """Validate APR rate."""
        if not 0 <= self.rate <= 1:
            raise ValueError("APR rate must be between 0 and 1 (0% to 100%)")

    @property
    def monthly_rate(self) -> float:
        """Get nominal monthly interest rate."""
        return self.rate / 12

    @property
    def as_percentage(self) -> float:
        """Get APR as percentage (e.g., 3.59 for 3.59%)."""
        # 0.0359 * 100 is not exactly 3.59 in binary floating point
        return round(self.rate * 100, 6)
