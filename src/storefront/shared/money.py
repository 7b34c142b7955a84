"""Money helpers: amounts are stored as integer minor units (cents).

Prices cross the HTTP boundary as decimal numbers. They are converted once,
on the way in, with half-up rounding, and every sum after that is integer
arithmetic.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENT = Decimal("0.01")


def to_cents(amount, field: str = "price") -> int:
    """Convert a decimal amount (str, int, float or Decimal) to integer cents."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError({field: [f"Invalid amount: {amount!r}"]}) from None

    if not value.is_finite():
        raise ValidationError({field: [f"Invalid amount: {amount!r}"]})
    if value < 0:
        raise ValidationError({field: ["Amount cannot be negative"]})

    return int(value.quantize(CENT, rounding=ROUND_HALF_UP) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


def cents_to_float(cents: int) -> float:
    """Render integer cents as a JSON-friendly number."""
    return float(from_cents(cents))
