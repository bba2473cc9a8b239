from __future__ import annotations

from decimal import Decimal


def to_plain_string(value: Decimal) -> str:
    """Render without exponent, keeping the scale (``Decimal("2.50")`` -> ``"2.50"``)."""
    return format(value, "f")


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize()
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")
