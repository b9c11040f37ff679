"""
Float to fixed-point conversion for candle prices.

Prices arrive as binary floats. ``to_decimal`` converts the float exactly
(``Decimal(float)``, the decimal module's own conversion) and then rounds to
the series precision with ROUND_HALF_UP, which is half away from zero.

Precision boundary: the exact conversion sees the float's binary value, not
the price string the exchange quoted. A quoted 2.675 is stored as
2.67499999999999982236431605997495353221893310546875 and therefore rounds to
2.67 at two digits. The guarantee is consistency: the same float and
precision always give the same Decimal.

Plugins ported from the JavaScript or Rust bindings will see a difference
here. decimal.js starts from the shortest string that round-trips the
float ("2.675"), and rust_decimal's ``from_f64`` followed by ``round_dp``
also gives 2.68 for that input. Only values whose binary form sits just
below or above a rounding tie are affected.
"""

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal
from typing import Optional

# Floor for the working precision handed to quantize
MIN_CONTEXT_DIGITS = 28

# Largest precision accepted from a payload; matches rust_decimal's max scale
MAX_PRECISION = 28


def conversion_context(digits: int, rounding: str = ROUND_HALF_UP) -> Context:
    """Context with ``digits`` of working precision and an unbounded exponent range."""
    return Context(
        prec=max(digits, MIN_CONTEXT_DIGITS),
        rounding=rounding,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def quantum_for(precision: int, context: Optional[Context] = None) -> Decimal:
    """Smallest step at ``precision`` fractional digits (1E-precision)."""
    return Decimal(1).scaleb(-precision, context=context or conversion_context(0))


def to_decimal(value: float, precision: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    """
    Convert a float to a Decimal rounded to ``precision`` fractional digits.

    Never raises for finite input: the working context is sized to the
    operand and its exponent range is unbounded, so neither the quantum
    nor quantize can overflow. NaN and infinities are returned as their
    Decimal equivalents without rounding.

    Args:
        value: Floating-point price or volume
        precision: Fractional digits to keep; negative values round to tens, hundreds, ...
        rounding: A ``decimal`` rounding constant

    Returns:
        Decimal with exponent ``-precision``
    """
    exact = Decimal(value)
    if not exact.is_finite():
        return exact

    context = conversion_context(max(exact.adjusted(), 0) + max(precision, 0) + 2, rounding)
    return exact.quantize(quantum_for(precision, context), rounding=rounding, context=context)
