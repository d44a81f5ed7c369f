"""Fixed-point number formatting shared by points and polynomials."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

_CENTS = Decimal("0.01")
# Enough digits for any finite double plus two decimals.
_CONTEXT = Context(prec=400)


def format_fixed(value: float) -> str:
    """Two decimals, rounding half away from zero on the shortest repr.

    0.125 -> "0.13", 2.675 -> "2.68", -0.125 -> "-0.13".
    """
    if not math.isfinite(value):
        return f"{value:.2f}"
    rounded = Decimal(repr(float(value))).quantize(_CENTS, rounding=ROUND_HALF_UP,
                                                   context=_CONTEXT)
    return f"{rounded:f}"
