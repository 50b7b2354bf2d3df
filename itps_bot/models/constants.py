from __future__ import annotations

from decimal import Decimal

# Weight slabs (grams)
FIRST_SLAB_GRAMS = 50
SLAB_GRAMS = 50

# GST applied on the postage subtotal
DEFAULT_TAX_RATE = Decimal("0.18")

# Money rounding (2 decimal places, HALF_UP)
TWOPL = Decimal("0.01")

CURRENCY_CODE = "INR"
CURRENCY_PREFIX = "Rs."

__all__ = [
    "FIRST_SLAB_GRAMS",
    "SLAB_GRAMS",
    "DEFAULT_TAX_RATE",
    "TWOPL",
    "CURRENCY_CODE",
    "CURRENCY_PREFIX",
]
