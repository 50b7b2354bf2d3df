"""ITPS postage calculation.

The charge is the first-50g rate plus a flat rate for every additional 50 g
or part thereof, with GST applied on the subtotal.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from itps_bot.models.constants import DEFAULT_TAX_RATE, FIRST_SLAB_GRAMS, SLAB_GRAMS, TWOPL
from itps_bot.models.tariff import TariffBreakdown, TariffRecord
from itps_bot.tariff.errors import InvalidWeightError, OutOfRangeError


def _q(x: Decimal) -> Decimal:
    return x.quantize(TWOPL, rounding=ROUND_HALF_UP)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a decimal number: {value!r}") from None


def additional_slab_count(weight_grams: int) -> int:
    """Number of 50 g slabs billed beyond the first 50 g (rounded up)."""
    extra = max(0, weight_grams - FIRST_SLAB_GRAMS)
    return math.ceil(extra / SLAB_GRAMS)


def validate_weight(weight_grams: Any) -> int:
    if weight_grams is None:
        raise InvalidWeightError(InvalidWeightError.MISSING, weight_grams)
    if isinstance(weight_grams, bool) or not isinstance(weight_grams, int):
        raise InvalidWeightError(InvalidWeightError.NOT_INTEGER, weight_grams)
    if weight_grams < 1:
        raise InvalidWeightError(InvalidWeightError.NOT_POSITIVE, weight_grams)
    return weight_grams


def check_weight_limit(record: TariffRecord, weight_grams: int) -> None:
    if weight_grams > record.max_weight_grams:
        raise OutOfRangeError(weight_grams, record.max_weight_grams, record.country)


def compute_tariff(
    record: TariffRecord,
    weight_grams: int,
    tax_rate: Decimal | float | str = DEFAULT_TAX_RATE,
) -> TariffBreakdown:
    """Return the itemized postage for ``weight_grams`` sent under ``record``."""
    weight = validate_weight(weight_grams)
    check_weight_limit(record, weight)
    rate = _to_decimal(tax_rate)
    if not rate.is_finite() or rate < 0:
        raise ValueError("tax_rate must be >= 0")

    base_charge = _to_decimal(record.first_50_charge)
    slabs = 0
    additional_charge = Decimal("0")
    if weight > FIRST_SLAB_GRAMS:
        slabs = additional_slab_count(weight)
        additional_charge = slabs * _to_decimal(record.additional_slab_charge)

    subtotal = base_charge + additional_charge
    tax_amount = _q(subtotal * rate)
    return TariffBreakdown(
        base_charge=_q(base_charge),
        additional_slab_count=slabs,
        additional_charge=_q(additional_charge),
        subtotal=_q(subtotal),
        tax_amount=tax_amount,
        total=_q(subtotal + tax_amount),
        tax_rate=rate,
    )


__all__ = [
    "additional_slab_count",
    "validate_weight",
    "check_weight_limit",
    "compute_tariff",
]
