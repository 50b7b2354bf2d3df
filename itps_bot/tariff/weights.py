from __future__ import annotations

import re
from typing import Any

from itps_bot.tariff.errors import InvalidWeightError

_LIMIT_RE = re.compile(r"^\s*(\d+(?:[.,]\d+)?)\s*(kg|g)?\s*$", re.IGNORECASE)


def parse_weight(raw: Any) -> int:
    """Convert user input into whole grams.

    Accepts ints and strings such as ``"120"`` or ``"120 g"``.
    """
    if raw is None:
        raise InvalidWeightError(InvalidWeightError.MISSING, raw)
    if isinstance(raw, bool):
        raise InvalidWeightError(InvalidWeightError.NOT_A_NUMBER, raw)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            raise InvalidWeightError(InvalidWeightError.MISSING, raw)
        if text.lower().endswith("g"):
            text = text[:-1].rstrip()
        try:
            number = float(text.replace(",", "."))
        except ValueError:
            raise InvalidWeightError(InvalidWeightError.NOT_A_NUMBER, raw) from None
        if number != number or number in (float("inf"), float("-inf")):
            raise InvalidWeightError(InvalidWeightError.NOT_A_NUMBER, raw)
        if not number.is_integer():
            raise InvalidWeightError(InvalidWeightError.NOT_INTEGER, raw)
        value = int(number)
    if value < 1:
        raise InvalidWeightError(InvalidWeightError.NOT_POSITIVE, raw)
    return value


def parse_max_weight(label: str | int) -> int:
    """Return the weight limit in grams for a label like ``"2 kg"``."""
    if isinstance(label, bool):
        raise ValueError(f"Unrecognised weight limit: {label!r}")
    if isinstance(label, int):
        if label <= 0:
            raise ValueError(f"Weight limit must be positive: {label!r}")
        return label
    m = _LIMIT_RE.match(str(label))
    if not m:
        raise ValueError(f"Unrecognised weight limit: {label!r}")
    amount = float(m.group(1).replace(",", "."))
    unit = (m.group(2) or "g").lower()
    grams = amount * 1000 if unit == "kg" else amount
    if grams <= 0 or not float(grams).is_integer():
        raise ValueError(f"Weight limit must be a positive whole number of grams: {label!r}")
    return int(grams)


__all__ = ["parse_weight", "parse_max_weight"]
