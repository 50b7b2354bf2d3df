"""Errors raised by the tariff lookup and engine.

None of them is fatal: callers are expected to report the problem and ask
the user again.
"""

from __future__ import annotations

from typing import Any


class TariffError(Exception):
    """Base class for tariff calculation errors."""


class NotFoundError(TariffError):
    """Raised when a country is absent from the rate table."""

    def __init__(self, country: str):
        self.country = country
        super().__init__(f"No ITPS tariff for country {country!r}")


class InvalidWeightError(TariffError):
    """Raised for a missing, non-numeric, non-integer or non-positive weight."""

    MISSING = "missing"
    NOT_A_NUMBER = "not_a_number"
    NOT_INTEGER = "not_integer"
    NOT_POSITIVE = "not_positive"

    def __init__(self, reason: str, value: Any = None):
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid weight {value!r}: {reason.replace('_', ' ')}")


class OutOfRangeError(TariffError):
    """Raised when a weight exceeds the country's maximum."""

    def __init__(self, weight_grams: int, max_weight_grams: int, country: str = ""):
        self.weight_grams = weight_grams
        self.max_weight_grams = max_weight_grams
        self.country = country
        where = f" for {country}" if country else ""
        super().__init__(
            f"Weight {weight_grams} g exceeds maximum of {max_weight_grams} g{where}"
        )


__all__ = ["TariffError", "NotFoundError", "InvalidWeightError", "OutOfRangeError"]
