"""Tariff calculation utilities."""

from .engine import additional_slab_count, check_weight_limit, compute_tariff
from .errors import InvalidWeightError, NotFoundError, OutOfRangeError, TariffError
from .lookup import find_tariff, list_countries
from .weights import parse_max_weight, parse_weight

__all__ = [
    "compute_tariff",
    "additional_slab_count",
    "check_weight_limit",
    "find_tariff",
    "list_countries",
    "parse_weight",
    "parse_max_weight",
    "TariffError",
    "NotFoundError",
    "InvalidWeightError",
    "OutOfRangeError",
]
