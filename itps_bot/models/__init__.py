"""Model helpers and records."""

from .tariff import TariffBreakdown, TariffRecord

__all__ = [
    "TariffRecord",
    "TariffBreakdown",
]
