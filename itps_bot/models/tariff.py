"""Records shared by the tariff engine and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


def _grams_label(grams: int) -> str:
    if grams % 1000 == 0:
        return f"{grams // 1000} kg"
    return f"{grams} g"


@dataclass(frozen=True)
class TariffRecord:
    """One row of the ITPS rate card."""

    country: str
    max_weight_grams: int
    first_50_charge: Decimal
    additional_slab_charge: Decimal
    max_weight_label: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.max_weight_label:
            object.__setattr__(self, "max_weight_label", _grams_label(self.max_weight_grams))


@dataclass(frozen=True)
class TariffBreakdown:
    base_charge: Decimal
    additional_slab_count: int
    additional_charge: Decimal
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal
    tax_rate: Decimal


__all__ = ["TariffRecord", "TariffBreakdown"]
