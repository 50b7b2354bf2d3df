from __future__ import annotations

from typing import Iterable

from itps_bot.models.tariff import TariffRecord
from itps_bot.tariff.errors import NotFoundError


def find_tariff(country: str, table: Iterable[TariffRecord]) -> TariffRecord:
    """Return the record whose country matches exactly (case-sensitive)."""
    for record in table:
        if record.country == country:
            return record
    raise NotFoundError(country)


def list_countries(table: Iterable[TariffRecord]) -> list[str]:
    return [record.country for record in table]


__all__ = ["find_tariff", "list_countries"]
