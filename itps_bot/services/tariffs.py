"""Rate table loading.

The ITPS rate card ships as ``data/tariffs.yaml``.  A different file can be
configured through ``TARIFF_DATA_PATH`` and the whole table can be supplied
inline through the ``ITPS_TARIFF_DATA`` environment variable (YAML text),
which takes precedence.  File contents are cached per process."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict
import logging
import os

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from itps_bot.models.constants import CURRENCY_CODE
from itps_bot.models.tariff import TariffRecord
from itps_bot.settings import settings
from itps_bot.tariff.weights import parse_max_weight

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "tariffs.yaml"
ENV_DATA = "ITPS_TARIFF_DATA"


class TariffRow(BaseModel):
    country: str
    max_weight: str | int
    first_50g: Decimal
    additional_50g: Decimal

    @field_validator("country")
    @classmethod
    def _strip_country(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("country must not be empty")
        return v.strip()

    @field_validator("max_weight")
    @classmethod
    def _check_limit(cls, v: str | int) -> str | int:
        parse_max_weight(v)
        return v

    @model_validator(mode="after")
    def _check_charges(self):  # type: ignore[override]
        if self.first_50g < 0 or self.additional_50g < 0:
            raise ValueError("charges must be >= 0")
        return self

    def to_record(self) -> TariffRecord:
        label = self.max_weight if isinstance(self.max_weight, str) else ""
        return TariffRecord(
            country=self.country,
            max_weight_grams=parse_max_weight(self.max_weight),
            first_50_charge=self.first_50g,
            additional_slab_charge=self.additional_50g,
            max_weight_label=label.strip(),
        )


class TariffTable(BaseModel):
    currency: str = CURRENCY_CODE
    tariffs: list[TariffRow]

    @model_validator(mode="after")
    def _unique_countries(self):  # type: ignore[override]
        seen: set[str] = set()
        dupes = []
        for row in self.tariffs:
            if row.country in seen:
                dupes.append(row.country)
            seen.add(row.country)
        if dupes:
            raise ValueError(f"Duplicate countries: {', '.join(sorted(set(dupes)))}")
        if self.currency.upper() != CURRENCY_CODE:
            raise ValueError(f"Only {CURRENCY_CODE} rate tables are supported")
        return self


def parse_tariff_table(data: Dict[str, Any]) -> tuple[TariffRecord, ...]:
    """Validate raw table data and return the records in dataset order."""
    try:
        table = TariffTable.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid tariff table: {e}")
        raise
    return tuple(row.to_record() for row in table.tariffs)


@lru_cache(maxsize=4)
def _load_file(path: str) -> tuple[TariffRecord, ...]:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    records = parse_tariff_table(data or {})
    logger.info("Loaded %s ITPS tariffs from %s", len(records), path)
    return records


def load_tariff_table(path: str | Path | None = None) -> tuple[TariffRecord, ...]:
    """Return the rate table from ``ITPS_TARIFF_DATA`` or a YAML file."""
    env_data = os.environ.get(ENV_DATA)
    if env_data:
        return parse_tariff_table(yaml.safe_load(env_data) or {})
    return _load_file(str(path or DATA_PATH))


def get_tariff_table() -> tuple[TariffRecord, ...]:
    """Return the table configured in settings."""
    return load_tariff_table(settings.TARIFF_DATA_PATH)


def reset_cache() -> None:
    _load_file.cache_clear()


__all__ = [
    "TariffRow",
    "TariffTable",
    "parse_tariff_table",
    "load_tariff_table",
    "get_tariff_table",
    "reset_cache",
]
