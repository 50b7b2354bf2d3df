import sys
from decimal import Decimal
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from itps_bot.models.tariff import TariffRecord  # noqa: E402


@pytest.fixture
def record() -> TariffRecord:
    return TariffRecord(
        country="United Kingdom",
        max_weight_grams=2000,
        first_50_charge=Decimal("250"),
        additional_slab_charge=Decimal("50"),
        max_weight_label="2 kg",
    )


@pytest.fixture
def table(record):
    return (
        record,
        TariffRecord(
            country="United States of America",
            max_weight_grams=5000,
            first_50_charge=Decimal("470"),
            additional_slab_charge=Decimal("70"),
            max_weight_label="5 kg",
        ),
        TariffRecord(
            country="Nepal",
            max_weight_grams=2000,
            first_50_charge=Decimal("220.50"),
            additional_slab_charge=Decimal("25"),
        ),
    )
