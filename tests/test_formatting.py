from decimal import Decimal

from itps_bot.tariff import compute_tariff
from itps_bot.utils.formatting import (
    calculation_detail,
    format_breakdown_table,
    format_money,
    format_percent,
    format_rate,
    format_rate_table,
    format_result_message,
    format_weight_warning,
    slab_note,
)


def test_format_money():
    assert format_money(Decimal("413")) == "Rs.413.00"
    assert format_money(63) == "Rs.63.00"
    assert format_money(Decimal("1234.5")) == "Rs.1,234.50"


def test_format_rate():
    assert format_rate(Decimal("50")) == "Rs.50"
    assert format_rate(Decimal("350.00")) == "Rs.350"
    assert format_rate(Decimal("220.5")) == "Rs.220.50"


def test_format_percent():
    assert format_percent(Decimal("0.18")) == "18%"
    assert format_percent(Decimal("0.125")) == "12.5%"
    assert format_percent(0) == "0%"


def test_slab_note_plural(record):
    res = compute_tariff(record, 120)
    assert slab_note(record, 120, res) == "2 x Rs.50 (70g extra - 2 slabs)"


def test_slab_note_singular(record):
    res = compute_tariff(record, 60)
    assert slab_note(record, 60, res) == "1 x Rs.50 (10g extra - 1 slab)"


def test_calculation_detail_with_slabs(record):
    res = compute_tariff(record, 120)
    assert calculation_detail(record, res) == [
        ("Base (first 50g)", "Rs.250.00"),
        ("+ 2 add. slab(s) x Rs.50", "Rs.100.00"),
        ("+ GST 18% on Rs.350", "Rs.63.00"),
    ]


def test_calculation_detail_without_slabs(record):
    res = compute_tariff(record, 50)
    assert calculation_detail(record, res) == [
        ("Base (first 50g)", "Rs.250.00"),
        ("+ GST 18% on Rs.250", "Rs.45.00"),
    ]


def test_format_weight_warning(record):
    assert format_weight_warning(record) == "Exceeds maximum limit of 2 kg for United Kingdom"


def test_format_result_message(record):
    res = compute_tariff(record, 120)
    text = format_result_message(country=record.country, weight=120, record=record, breakdown=res)
    assert "United Kingdom" in text
    assert "Base tariff: Rs.250.00" in text
    assert "Additional weight: Rs.100.00" in text
    assert "2 x Rs.50 (70g extra - 2 slabs)" in text
    assert "Subtotal: Rs.350.00" in text
    assert "GST 18%: Rs.63.00" in text
    assert "Total payable: Rs.413.00" in text


def test_format_result_message_hides_additional_row(record):
    res = compute_tariff(record, 50)
    text = format_result_message(country=record.country, weight=50, record=record, breakdown=res)
    assert "Additional weight" not in text
    assert "Total payable: Rs.295.00" in text


def test_format_result_message_escapes_html(record):
    res = compute_tariff(record, 50)
    text = format_result_message(country="A<b>", weight=50, record=record, breakdown=res)
    assert "A&lt;b&gt;" in text


def test_format_breakdown_table(record):
    res = compute_tariff(record, 120)
    out = format_breakdown_table(country=record.country, weight=120, record=record, breakdown=res)
    assert "Description" in out and "Amount" in out
    assert "Rs.413.00" in out
    assert "GST @ 18%" in out


def test_format_rate_table(table):
    out = format_rate_table(table)
    assert "Nepal" in out
    assert "Rs.220.50" in out
    assert "5 kg" in out
