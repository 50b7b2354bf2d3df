from __future__ import annotations

from decimal import Decimal
from html import escape
from typing import Union

from tabulate import tabulate

from itps_bot.constants import ERROR_WEIGHT_LIMIT
from itps_bot.models.constants import CURRENCY_PREFIX, FIRST_SLAB_GRAMS
from itps_bot.models.tariff import TariffBreakdown, TariffRecord

Number = Union[int, float, Decimal]


def format_money(v: Number) -> str:
    """Format an amount as ``Rs.1,234.50``."""
    return f"{CURRENCY_PREFIX}{Decimal(str(v)):,.2f}"


def format_rate(v: Number) -> str:
    """Format a rate card figure, dropping ``.00`` for whole rupees."""
    d = Decimal(str(v))
    if d == d.to_integral_value():
        return f"{CURRENCY_PREFIX}{int(d)}"
    return f"{CURRENCY_PREFIX}{d:.2f}"


def format_percent(rate: Number) -> str:
    pct = Decimal(str(rate)) * 100
    if pct == pct.to_integral_value():
        return f"{int(pct)}%"
    return f"{pct.normalize()}%"


def slab_note(record: TariffRecord, weight: int, breakdown: TariffBreakdown) -> str:
    slabs = breakdown.additional_slab_count
    plural = "s" if slabs > 1 else ""
    return (
        f"{slabs} x {format_rate(record.additional_slab_charge)} "
        f"({weight - FIRST_SLAB_GRAMS}g extra - {slabs} slab{plural})"
    )


def calculation_detail(record: TariffRecord, breakdown: TariffBreakdown) -> list[tuple[str, str]]:
    """Return ``(label, amount)`` lines explaining how the total was built."""
    lines = [(f"Base (first {FIRST_SLAB_GRAMS}g)", format_money(breakdown.base_charge))]
    if breakdown.additional_slab_count > 0:
        lines.append((
            f"+ {breakdown.additional_slab_count} add. slab(s) x {format_rate(record.additional_slab_charge)}",
            format_money(breakdown.additional_charge),
        ))
    lines.append((
        f"+ GST {format_percent(breakdown.tax_rate)} on {format_rate(breakdown.subtotal)}",
        format_money(breakdown.tax_amount),
    ))
    return lines


def format_weight_warning(record: TariffRecord) -> str:
    return ERROR_WEIGHT_LIMIT.format(max_weight=record.max_weight_label, country=record.country)


def format_result_message(
    *,
    country: str,
    weight: int,
    record: TariffRecord,
    breakdown: TariffBreakdown,
) -> str:
    """Build the HTML chat message with the postage breakdown."""
    lines: list[str] = []
    lines.append("\U0001F4CA <b>Postage breakdown</b>\n")
    lines.append(f"\U0001F30D Destination: {escape(country)}")
    lines.append(f"⚖️ Weight: {weight} g (max {escape(record.max_weight_label)})\n")

    lines.append(
        f"\U0001F4EE Base tariff: {format_money(breakdown.base_charge)}"
        f" <i>({format_rate(record.first_50_charge)} for first {FIRST_SLAB_GRAMS}g)</i>"
    )
    if breakdown.additional_slab_count > 0:
        lines.append(
            f"➕ Additional weight: {format_money(breakdown.additional_charge)}"
            f" <i>({slab_note(record, weight, breakdown)})</i>"
        )
    lines.append(f"\U0001F4C4 Subtotal: {format_money(breakdown.subtotal)}")
    lines.append(f"\U0001F4C3 GST {format_percent(breakdown.tax_rate)}: {format_money(breakdown.tax_amount)}")
    lines.append(f"✅ <b>Total payable: {format_money(breakdown.total)}</b>\n")

    detail = "\n".join(f"{label}: {amount}" for label, amount in calculation_detail(record, breakdown))
    lines.append(f"<pre>{escape(detail)}</pre>")
    return "\n".join(lines)


def format_breakdown_table(
    *,
    country: str,
    weight: int,
    record: TariffRecord,
    breakdown: TariffBreakdown,
) -> str:
    """Render the breakdown as a console table."""
    table = [
        ["Destination", country],
        ["Weight", f"{weight} g (max {record.max_weight_label})"],
        [f"Base tariff (first {FIRST_SLAB_GRAMS}g)", format_money(breakdown.base_charge)],
    ]
    if breakdown.additional_slab_count > 0:
        table.append([
            f"Additional weight ({slab_note(record, weight, breakdown)})",
            format_money(breakdown.additional_charge),
        ])
    table.extend([
        ["Subtotal (before GST)", format_money(breakdown.subtotal)],
        [f"GST @ {format_percent(breakdown.tax_rate)}", format_money(breakdown.tax_amount)],
        ["Total payable", format_money(breakdown.total)],
    ])
    return tabulate(table, headers=["Description", "Amount"], tablefmt="psql")


def format_rate_table(table: list[TariffRecord] | tuple[TariffRecord, ...]) -> str:
    rows = [
        [r.country, r.max_weight_label, format_rate(r.first_50_charge), format_rate(r.additional_slab_charge)]
        for r in table
    ]
    return tabulate(
        rows,
        headers=["Country", "Max weight", f"First {FIRST_SLAB_GRAMS}g", "Each extra 50g"],
        tablefmt="psql",
    )


__all__ = [
    "format_money",
    "format_rate",
    "format_percent",
    "slab_note",
    "calculation_detail",
    "format_weight_warning",
    "format_result_message",
    "format_breakdown_table",
    "format_rate_table",
]
