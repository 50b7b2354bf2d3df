"""
ITPS Tariff Calculator
======================

Command line tool for a single ITPS postage calculation.

Usage:
    itps-tariff --list
    itps-tariff "United Kingdom" 120
    itps-tariff Japan 480 --pdf receipt.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

import yaml

from itps_bot.services.pdf_report import generate_receipt_pdf, receipt_filename
from itps_bot.services.tariffs import load_tariff_table
from itps_bot.settings import settings
from itps_bot.tariff import TariffError, compute_tariff, find_tariff, parse_weight
from itps_bot.utils.formatting import format_breakdown_table, format_rate_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itps-tariff",
        description="Calculate India Post ITPS postage with GST.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("country", nargs="?", help="Destination country, exactly as in the rate table")
    parser.add_argument("weight", nargs="?", help="Packet weight in grams")
    parser.add_argument("--list", action="store_true", help="Print the rate table and exit")
    parser.add_argument("--tax-rate", default=None, help=f"GST rate (default: {settings.TAX_RATE})")
    parser.add_argument(
        "--pdf",
        nargs="?",
        const="",
        default=None,
        metavar="FILE",
        help="Also write a PDF receipt (default name: ITPS_Receipt_<country>_<weight>g.pdf)",
    )
    parser.add_argument("--data", default=settings.TARIFF_DATA_PATH, help="Rate table YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _tax_rate(raw: str) -> Decimal:
    """Parse ``--tax-rate`` with the same 0..1 bounds as ``TAX_RATE``."""
    try:
        rate = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"Not a decimal number: {raw!r}") from None
    if not rate.is_finite() or not 0 <= rate <= 1:
        raise ValueError(f"tax rate must be within 0..1, got {raw} (use 0.18 for 18%)")
    return rate


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    if args.country is None and not args.list:
        parser.print_usage(sys.stderr)
        print("error: country and weight are required", file=sys.stderr)
        return 2

    try:
        table = load_tariff_table(args.data)
        if args.list:
            print(format_rate_table(table))
            return 0
        record = find_tariff(args.country, table)
        weight = parse_weight(args.weight)
        tax_rate = settings.TAX_RATE if args.tax_rate is None else _tax_rate(args.tax_rate)
        breakdown = compute_tariff(record, weight, tax_rate=tax_rate)
    except (TariffError, OSError, ValueError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_breakdown_table(country=record.country, weight=weight, record=record, breakdown=breakdown))

    if args.pdf is not None:
        filename = args.pdf or receipt_filename(record.country, weight)
        generate_receipt_pdf(record, weight, breakdown, filename)
        print(f"Receipt saved to {filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
