"""Convenience exports for service layer."""

from .pdf_report import generate_receipt_pdf, receipt_filename
from .tariffs import get_tariff_table, load_tariff_table

__all__ = [
    "generate_receipt_pdf",
    "receipt_filename",
    "get_tariff_table",
    "load_tariff_table",
]
