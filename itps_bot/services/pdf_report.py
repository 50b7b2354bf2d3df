"""PDF receipt generation for ITPS tariff calculations.

Unicode TTF fonts are used when available; otherwise the report falls back to
core fonts and strips characters outside the latin-1 range instead of
crashing the request flow.
"""

from __future__ import annotations

import logging
import os
import re
import unicodedata
from datetime import datetime
from typing import Optional, Tuple

from fpdf import FPDF

from itps_bot.models.constants import CURRENCY_CODE, FIRST_SLAB_GRAMS
from itps_bot.models.tariff import TariffBreakdown, TariffRecord
from itps_bot.utils.formatting import (
    calculation_detail,
    format_money,
    format_percent,
    format_rate,
    slab_note,
)

logger = logging.getLogger(__name__)

# Receipt palette
INK = (26, 26, 46)
MUTED = (61, 61, 92)
NOTE = (136, 136, 136)
PAPER = (245, 240, 232)
CARD_BORDER = (232, 224, 204)
POST_RED = (192, 57, 43)
POST_BLUE = (26, 74, 122)
GST_GREEN = (26, 107, 60)
GOLD = (212, 160, 23)

PAGE_MARGIN = 20


def _first_existing(paths: list[Optional[str]]) -> Optional[str]:
    for p in paths:
        if not p:
            continue
        if os.path.exists(p):
            return p
    return None


def _resolve_font_paths() -> Tuple[Optional[str], Optional[str]]:
    """Return (regular, bold) font paths if found, else (None, None).

    Order of preference:
    - Environment overrides: PDF_FONT_REGULAR, PDF_FONT_BOLD
    - Linux DejaVu
    - Windows Arial
    - macOS Arial
    """
    env_reg = os.getenv("PDF_FONT_REGULAR")
    env_bold = os.getenv("PDF_FONT_BOLD")

    linux_reg = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
    linux_bold = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"

    win_reg = r"C:\\Windows\\Fonts\\arial.ttf"
    win_bold = r"C:\\Windows\\Fonts\\arialbd.ttf"

    mac_reg_candidates = [
        "/Library/Fonts/Arial.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ]
    mac_bold_candidates = [
        "/Library/Fonts/Arial Bold.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    ]

    reg = _first_existing([env_reg, linux_reg, win_reg, *mac_reg_candidates])
    bold = _first_existing([env_bold, linux_bold, win_bold, *mac_bold_candidates])
    if not (reg and bold):
        return None, None
    return reg, bold


def _sanitize(text: object) -> str:
    """Remove characters the latin-1 core fonts cannot render."""
    if not isinstance(text, str):
        text = str(text)
    text = text.replace("\u20b9", "Rs.").replace("\u2192", "->")
    normalized = unicodedata.normalize("NFKC", text)
    out: list[str] = []
    for ch in normalized:
        if ord(ch) > 0xFF:
            continue
        if unicodedata.category(ch).startswith("C"):
            continue
        out.append(ch)
    return "".join(out)


class PDFReport(FPDF):
    """FPDF subclass with the receipt fonts and the airmail strip header."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        reg, bold = _resolve_font_paths()
        self._has_unicode_fonts = bool(reg and bold)
        if self._has_unicode_fonts:
            self.add_font("DejaVu", "", reg)
            self.add_font("DejaVu", "B", bold)
        self.set_margins(PAGE_MARGIN, PAGE_MARGIN, PAGE_MARGIN)
        self.set_auto_page_break(auto=True, margin=PAGE_MARGIN)

    def use_font(self, style: str = "", size: float = 10) -> None:
        family = "DejaVu" if self._has_unicode_fonts else "Helvetica"
        self.set_font(family, style, size)

    def header(self):
        # Red / blue airmail strip across the top edge
        x, step = 0.0, 10.0
        colours = (POST_RED, POST_BLUE)
        i = 0
        while x < self.w:
            self.set_fill_color(*colours[i % 2])
            self.rect(x, 0, step * 0.8, 4, style="F")
            x += step
            i += 1
        self.set_y(PAGE_MARGIN)

    def cell(self, *args, **kwargs):  # type: ignore[override]
        if len(args) >= 3:
            args = list(args)
            args[2] = _sanitize(args[2])
        for key in ("text", "txt"):
            if key in kwargs:
                kwargs[key] = _sanitize(kwargs[key])
        return super().cell(*args, **kwargs)


def receipt_filename(country: str, weight: int) -> str:
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", country)
    return f"ITPS_Receipt_{safe_name}_{weight}g.pdf"


def _summary_cards(pdf: PDFReport, record: TariffRecord, weight: int) -> None:
    cards = [
        ("DESTINATION COUNTRY", record.country, INK),
        ("PACKET WEIGHT", f"{weight} grams", INK),
        ("MAX PERMITTED", record.max_weight_label, POST_BLUE),
    ]
    gap = 4
    width = (pdf.epw - gap * (len(cards) - 1)) / len(cards)
    top = pdf.get_y()
    for i, (label, value, colour) in enumerate(cards):
        x = pdf.l_margin + i * (width + gap)
        pdf.set_draw_color(*CARD_BORDER)
        pdf.set_fill_color(255, 255, 255)
        pdf.rect(x, top, width, 16, style="DF")
        pdf.set_fill_color(*colour)
        pdf.rect(x, top + 15.4, width, 0.6, style="F")
        pdf.set_xy(x + 3, top + 2)
        pdf.use_font("", 6.5)
        pdf.set_text_color(*MUTED)
        pdf.cell(width - 6, 4, label)
        pdf.set_xy(x + 3, top + 7)
        pdf.use_font("B", 10.5)
        pdf.set_text_color(*colour)
        pdf.cell(width - 6, 6, value)
    pdf.set_xy(pdf.l_margin, top + 22)


def _breakdown_row(
    pdf: PDFReport,
    label: str,
    amount: str,
    *,
    note: str = "",
    amount_colour: tuple[int, int, int] = INK,
    fill: tuple[int, int, int] | None = None,
) -> None:
    height = 12 if note else 9
    top = pdf.get_y()
    amount_w = 50
    label_w = pdf.epw - amount_w
    if fill:
        pdf.set_fill_color(*fill)
        pdf.rect(pdf.l_margin, top, pdf.epw, height, style="F")
    pdf.set_xy(pdf.l_margin + 4, top + 2)
    pdf.use_font("", 9.5)
    pdf.set_text_color(*MUTED)
    pdf.cell(label_w - 4, 5, label)
    if note:
        pdf.set_xy(pdf.l_margin + 4, top + 6.5)
        pdf.use_font("", 7.5)
        pdf.set_text_color(*NOTE)
        pdf.cell(label_w - 4, 4, note)
    pdf.set_xy(pdf.l_margin + label_w, top + (height - 6) / 2)
    pdf.use_font("B", 11)
    pdf.set_text_color(*amount_colour)
    pdf.cell(amount_w - 4, 6, amount, align="R")
    pdf.set_draw_color(*CARD_BORDER)
    pdf.line(pdf.l_margin, top + height, pdf.l_margin + pdf.epw, top + height)
    pdf.set_xy(pdf.l_margin, top + height)


def generate_receipt_pdf(
    record: TariffRecord,
    weight: int,
    breakdown: TariffBreakdown,
    filename: str,
    issued_at: datetime | None = None,
) -> str:
    """Write the postage receipt for one calculation to ``filename``."""
    issued_at = issued_at or datetime.now()
    pdf = PDFReport(orientation="P", unit="mm", format="A4")
    pdf.set_compression(False)
    pdf.set_title(_sanitize(f"ITPS Tariff Receipt - {record.country}"))
    pdf.set_author("India Post")
    pdf.add_page()
    pdf.set_fill_color(*PAPER)
    pdf.rect(0, 4, pdf.w, pdf.h - 4, style="F")
    pdf.set_y(PAGE_MARGIN)

    # Header
    pdf.use_font("", 7)
    pdf.set_text_color(*POST_RED)
    pdf.cell(0, 5, "INDIA POST \u00b7 INTERNATIONAL", new_x="LMARGIN", new_y="NEXT")
    pdf.use_font("B", 20)
    pdf.set_text_color(*INK)
    pdf.cell(0, 10, "ITPS Tariff Receipt", new_x="LMARGIN", new_y="NEXT")
    pdf.use_font("", 9)
    pdf.set_text_color(*MUTED)
    pdf.cell(0, 5, "International Tracked Packet Service", new_x="LMARGIN", new_y="NEXT")
    pdf.set_draw_color(*INK)
    pdf.set_line_width(0.6)
    pdf.line(pdf.l_margin, pdf.get_y() + 3, pdf.l_margin + pdf.epw, pdf.get_y() + 3)
    pdf.set_line_width(0.2)
    pdf.ln(8)

    _summary_cards(pdf, record, weight)

    pdf.use_font("B", 12)
    pdf.set_text_color(*INK)
    pdf.cell(pdf.epw - 30, 7, "Postage Breakdown")
    pdf.use_font("", 7)
    pdf.set_text_color(*GST_GREEN)
    pdf.cell(30, 7, "CALCULATED", align="R", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)

    _breakdown_row(
        pdf,
        f"Base Tariff (First {FIRST_SLAB_GRAMS}g)",
        format_money(breakdown.base_charge),
        note=f"{format_rate(record.first_50_charge)} for first {FIRST_SLAB_GRAMS}g",
    )
    if breakdown.additional_slab_count > 0:
        _breakdown_row(
            pdf,
            "Additional Weight Charge",
            format_money(breakdown.additional_charge),
            note=slab_note(record, weight, breakdown),
        )
    _breakdown_row(pdf, "Subtotal (before GST)", format_money(breakdown.subtotal))
    _breakdown_row(
        pdf,
        f"GST @ {format_percent(breakdown.tax_rate)}",
        format_money(breakdown.tax_amount),
        amount_colour=GST_GREEN,
        fill=(236, 240, 232),
    )

    top = pdf.get_y()
    pdf.set_fill_color(*INK)
    pdf.rect(pdf.l_margin, top, pdf.epw, 12, style="F")
    pdf.set_xy(pdf.l_margin + 4, top + 3)
    pdf.use_font("B", 9)
    pdf.set_text_color(*PAPER)
    pdf.cell(pdf.epw / 2, 6, "TOTAL PAYABLE")
    pdf.use_font("B", 15)
    pdf.set_text_color(*GOLD)
    pdf.cell(pdf.epw / 2 - 8, 6, format_money(breakdown.total), align="R")
    pdf.set_xy(pdf.l_margin, top + 18)

    # Calculation detail
    pdf.use_font("", 7)
    pdf.set_text_color(*MUTED)
    pdf.cell(0, 5, "CALCULATION DETAIL", new_x="LMARGIN", new_y="NEXT")
    for label, amount in calculation_detail(record, breakdown):
        pdf.use_font("", 9)
        pdf.set_text_color(85, 85, 85)
        pdf.cell(pdf.epw - 50, 5.5, label)
        pdf.use_font("B", 9)
        pdf.set_text_color(*(GST_GREEN if label.startswith("+ GST") else INK))
        pdf.cell(50, 5.5, amount, align="R", new_x="LMARGIN", new_y="NEXT")

    # Footer
    pdf.ln(8)
    pdf.set_draw_color(*CARD_BORDER)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.l_margin + pdf.epw, pdf.get_y())
    pdf.ln(3)
    stamp = issued_at.strftime("%d %b %Y %H:%M")
    pdf.use_font("", 7.5)
    pdf.set_text_color(*NOTE)
    pdf.cell(pdf.epw - 30, 5, f"Tariffs in {CURRENCY_CODE} \u00b7 Subject to revision \u00b7 {stamp}")
    pdf.use_font("", 9)
    pdf.cell(30, 5, "India Post", align="R")

    pdf.output(filename)
    logger.info("Receipt written to %s", filename)
    return filename


__all__ = ["PDFReport", "generate_receipt_pdf", "receipt_filename"]
