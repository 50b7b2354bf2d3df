"""Reply keyboards for the postage conversation."""

from __future__ import annotations

from typing import Iterable, Sequence

from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from itps_bot.constants import (
    BTN_BACK,
    BTN_CALC,
    BTN_EXIT,
    BTN_FAQ,
    BTN_MAIN_MENU,
    BTN_NEW,
    BTN_PDF,
)

# Bottom row shown under every step of a calculation
STEP_ROW = (BTN_BACK, BTN_MAIN_MENU)


def _reply(rows: Iterable[Sequence[str]]) -> ReplyKeyboardMarkup:
    keyboard = [[KeyboardButton(text=label) for label in row] for row in rows if row]
    return ReplyKeyboardMarkup(keyboard=keyboard, resize_keyboard=True)


def main_menu() -> ReplyKeyboardMarkup:
    return _reply([(BTN_CALC,), (BTN_FAQ, BTN_EXIT)])


def step_menu() -> ReplyKeyboardMarkup:
    """Keyboard for free-text steps such as the weight prompt."""
    return _reply([(BTN_FAQ,), STEP_ROW])


def country_keyboard(countries: Sequence[str], columns: int = 2) -> ReplyKeyboardMarkup:
    # Button text is sent back verbatim and matched case-sensitively
    columns = max(1, columns)
    rows = [tuple(countries[i : i + columns]) for i in range(0, len(countries), columns)]
    rows.append(STEP_ROW)
    return _reply(rows)


def result_keyboard() -> ReplyKeyboardMarkup:
    return _reply([(BTN_PDF,), (BTN_NEW, BTN_BACK), (BTN_MAIN_MENU,)])


__all__ = ["main_menu", "step_menu", "country_keyboard", "result_keyboard"]
