"""Shared UI constants for the ITPS tariff bot."""

# Button labels
BTN_CALC = "\U0001F4E6 Calculate postage"
BTN_BACK = "⬅️ Back"
BTN_MAIN_MENU = "\U0001F3E0 Main menu"
BTN_FAQ = "ℹ️ FAQ"
BTN_EXIT = "\U0001F6AA Exit"
BTN_PDF = "\U0001F9FE Download PDF receipt"
BTN_NEW = "\U0001F501 New calculation"

__all_buttons__ = [
    "BTN_CALC",
    "BTN_BACK",
    "BTN_MAIN_MENU",
    "BTN_FAQ",
    "BTN_EXIT",
    "BTN_PDF",
    "BTN_NEW",
]

WELCOME_TEXT = (
    "✉️ India Post ITPS tariff calculator.\n"
    "Pick a destination and a packet weight to get the postage with GST."
)
EXIT_TEXT = "Goodbye! Send /start to calculate again."
CANCEL_TEXT = "Calculation cancelled."

# Prompts and error messages
PROMPT_COUNTRY = "Destination country?"
ERROR_COUNTRY = "Select a destination from the keyboard."

PROMPT_WEIGHT = "Packet weight in grams (max {max_weight}):"
ERROR_WEIGHT_MISSING = "Enter the packet weight in grams."
ERROR_WEIGHT_NOT_A_NUMBER = "Weight must be a number of grams, e.g. 120."
ERROR_WEIGHT_NOT_INTEGER = "Enter a whole number of grams, e.g. 120."
ERROR_WEIGHT_NOT_POSITIVE = "Weight must be at least 1 gram."
ERROR_WEIGHT_LIMIT = "Exceeds maximum limit of {max_weight} for {country}"

PROMPT_RESULT_ACTIONS = "Download the receipt or start a new calculation."
ERROR_NO_CALCULATION = "No calculation yet. Press «{calc}» first.".format(calc=BTN_CALC)
ERROR_PDF = "Could not generate PDF. Please try again."
ERROR_TARIFFS_UNAVAILABLE = "Tariff table is unavailable right now. Please try later."

__all__ = [
    *__all_buttons__,
    "WELCOME_TEXT",
    "EXIT_TEXT",
    "CANCEL_TEXT",
    "PROMPT_COUNTRY",
    "ERROR_COUNTRY",
    "PROMPT_WEIGHT",
    "ERROR_WEIGHT_MISSING",
    "ERROR_WEIGHT_NOT_A_NUMBER",
    "ERROR_WEIGHT_NOT_INTEGER",
    "ERROR_WEIGHT_NOT_POSITIVE",
    "ERROR_WEIGHT_LIMIT",
    "PROMPT_RESULT_ACTIONS",
    "ERROR_NO_CALCULATION",
    "ERROR_PDF",
    "ERROR_TARIFFS_UNAVAILABLE",
]
