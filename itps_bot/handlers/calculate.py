from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from aiogram import Router, types, F
from aiogram.fsm.context import FSMContext
from aiogram.types import FSInputFile

from itps_bot.constants import (
    BTN_CALC,
    BTN_NEW,
    BTN_PDF,
    PROMPT_COUNTRY,
    ERROR_COUNTRY,
    PROMPT_WEIGHT,
    ERROR_WEIGHT_MISSING,
    ERROR_WEIGHT_NOT_A_NUMBER,
    ERROR_WEIGHT_NOT_INTEGER,
    ERROR_WEIGHT_NOT_POSITIVE,
    PROMPT_RESULT_ACTIONS,
    ERROR_NO_CALCULATION,
    ERROR_PDF,
    ERROR_TARIFFS_UNAVAILABLE,
)
from itps_bot.keyboards.postage import country_keyboard, result_keyboard, step_menu
from itps_bot.services.pdf_report import generate_receipt_pdf, receipt_filename
from itps_bot.services.tariffs import get_tariff_table
from itps_bot.settings import settings
from itps_bot.states import CalcStates
from itps_bot.tariff import (
    InvalidWeightError,
    NotFoundError,
    OutOfRangeError,
    TariffError,
    compute_tariff,
    find_tariff,
    list_countries,
    parse_weight,
)
from itps_bot.utils.formatting import format_result_message, format_weight_warning
from itps_bot.utils.navigation import NAV_KEY, NavigationManager, NavStep, reset_to_menu, with_nav

logger = logging.getLogger(__name__)

router = Router()

WEIGHT_ERRORS = {
    InvalidWeightError.MISSING: ERROR_WEIGHT_MISSING,
    InvalidWeightError.NOT_A_NUMBER: ERROR_WEIGHT_NOT_A_NUMBER,
    InvalidWeightError.NOT_INTEGER: ERROR_WEIGHT_NOT_INTEGER,
    InvalidWeightError.NOT_POSITIVE: ERROR_WEIGHT_NOT_POSITIVE,
}


@router.message(F.text.in_({BTN_CALC, BTN_NEW}))
async def start_calc(message: types.Message, state: FSMContext):
    try:
        table = get_tariff_table()
    except (OSError, ValueError):
        logger.exception("Tariff table could not be loaded")
        await message.answer(ERROR_TARIFFS_UNAVAILABLE)
        await reset_to_menu(message, state)
        return
    nav = NavigationManager(total_steps=2)
    await state.update_data(**{NAV_KEY: nav}, country=None, last_calc=None)
    await nav.push(
        message,
        state,
        NavStep(CalcStates.country, PROMPT_COUNTRY, country_keyboard(list_countries(table))),
    )


@router.message(CalcStates.country)
@with_nav
async def get_country(message: types.Message, state: FSMContext, nav: NavigationManager | None):
    table = get_tariff_table()
    try:
        record = find_tariff((message.text or "").strip(), table)
    except NotFoundError:
        await message.answer(ERROR_COUNTRY, reply_markup=country_keyboard(list_countries(table)))
        return
    # A new destination invalidates any earlier result
    await state.update_data(country=record.country, last_calc=None)
    prompt = PROMPT_WEIGHT.format(max_weight=record.max_weight_label)
    await nav.push(message, state, NavStep(CalcStates.weight, prompt, step_menu()))


@router.message(CalcStates.weight)
@with_nav
async def get_weight(message: types.Message, state: FSMContext, nav: NavigationManager | None):
    data = await state.get_data()
    try:
        record = find_tariff(data.get("country") or "", get_tariff_table())
    except NotFoundError:
        await reset_to_menu(message, state)
        return
    try:
        weight = parse_weight(message.text)
        breakdown = compute_tariff(record, weight, tax_rate=settings.TAX_RATE)
    except InvalidWeightError as e:
        await message.answer(WEIGHT_ERRORS.get(e.reason, ERROR_WEIGHT_NOT_A_NUMBER))
        return
    except OutOfRangeError:
        await message.answer(format_weight_warning(record))
        return

    logger.info("ITPS tariff: %s, %s g -> %s", record.country, weight, breakdown.total)
    await state.update_data(last_calc={"country": record.country, "weight": weight})
    text = format_result_message(
        country=record.country,
        weight=weight,
        record=record,
        breakdown=breakdown,
    )
    await message.answer(text, parse_mode="HTML", reply_markup=result_keyboard())
    # Back from the result screen returns to the weight prompt
    result_step = NavStep(CalcStates.result, PROMPT_RESULT_ACTIONS, result_keyboard(), numbered=False)
    if nav is not None:
        await nav.record(state, result_step)
    else:
        await state.set_state(CalcStates.result)


@router.message(CalcStates.result, F.text == BTN_PDF)
async def export_receipt(message: types.Message, state: FSMContext):
    data = await state.get_data()
    last = data.get("last_calc")
    if not last:
        await message.answer(ERROR_NO_CALCULATION)
        return
    weight = last["weight"]
    try:
        record = find_tariff(last["country"], get_tariff_table())
        breakdown = compute_tariff(record, weight, tax_rate=settings.TAX_RATE)
    except (TariffError, OSError, ValueError):
        # The rate table changed since the result was shown
        logger.exception("Stored calculation for %s, %s g is no longer valid", last["country"], weight)
        await message.answer(ERROR_PDF)
        await reset_to_menu(message, state)
        return

    pdf_path = Path(tempfile.mkdtemp(prefix="itps_")) / receipt_filename(record.country, weight)
    try:
        generate_receipt_pdf(record, weight, breakdown, str(pdf_path))
        await message.answer_document(FSInputFile(pdf_path, filename=pdf_path.name))
    except Exception:
        logger.exception("PDF generation failed for %s, %s g", record.country, weight)
        await message.answer(ERROR_PDF, reply_markup=result_keyboard())
    finally:
        if pdf_path.exists():
            os.remove(pdf_path)
        os.rmdir(pdf_path.parent)


@router.message(CalcStates.result)
@with_nav
async def result_actions(message: types.Message, state: FSMContext, nav: NavigationManager | None):
    await message.answer(PROMPT_RESULT_ACTIONS, reply_markup=result_keyboard())
