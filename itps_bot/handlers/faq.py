from aiogram import Router, types, F
from aiogram.fsm.context import FSMContext

from itps_bot.constants import BTN_FAQ, BTN_CALC
from itps_bot.keyboards.postage import step_menu
from itps_bot.models.constants import FIRST_SLAB_GRAMS, SLAB_GRAMS
from itps_bot.settings import settings
from itps_bot.utils.formatting import format_percent

router = Router()


def faq_text() -> str:
    return (
        "ℹ️ <b>FAQ</b>\n"
        f"- How is postage charged? A flat rate covers the first {FIRST_SLAB_GRAMS}g; "
        f"every further {SLAB_GRAMS}g or part of it is one additional slab.\n"
        f"- Is tax included? GST at {format_percent(settings.TAX_RATE)} is added to the subtotal.\n"
        "- Is there a weight limit? Yes, each destination has a maximum (2 kg or 5 kg).\n"
        f"- How do I start? Press \"{BTN_CALC}\" in the main menu."
    )


@router.message(F.text == BTN_FAQ)
async def show_faq(message: types.Message, state: FSMContext) -> None:
    await message.answer(faq_text(), reply_markup=step_menu(), parse_mode="HTML")
