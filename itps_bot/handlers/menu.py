"""Entry, exit and escape hatches shared by every screen."""

from aiogram import Router, types, F
from aiogram.filters import Command, CommandStart, StateFilter
from aiogram.fsm.context import FSMContext

from itps_bot.constants import BTN_BACK, BTN_EXIT, BTN_MAIN_MENU, CANCEL_TEXT, EXIT_TEXT, WELCOME_TEXT
from itps_bot.keyboards.postage import main_menu
from itps_bot.utils.navigation import reset_to_menu

router = Router()


@router.message(CommandStart(), StateFilter("*"))
async def cmd_start(message: types.Message, state: FSMContext):
    await state.clear()
    await message.answer(WELCOME_TEXT, reply_markup=main_menu())


@router.message(Command("cancel"), StateFilter("*"))
async def cancel_command(message: types.Message, state: FSMContext):
    # Only confirm a cancellation when a calculation was running
    if await state.get_state() is not None:
        await message.answer(CANCEL_TEXT)
    await reset_to_menu(message, state)


@router.message(F.text == BTN_MAIN_MENU)
@router.message(F.text == BTN_BACK, StateFilter(None))
async def go_main_menu(message: types.Message, state: FSMContext):
    await reset_to_menu(message, state)


@router.message(F.text == BTN_EXIT)
async def exit_bot(message: types.Message, state: FSMContext):
    await state.clear()
    await message.answer(EXIT_TEXT, reply_markup=types.ReplyKeyboardRemove())
