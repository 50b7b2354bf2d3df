"""Step navigation for the postage conversation.

Every screen of a calculation is recorded on a per-chat stack kept in the FSM
data under ``_nav``.  Prompt screens are numbered ("Step 1/2: ...") and shown
when entered; the result screen is recorded without being re-sent so that
"Back" from it lands on the weight prompt again.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from aiogram import types
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import State

from itps_bot.constants import BTN_BACK, BTN_MAIN_MENU
from itps_bot.keyboards.postage import main_menu

NAV_KEY = "_nav"


async def reset_to_menu(message: types.Message, state: FSMContext):
    """Clear the FSM and return to the main menu."""
    await state.clear()
    await message.answer(f"{BTN_MAIN_MENU}:", reply_markup=main_menu())


@dataclass
class NavStep:
    state: State
    prompt: str
    kb: types.ReplyKeyboardMarkup
    numbered: bool = True


class NavigationManager:
    def __init__(self, total_steps: int) -> None:
        self.total_steps = total_steps
        self.stack: list[NavStep] = []

    def _number(self) -> int:
        # Rendered steps are always on top of the stack
        return min(sum(1 for s in self.stack if s.numbered), self.total_steps)

    def render(self, step: NavStep) -> str:
        if not step.numbered:
            return step.prompt
        return f"Step {self._number()}/{self.total_steps}: {step.prompt}"

    async def _enter(self, message: types.Message, fsm: FSMContext, step: NavStep) -> None:
        await fsm.set_state(step.state)
        await message.answer(self.render(step), reply_markup=step.kb)

    async def push(self, message: types.Message, fsm: FSMContext, step: NavStep) -> None:
        self.stack.append(step)
        await self._enter(message, fsm, step)

    async def record(self, fsm: FSMContext, step: NavStep) -> None:
        """Put ``step`` on the stack when the caller has already replied."""
        self.stack.append(step)
        await fsm.set_state(step.state)

    async def back(self, message: types.Message, fsm: FSMContext) -> bool:
        if len(self.stack) < 2:
            return False
        self.stack.pop()
        await self._enter(message, fsm, self.stack[-1])
        return True

    async def handle_nav(self, message: types.Message, fsm: FSMContext) -> bool:
        if message.text == BTN_MAIN_MENU:
            self.stack.clear()
            await reset_to_menu(message, fsm)
            return True
        if message.text == BTN_BACK:
            return await self.back(message, fsm)
        return False


def with_nav(handler):
    """Let Back / Main menu through the stack before ``handler`` sees the text."""

    @wraps(handler)
    async def wrapped(message: types.Message, state: FSMContext, *args, **kwargs):
        data = await state.get_data()
        nav: NavigationManager | None = data.get(NAV_KEY)
        if nav and await nav.handle_nav(message, state):
            return
        return await handler(message, state, *args, nav=nav, **kwargs)

    return wrapped


__all__ = ["NAV_KEY", "NavStep", "NavigationManager", "reset_to_menu", "with_nav"]
