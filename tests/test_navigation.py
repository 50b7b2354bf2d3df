import asyncio

from aiogram import types

from itps_bot.constants import BTN_BACK, BTN_MAIN_MENU
from itps_bot.states import CalcStates
from itps_bot.utils.navigation import NavigationManager, NavStep, with_nav


class DummyMessage:
    def __init__(self, text: str = "") -> None:
        self.text = text
        self.answers: list[tuple[str, object]] = []

    async def answer(self, text: str, reply_markup=None, **kwargs):
        self.answers.append((text, reply_markup))


class DummyFSM:
    def __init__(self, data=None) -> None:
        self.state = None
        self.cleared = False
        self.data = data or {}

    async def set_state(self, state):
        self.state = state

    async def get_data(self):
        return self.data

    async def clear(self):
        self.cleared = True


def test_nav_push():
    async def scenario():
        nav = NavigationManager(total_steps=2)
        msg = DummyMessage()
        fsm = DummyFSM()
        kb = types.ReplyKeyboardMarkup(keyboard=[])
        step = NavStep(CalcStates.country, "Prompt", kb)
        await nav.push(msg, fsm, step)
        assert fsm.state == CalcStates.country
        assert msg.answers[0][0] == "Step 1/2: Prompt"
        assert msg.answers[0][1] is kb

    asyncio.run(scenario())


def test_handle_nav_back_and_main_menu():
    async def scenario():
        nav = NavigationManager(total_steps=2)
        msg = DummyMessage()
        fsm = DummyFSM()
        kb = types.ReplyKeyboardMarkup(keyboard=[])
        await nav.push(msg, fsm, NavStep(CalcStates.country, "P1", kb))
        await nav.push(msg, fsm, NavStep(CalcStates.weight, "P2", kb))

        back_msg = DummyMessage(BTN_BACK)
        assert await nav.handle_nav(back_msg, fsm) is True
        assert fsm.state == CalcStates.country
        assert back_msg.answers[0][0] == "Step 1/2: P1"

        # Nothing left to go back to
        assert await nav.handle_nav(DummyMessage(BTN_BACK), fsm) is False

        menu_msg = DummyMessage(BTN_MAIN_MENU)
        assert await nav.handle_nav(menu_msg, fsm) is True
        assert fsm.cleared is True
        assert nav.stack == []

        assert await nav.handle_nav(DummyMessage("other"), fsm) is False

    asyncio.run(scenario())


def test_with_nav_passes_manager():
    seen = {}

    @with_nav
    async def handler(message, state, nav=None):
        seen["nav"] = nav

    async def scenario():
        nav = NavigationManager(total_steps=1)
        await handler(DummyMessage("x"), DummyFSM({"_nav": nav}))
        assert seen["nav"] is nav

        seen.clear()
        fsm = DummyFSM({"_nav": nav})
        await handler(DummyMessage(BTN_MAIN_MENU), fsm)
        assert seen == {}
        assert fsm.cleared

    asyncio.run(scenario())


def test_back_from_recorded_result_reopens_last_prompt():
    async def scenario():
        nav = NavigationManager(total_steps=2)
        fsm = DummyFSM()
        kb = types.ReplyKeyboardMarkup(keyboard=[])
        await nav.push(DummyMessage(), fsm, NavStep(CalcStates.country, "P1", kb))
        await nav.push(DummyMessage(), fsm, NavStep(CalcStates.weight, "P2", kb))
        await nav.record(fsm, NavStep(CalcStates.result, "Done", kb, numbered=False))
        assert fsm.state == CalcStates.result

        msg = DummyMessage(BTN_BACK)
        assert await nav.handle_nav(msg, fsm) is True
        assert fsm.state == CalcStates.weight
        assert msg.answers[0][0] == "Step 2/2: P2"

    asyncio.run(scenario())


def test_unnumbered_step_renders_plain_prompt():
    nav = NavigationManager(total_steps=2)
    kb = types.ReplyKeyboardMarkup(keyboard=[])
    assert nav.render(NavStep(CalcStates.result, "Done", kb, numbered=False)) == "Done"
