"""FSM state groups for bot conversations."""

from aiogram.fsm.state import State, StatesGroup


class CalcStates(StatesGroup):
    """Conversation steps for an ITPS postage calculation."""

    country = State()
    weight = State()
    result = State()


__all__ = ["CalcStates"]
