from aiogram.fsm.state import StatesGroup, State


class BalancesSG(StatesGroup):
    start = State()
