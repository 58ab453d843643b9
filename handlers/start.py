import logging

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram import types
from aiogram_dialog import DialogManager, StartMode

from states.dialog_states import BalancesSG

router = Router()
module_logger = logging.getLogger(__name__)


@router.message(CommandStart())
@router.message(Command("balances"))
async def start(msg: types.Message, dialog_manager: DialogManager) -> None:
    try:
        module_logger.info(f"User {msg.from_user.id} opened the balance table")

        await dialog_manager.start(
            state=BalancesSG.start,
            mode=StartMode.RESET_STACK
        )
    except Exception as e:
        module_logger.error(f"Error in start handler: {e}")
        await msg.answer("😔 Error. Try again later.")
