from aiogram import types
from aiogram_dialog import DialogManager
from aiogram_dialog.widgets.kbd import Button


async def done_dialog(
    callback: types.CallbackQuery,
    button: Button,
    dialog_manager: DialogManager,
):
    await dialog_manager.done()
