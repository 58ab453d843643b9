import logging

from aiogram import types
from aiogram_dialog import DialogManager
from aiogram_dialog.widgets.kbd import Button, Select

from enums.sort import SortKey
from models.dtos import SortState
from services.presenter import toggle_sort

module_logger = logging.getLogger(__name__)


async def change_sort(
    call: types.CallbackQuery,
    widget: Select,
    dialog_manager: DialogManager,
    item_id: str,
):
    try:
        key = SortKey[item_id]
    except KeyError:
        module_logger.warning(f"Unknown sort key -> {item_id}")
        await call.answer("❗️ Unknown column", show_alert=True)
        return

    try:
        current = SortState.from_dict(dialog_manager.dialog_data)
        dialog_manager.dialog_data.update(toggle_sort(current, key).to_dict())
    except Exception as e:
        module_logger.error(f"Error in change_sort handler: {e}")
        await call.answer("😔 Error. Try again later.", show_alert=True)


async def refresh_balances(
    call: types.CallbackQuery,
    button: Button,
    dialog_manager: DialogManager,
):
    service = dialog_manager.middleware_data["balance_service"]

    try:
        snapshot = await service.load()
    except Exception as e:
        module_logger.error(f"Error in refresh_balances handler: {e}")
        await call.answer("😔 Error. Try again later.", show_alert=True)
        return

    if snapshot.error:
        await call.answer("⚠️ Unable to load token data", show_alert=True)
