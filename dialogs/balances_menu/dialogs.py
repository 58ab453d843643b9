from aiogram_dialog import Dialog, Window
from aiogram_dialog.widgets.kbd import Button, Group, Select, Row
from aiogram_dialog.widgets.text import Const, Format

from dialogs.balances_menu.getters import get_balances
from dialogs.balances_menu.handlers import change_sort, refresh_balances
from dialogs.handlers import done_dialog
from states.dialog_states import BalancesSG

balances_dialog = Dialog(
    Window(
        Format("💰 <b>Token balances</b> | {chain}\n"),
        Format("💳 <a href='{account_url}'>{account}</a>\n"),
        Const("⚠️ Unable to load token data", when="error"),
        Format("<pre>{table}</pre>", when="table"),
        Format("\n🪙 {tokens_shown} of {tokens_total} tokens hold a balance", when="table"),
        Format("🕓 Refresh | <b>{refresh_time} (UTC+0)</b>", when="refresh_time"),
        Group(
            Select(
                Format("{item[label]}"),
                id="sort_key",
                item_id_getter=lambda x: x["id"],
                items="sort_keys",
                on_click=change_sort,
            ),
            width=3,
        ),
        Row(
            Button(text=Const("🔄 Update"), id="update_balances", on_click=refresh_balances),
            Button(text=Const("❌ Close"), id="close_balances", on_click=done_dialog),
        ),
        state=BalancesSG.start,
        getter=get_balances,
    ),
)
