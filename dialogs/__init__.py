from dialogs.balances_menu.dialogs import balances_dialog


def include_dialogs():
    dialogs = [
        balances_dialog,
    ]

    return dialogs
