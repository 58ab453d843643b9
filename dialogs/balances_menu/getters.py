from aiogram.types import User as AIOUser
from aiogram_dialog import DialogManager

from enums.sort import SortKey
from models.dtos import SortState
from services.balances import BalanceService
from services.presenter import present_view
from utils.utils import render_table


def sort_buttons(sort: SortState) -> list[dict]:
    return [
        {
            "id": key.name,
            "label": f"{key.label} {sort.order.arrow}" if key is sort.key else key.label,
        }
        for key in SortKey
    ]


async def get_balances(dialog_manager: DialogManager, event_from_user: AIOUser, **kwargs):
    service: BalanceService = kwargs["balance_service"]
    max_rows = kwargs.get("table_max_rows", 40)

    snapshot = await service.get_snapshot()
    sort = SortState.from_dict(dialog_manager.dialog_data)

    records = present_view(snapshot.records, sort)
    chain = service.chain_config

    return {
        "chain": chain.display_name,
        "account": service.target_account,
        "account_url": chain.address_url(service.target_account),
        "error": snapshot.error,
        "table": None if snapshot.error else render_table(records, max_rows),
        "tokens_total": len(snapshot.records),
        "tokens_shown": len(records),
        "refresh_time": snapshot.loaded_at.strftime("%Y-%m-%d %H:%M:%S") if snapshot.loaded_at else None,
        "sort_keys": sort_buttons(sort),
    }
