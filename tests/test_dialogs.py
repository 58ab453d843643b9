from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from chains.polygon import polygon
from dialogs.balances_menu.getters import get_balances, sort_buttons
from dialogs.balances_menu.handlers import change_sort, refresh_balances
from enums.sort import SortKey, SortOrder
from models.dtos import BalanceSnapshot, SortState
from services.balances import LOAD_ERROR
from tests.factories import TARGET, TOKENS, record

LOADED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_service(snapshot):
    service = MagicMock()
    service.chain_config = polygon
    service.target_account = TARGET
    service.get_snapshot = AsyncMock(return_value=snapshot)
    service.load = AsyncMock(return_value=snapshot)
    return service


def make_manager(dialog_data=None, service=None):
    manager = MagicMock()
    manager.dialog_data = dialog_data if dialog_data is not None else {}
    manager.middleware_data = {"balance_service": service}
    return manager


@pytest.mark.asyncio
async def test_getter_renders_sorted_nonzero_rows():
    snapshot = BalanceSnapshot(
        records=(
            record(TOKENS[0], symbol="AAA", total_supply="1", balance="0"),
            record(TOKENS[1], symbol="BBB", total_supply="500", balance="250"),
            record(TOKENS[2], symbol="CCC", total_supply="9", balance="9"),
        ),
        loaded_at=LOADED_AT,
    )
    manager = make_manager(SortState(SortKey.BALANCE, SortOrder.DESC).to_dict())

    data = await get_balances(manager, MagicMock(), balance_service=make_service(snapshot), table_max_rows=10)

    lines = data["table"].splitlines()
    assert [line.split()[0] for line in lines[1:]] == ["BBB", "CCC"]
    assert data["tokens_shown"] == 2
    assert data["tokens_total"] == 3
    assert data["account_url"] == f"https://polygonscan.com/address/{TARGET}"
    assert data["refresh_time"] == "2024-01-02 03:04:05"
    assert data["error"] is None


@pytest.mark.asyncio
async def test_getter_exposes_load_error():
    snapshot = BalanceSnapshot(error=LOAD_ERROR, loaded_at=LOADED_AT)

    data = await get_balances(make_manager(), MagicMock(), balance_service=make_service(snapshot))

    assert data["error"] == LOAD_ERROR
    assert data["table"] is None


def test_sort_buttons_mark_active_key():
    buttons = sort_buttons(SortState(SortKey.BALANCE, SortOrder.DESC))

    assert {"id": "BALANCE", "label": "Balance ▼"} in buttons
    assert {"id": "ADDRESS", "label": "Address"} in buttons
    assert len(buttons) == len(SortKey)


@pytest.mark.asyncio
async def test_change_sort_toggles_dialog_state():
    manager = make_manager()
    call = AsyncMock()

    await change_sort(call, MagicMock(), manager, "BALANCE")
    assert SortState.from_dict(manager.dialog_data) == SortState(SortKey.BALANCE, SortOrder.ASC)

    await change_sort(call, MagicMock(), manager, "BALANCE")
    assert SortState.from_dict(manager.dialog_data) == SortState(SortKey.BALANCE, SortOrder.DESC)

    await change_sort(call, MagicMock(), manager, "ADDRESS")
    assert SortState.from_dict(manager.dialog_data) == SortState(SortKey.ADDRESS, SortOrder.ASC)


@pytest.mark.asyncio
async def test_change_sort_ignores_unknown_key():
    manager = make_manager()
    call = AsyncMock()

    await change_sort(call, MagicMock(), manager, "SLIPPAGE")

    assert manager.dialog_data == {}
    call.answer.assert_awaited_once()


@pytest.mark.asyncio
async def test_refresh_reports_load_error():
    service = make_service(BalanceSnapshot(error=LOAD_ERROR, loaded_at=LOADED_AT))
    call = AsyncMock()

    await refresh_balances(call, MagicMock(), make_manager(service=service))

    service.load.assert_awaited_once()
    call.answer.assert_awaited_once()


@pytest.mark.asyncio
async def test_refresh_answers_on_unexpected_error():
    service = make_service(BalanceSnapshot())
    service.load = AsyncMock(side_effect=RuntimeError("boom"))
    call = AsyncMock()

    await refresh_balances(call, MagicMock(), make_manager(service=service))

    call.answer.assert_awaited_once_with("😔 Error. Try again later.", show_alert=True)


@pytest.mark.asyncio
async def test_change_sort_answers_on_unexpected_error():
    manager = make_manager({"sort_key": "BALANCE", "sort_order": "sideways"})
    call = AsyncMock()

    await change_sort(call, MagicMock(), manager, "BALANCE")

    call.answer.assert_awaited_once_with("😔 Error. Try again later.", show_alert=True)
    assert manager.dialog_data["sort_order"] == "sideways"
