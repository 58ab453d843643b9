from collections.abc import Sequence

from enums.sort import SortKey, SortOrder
from models.dtos import SortState, TokenBalanceRecord


def _as_int(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    try:
        return int(str(value))
    except ValueError:
        return None


def _sort_value(record: TokenBalanceRecord, key: SortKey):
    value = getattr(record, key.field)

    if key.numeric:
        number = _as_int(value)
        return -1 if number is None else number

    if key is SortKey.ADDRESS:
        return value or ""

    return (value or "").casefold()


def present(records: Sequence[TokenBalanceRecord], sort: SortState) -> tuple[TokenBalanceRecord, ...]:
    """Return a new, ordered sequence; ``records`` is left untouched.

    Numeric columns compare by integer magnitude, addresses as plain strings
    and names or symbols case-insensitively. Ties keep their input order in
    both directions.
    """
    if sort.key is None:
        return tuple(records)

    return tuple(
        sorted(
            records,
            key=lambda record: _sort_value(record, sort.key),
            reverse=sort.order is SortOrder.DESC,
        )
    )


def filter_nonzero(records: Sequence[TokenBalanceRecord]) -> tuple[TokenBalanceRecord, ...]:
    return tuple(record for record in records if (_as_int(record.balance) or 0) > 0)


def present_view(records: Sequence[TokenBalanceRecord], sort: SortState) -> tuple[TokenBalanceRecord, ...]:
    return filter_nonzero(present(records, sort))


def toggle_sort(state: SortState, key: SortKey) -> SortState:
    if state.key is key:
        return SortState(key=key, order=state.order.flipped())

    return SortState(key=key, order=SortOrder.ASC)
