from collections.abc import Sequence
from html import escape

from models.dtos import TokenBalanceRecord

NAME_WIDTH = 16


def short_address(address: str) -> str:
    if len(address) <= 12:
        return address
    return f"{address[:6]}…{address[-4:]}"


def short_name(name: str | None) -> str:
    if not name:
        return "-"
    if len(name) <= NAME_WIDTH:
        return name
    return f"{name[:NAME_WIDTH - 1]}…"


def token_label(record: TokenBalanceRecord) -> str:
    return record.symbol or short_address(record.address)


def render_table(records: Sequence[TokenBalanceRecord], max_rows: int) -> str:
    """Monospace table of token, name, decimals, balance and total supply in raw units."""
    if not records:
        return "No tokens with a non-zero balance"

    shown = records[:max_rows]
    rows = [("Token", "Name", "Dec", "Balance", "Total")] + [
        (
            token_label(r),
            short_name(r.name),
            "-" if r.decimals is None else str(r.decimals),
            r.balance,
            r.total_supply,
        )
        for r in shown
    ]
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]

    lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
        for row in rows
    ]

    text = escape("\n".join(lines))
    hidden = len(records) - len(shown)
    if hidden > 0:
        text += f"\n… and {hidden} more"

    return text
