from dataclasses import dataclass
from datetime import datetime

from enums.sort import SortKey, SortOrder


@dataclass(frozen=True)
class TokenDescriptor:
    address: str
    chain_id: int
    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None


@dataclass(frozen=True)
class TokenBalanceRecord:
    address: str
    total_supply: str
    balance: str
    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None


@dataclass(frozen=True)
class Resolved:
    index: int
    record: TokenBalanceRecord


@dataclass(frozen=True)
class Failed:
    index: int
    address: str
    reason: str


@dataclass(frozen=True)
class SortState:
    key: SortKey | None = None
    order: SortOrder = SortOrder.ASC

    def to_dict(self) -> dict:
        return {
            "sort_key": self.key.name if self.key else None,
            "sort_order": self.order.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SortState":
        key = data.get("sort_key")
        order = data.get("sort_order") or SortOrder.ASC.value

        return cls(
            key=SortKey[key] if key else None,
            order=SortOrder(order),
        )


@dataclass(frozen=True)
class BalanceSnapshot:
    records: tuple[TokenBalanceRecord, ...] = ()
    failed: tuple[Failed, ...] = ()
    rejected: tuple[str, ...] = ()
    error: str | None = None
    loaded_at: datetime | None = None

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None
