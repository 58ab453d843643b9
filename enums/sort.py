from enum import Enum


class SortKey(Enum):
    ADDRESS = ("address", "Address", False)
    NAME = ("name", "Name", False)
    SYMBOL = ("symbol", "Symbol", False)
    DECIMALS = ("decimals", "Decimals", True)
    TOTAL_SUPPLY = ("total_supply", "Total", True)
    BALANCE = ("balance", "Balance", True)

    @property
    def field(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @property
    def numeric(self) -> bool:
        return self.value[2]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def arrow(self) -> str:
        return "▲" if self is SortOrder.ASC else "▼"

    def flipped(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC
