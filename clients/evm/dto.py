from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from enums.erc20 import Erc20Method


@dataclass(frozen=True)
class ContractCall:
    method: Erc20Method
    params: tuple[Any, ...] = ()


@dataclass(frozen=True)
class CallPlanEntry:
    index: int
    address: str
    contract_address: str
    calls: tuple[ContractCall, ...]

    @property
    def reference(self) -> str:
        return f"token-{self.index}"


@dataclass(frozen=True)
class CallPlan:
    target_account: str
    entries: tuple[CallPlanEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class CallResult:
    success: bool
    values: tuple[str, ...] = ()
    error: str | None = None


RawCallResult = Mapping[int, CallResult]
