import logging
from collections.abc import Iterable, Sequence

from eth_utils.address import is_address, to_checksum_address

from clients.evm.dto import CallPlan, CallPlanEntry, ContractCall
from enums.erc20 import Erc20Method
from models.dtos import TokenDescriptor
from models.errors import InvalidInputError

module_logger = logging.getLogger(__name__)


def _is_valid_address(address) -> bool:
    return isinstance(address, str) and is_address(address)


def partition_addresses(
    tokens: Iterable[TokenDescriptor],
) -> tuple[list[TokenDescriptor], list[str]]:
    """Split descriptors into plannable tokens and rejected addresses.

    Malformed addresses and repeats of an address already seen (compared
    case-insensitively) are rejected; the first occurrence wins.
    """
    valid: list[TokenDescriptor] = []
    rejected: list[str] = []
    seen: set[str] = set()

    for token in tokens:
        address = token.address

        if not _is_valid_address(address):
            module_logger.warning(f"Dropping token with malformed address -> {address!r}")
            rejected.append(str(address))
            continue

        key = address.lower()
        if key in seen:
            module_logger.warning(f"Dropping duplicate token address -> {address}")
            rejected.append(address)
            continue

        seen.add(key)
        valid.append(token)

    return valid, rejected


def plan(addresses: Sequence[str], target_account: str) -> CallPlan:
    if not addresses:
        raise InvalidInputError("Address list is empty")

    if not _is_valid_address(target_account):
        raise InvalidInputError(f"Malformed target account: {target_account!r}")

    target = to_checksum_address(target_account)

    entries = []
    seen: set[str] = set()

    for index, address in enumerate(addresses):
        if not _is_valid_address(address):
            raise InvalidInputError(f"Malformed contract address at position {index}: {address!r}")

        key = address.lower()
        if key in seen:
            raise InvalidInputError(f"Duplicate contract address at position {index}: {address}")
        seen.add(key)

        entries.append(
            CallPlanEntry(
                index=index,
                address=address,
                contract_address=to_checksum_address(address),
                calls=(
                    ContractCall(Erc20Method.TOTAL_SUPPLY),
                    ContractCall(Erc20Method.BALANCE_OF, (target,)),
                ),
            )
        )

    return CallPlan(target_account=target, entries=tuple(entries))
