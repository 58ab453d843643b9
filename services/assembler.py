import logging
from collections.abc import Mapping

from clients.evm.dto import CallPlan, CallPlanEntry, CallResult
from models.dtos import Failed, Resolved, TokenBalanceRecord, TokenDescriptor
from models.errors import DecodeError
from services import codec

module_logger = logging.getLogger(__name__)


def _resolve_entry(
    entry: CallPlanEntry,
    result: CallResult | None,
    token: TokenDescriptor | None,
) -> Resolved | Failed:
    if result is None:
        return Failed(entry.index, entry.address, "no result")

    if not result.success:
        return Failed(entry.index, entry.address, result.error or "call failed")

    if len(result.values) != 2:
        return Failed(
            entry.index,
            entry.address,
            f"expected 2 values, got {len(result.values)}",
        )

    try:
        total_supply = codec.decode(result.values[0])
        balance = codec.decode(result.values[1])
    except DecodeError as e:
        return Failed(entry.index, entry.address, str(e))

    record = TokenBalanceRecord(
        address=entry.address,
        total_supply=total_supply,
        balance=balance,
        name=token.name if token else None,
        symbol=token.symbol if token else None,
        decimals=token.decimals if token else None,
    )
    return Resolved(entry.index, record)


def resolve(
    plan: CallPlan,
    result: Mapping[int, CallResult],
    tokens: Mapping[int, TokenDescriptor] | None = None,
) -> list[Resolved | Failed]:
    """One outcome per plan entry, in plan order."""
    tokens = tokens or {}

    return [
        _resolve_entry(entry, result.get(entry.index), tokens.get(entry.index))
        for entry in plan.entries
    ]


def assemble(
    plan: CallPlan,
    result: Mapping[int, CallResult],
    tokens: Mapping[int, TokenDescriptor] | None = None,
) -> list[TokenBalanceRecord]:
    outcomes = resolve(plan, result, tokens)

    records = []
    skipped = 0
    for outcome in outcomes:
        if isinstance(outcome, Resolved):
            records.append(outcome.record)
        else:
            skipped += 1
            module_logger.debug(f"Skipping token-{outcome.index} ({outcome.address}): {outcome.reason}")

    if skipped:
        module_logger.warning(f"Skipped {skipped} of {len(outcomes)} tokens without usable results")

    return records
