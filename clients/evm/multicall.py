import asyncio
import logging
from collections.abc import Sequence

import aiohttp
from eth_abi.abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from web3 import AsyncWeb3
from web3.exceptions import TimeExhausted, Web3Exception

from chains.dto import ChainConfig
from clients.evm.base import BaseWeb3Client
from clients.evm.dto import CallPlan, CallPlanEntry, CallResult
from models.errors import TransportError

module_logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError, TimeExhausted)


class AggregationClient(BaseWeb3Client):
    """Executes a CallPlan through Multicall3 ``aggregate3``.

    Every call is sent with ``allowFailure`` so a reverting token only fails
    its own entry. Entries are split into batches of ``batch_size`` which are
    sent one after another. Results are keyed by entry index.
    """

    def __init__(
        self,
        chain_config: ChainConfig,
        w3: AsyncWeb3 | None = None,
        batch_size: int = 200,
    ):
        super().__init__(chain_config, w3)

        if batch_size <= 0:
            raise ValueError("batch_size must be positive")

        self.batch_size = batch_size

    def _encode_entry(self, entry: CallPlanEntry) -> list[tuple]:
        contract = self._get_erc20_contract(entry.contract_address)

        return [
            self._create_call(
                entry.contract_address,
                getattr(contract.functions, call.method.value)(*call.params)._encode_transaction_data()
            )
            for call in entry.calls
        ]

    async def _aggregate(self, calls: list[tuple]) -> list[tuple[bool, bytes]]:
        multicall = self._get_multicall_contract()
        return await multicall.functions.aggregate3(calls).call()

    async def execute(self, plan: CallPlan) -> dict[int, CallResult]:
        results: dict[int, CallResult] = {}
        batches = [
            plan.entries[start:start + self.batch_size]
            for start in range(0, len(plan.entries), self.batch_size)
        ]

        for number, batch in enumerate(batches):
            try:
                results.update(await self._execute_batch(batch))
            except TransportError as e:
                if not results:
                    raise

                module_logger.error(
                    f"RPC became unreachable after {number} of {len(batches)} batches: {e}"
                )
                for rest in batches[number:]:
                    for entry in rest:
                        results[entry.index] = CallResult(False, error="RPC endpoint unreachable")
                break

        return results

    async def _execute_batch(self, batch: Sequence[CallPlanEntry]) -> dict[int, CallResult]:
        calls = []
        for entry in batch:
            calls.extend(self._encode_entry(entry))

        try:
            returned = await self._aggregate(calls)
        except TRANSPORT_ERRORS as e:
            raise TransportError(
                f"RPC endpoint {self.chain_config.rpc_url} is unreachable: {e}"
            ) from e
        except (Web3Exception, ValueError) as e:
            module_logger.warning(
                f"aggregate3 failed for {batch[0].reference}..{batch[-1].reference}: {e}"
            )
            return {entry.index: CallResult(False, error=f"aggregate3 failed: {e}") for entry in batch}

        if len(returned) != len(calls):
            module_logger.warning(
                f"aggregate3 returned {len(returned)} results for {len(calls)} calls"
            )
            return {entry.index: CallResult(False, error="unexpected result count") for entry in batch}

        results = {}
        position = 0
        for entry in batch:
            chunk = returned[position:position + len(entry.calls)]
            position += len(entry.calls)
            results[entry.index] = self._to_call_result(entry, chunk)

        return results

    @staticmethod
    def _to_call_result(entry: CallPlanEntry, returned: Sequence[tuple[bool, bytes]]) -> CallResult:
        values = []

        for call, (success, data) in zip(entry.calls, returned):
            if not (success and data):
                return CallResult(
                    False, error=f"{call.method.value} reverted or returned no data"
                )

            try:
                value = abi_decode(["uint256"], bytes(data))[0]
            except DecodingError as e:
                return CallResult(
                    False, error=f"{call.method.value} returned malformed data: {e}"
                )
            values.append(hex(value))

        return CallResult(True, tuple(values))
