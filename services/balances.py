import asyncio
import logging
from datetime import datetime, timezone

from chains.dto import ChainConfig
from clients.evm.multicall import AggregationClient
from clients.token_list import TokenListClient
from models.dtos import BalanceSnapshot, Failed, Resolved
from models.errors import InvalidInputError, TransportError
from services import assembler, planner

module_logger = logging.getLogger(__name__)

LOAD_ERROR = "unable to load token data"


class BalanceService:
    """Loads the balance table of ``target_account`` on one chain.

    The latest result is kept as an immutable ``BalanceSnapshot`` and replaced
    in a single assignment. Concurrent ``load`` calls share one aggregation
    run instead of racing each other.
    """

    def __init__(
        self,
        chain_config: ChainConfig,
        token_list: TokenListClient,
        target_account: str,
        batch_size: int = 200,
        client_cls: type[AggregationClient] = AggregationClient,
    ):
        self.chain_config = chain_config
        self.token_list = token_list
        self.target_account = target_account
        self.batch_size = batch_size
        self._client_cls = client_cls

        self._lock = asyncio.Lock()
        self._snapshot = BalanceSnapshot()

    @property
    def snapshot(self) -> BalanceSnapshot:
        return self._snapshot

    async def load(self) -> BalanceSnapshot:
        if self._lock.locked():
            module_logger.info("Balance load already in progress, waiting for it")
            async with self._lock:
                return self._snapshot

        async with self._lock:
            try:
                snapshot = await self._build_snapshot()
            except TransportError as e:
                module_logger.error(f"Balance load failed: {e}")
                snapshot = BalanceSnapshot(error=LOAD_ERROR, loaded_at=self._now())
            except InvalidInputError as e:
                module_logger.error(f"Balance load rejected its input: {e}")
                snapshot = BalanceSnapshot(error=LOAD_ERROR, loaded_at=self._now())

            self._snapshot = snapshot
            return snapshot

    async def get_snapshot(self) -> BalanceSnapshot:
        if not self._snapshot.is_loaded:
            return await self.load()
        return self._snapshot

    async def _build_snapshot(self) -> BalanceSnapshot:
        module_logger.info(
            f"Loading balances of {self.target_account} on {self.chain_config.display_name}"
        )

        tokens = await self.token_list.fetch()
        valid, rejected = planner.partition_addresses(tokens)

        if not valid:
            module_logger.warning("No valid token addresses to query")
            return BalanceSnapshot(rejected=tuple(rejected), loaded_at=self._now())

        call_plan = planner.plan([t.address for t in valid], self.target_account)

        async with self._client_cls(self.chain_config, batch_size=self.batch_size) as client:
            raw = await client.execute(call_plan)

        outcomes = assembler.resolve(call_plan, raw, dict(enumerate(valid)))
        records = tuple(o.record for o in outcomes if isinstance(o, Resolved))
        failed = tuple(o for o in outcomes if isinstance(o, Failed))

        if failed:
            module_logger.warning(f"Skipped {len(failed)} of {len(outcomes)} tokens without usable results")

        module_logger.info(
            f"Loaded {len(records)} token balances ({len(failed)} failed, {len(rejected)} rejected)"
        )

        return BalanceSnapshot(
            records=records,
            failed=failed,
            rejected=tuple(rejected),
            loaded_at=self._now(),
        )

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)
