from dataclasses import replace

from chains.dto import ChainConfig


class ChainRegistry:
    def __init__(self, chains: list[ChainConfig]):
        self._chains: dict[int, ChainConfig] = {cfg.chain_id: cfg for cfg in chains}

    def get(self, chain_id: int) -> ChainConfig | None:
        return self._chains.get(chain_id)

    def resolve(self, chain_id: int, rpc_url: str | None = None) -> ChainConfig:
        cfg = self.get(chain_id)

        if cfg is None:
            known = ", ".join(str(i) for i in self._chains)
            raise ValueError(f"Unknown chain id {chain_id}, expected one of: {known}")

        if rpc_url:
            cfg = replace(cfg, rpc_url=rpc_url)

        return cfg
