from dataclasses import dataclass


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int
    name: str
    display_name: str
    symbol: str
    explorer: str
    rpc_url: str
    multicall3_address: str

    def address_url(self, address: str) -> str:
        return f"{self.explorer}address/{address}"
