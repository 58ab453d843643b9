from chains.dto import ChainConfig


polygon = ChainConfig(
    chain_id=137,
    name="polygon",
    display_name="Polygon",
    symbol="POL",
    explorer="https://polygonscan.com/",
    rpc_url="https://polygon-rpc.com",
    multicall3_address="0xcA11bde05977b3631167028862bE2a173976CA11",
)
