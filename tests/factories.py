from eth_abi import encode as abi_encode

from clients.evm.dto import CallResult
from models.dtos import TokenBalanceRecord

TARGET = "0xf977814e90da44bfa03b6295a0616a897441acec"

TOKENS = [
    "0x2791bca1f2de4661ed88a30c99a7a9449aa84174",
    "0xc2132d05d31c914a87c6611c10748aeb04b58e8f",
    "0x8f3cf7ad23cd3cadbd9735aff958023239c6a063",
    "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619",
    "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6",
]


def word(value: int) -> bytes:
    return abi_encode(["uint256"], [value])


def hex_word(value: int) -> str:
    return "0x" + word(value).hex()


def ok(total_supply: int, balance: int) -> CallResult:
    return CallResult(True, (hex_word(total_supply), hex_word(balance)))


def record(address: str = TOKENS[0], total_supply: str = "0", balance: str = "0", **kwargs) -> TokenBalanceRecord:
    return TokenBalanceRecord(address=address, total_supply=total_supply, balance=balance, **kwargs)