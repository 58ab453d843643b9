from enum import Enum


class Erc20Method(str, Enum):
    TOTAL_SUPPLY = "totalSupply"
    BALANCE_OF = "balanceOf"
