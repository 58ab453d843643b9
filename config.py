from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chains import registery
from chains.dto import ChainConfig


BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    BOT_TOKEN: str = Field(default="", description="Telegram bot token")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    TARGET_ACCOUNT: str = Field(
        default="0xf977814e90da44bfa03b6295a0616a897441acec",
        description="Account whose token balances are displayed",
    )
    CHAIN_ID: int = Field(default=137, description="Chain the balances are read from")
    RPC_URL: str | None = Field(default=None, description="Override for the chain RPC endpoint")

    TOKEN_LIST_URL: str = Field(
        default="https://gateway.ipfs.io/ipns/tokens.uniswap.org",
        description="Token list registry",
    )
    TOKEN_LIST_TIMEOUT: float = Field(default=30, gt=0, description="Token list request timeout, seconds")

    MULTICALL_BATCH_SIZE: int = Field(default=200, gt=0, description="Tokens per aggregate3 call")
    TABLE_MAX_ROWS: int = Field(default=40, gt=0, description="Rows rendered in the balance table")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    def chain_config(self) -> ChainConfig:
        return registery.resolve(self.CHAIN_ID, self.RPC_URL)


settings = Settings()
